"""Tests for the Bartender entity.

Critical Invariants:
- Construction registers the bartender at the end of the roster
- make_drink() is deterministic and keeps no state on the bartender
- Drink steps cannot be reached from outside
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from taproom import Bartender, PrivateMethodError, Roster, TaproomSettings
from taproom.core import bartender as bartender_module

DRINK = "Here is your drink. It contains whiskey, vermouth, olives"


def test_construction_appends_to_roster(roster):
    """New bartender is the last roster entry right after construction."""
    phil = Bartender("Phil", roster)

    assert roster.list_all()[-1] is phil
    assert phil in roster


@given(name=st.text())
def test_name_round_trip(name):
    """Any text given as name is read back unchanged."""
    roster = Roster(TaproomSettings())
    assert Bartender(name, roster).name == name


def test_name_is_writable(roster):
    phil = Bartender("Phil", roster)
    phil.name = "Philip"

    assert phil.name == "Philip"
    assert phil.intro() == "Hello, my name is Philip!"


def test_empty_and_duplicate_names_are_allowed(roster):
    """No validation or deduplication by name."""
    first = Bartender("", roster)
    second = Bartender("Sam", roster)
    third = Bartender("Sam", roster)

    assert first.name == ""
    assert second is not third
    assert second != third
    assert len(roster) == 3


def test_intro_format(roster):
    assert Bartender("Nancy", roster).intro() == "Hello, my name is Nancy!"


def test_make_drink_is_deterministic(roster):
    """Same description every call, whatever the name."""
    phil = Bartender("Phil", roster)
    nobody = Bartender("", roster)

    assert [phil.make_drink() for _ in range(3)] == [DRINK] * 3
    assert nobody.make_drink() == DRINK


def test_make_drink_leaves_no_state(roster):
    """Ingredients are call-local; nothing is stored on the bartender."""
    phil = Bartender("Phil", roster)
    phil.make_drink()

    assert not hasattr(phil, "cocktail_ingredients")
    assert not hasattr(phil, "__dict__")


@pytest.mark.parametrize("step", ["choose_liquor", "choose_mixer", "choose_garnish"])
def test_drink_steps_are_private(roster, step):
    """CRITICAL: drink steps raise PrivateMethodError when accessed externally."""
    phil = Bartender("Phil", roster)

    with pytest.raises(PrivateMethodError, match=f"private method '{step}'"):
        getattr(phil, step)()

    assert not hasattr(phil, step)
    assert step not in dir(phil)


@pytest.mark.parametrize("step", ["choose_liquor", "choose_mixer", "choose_garnish"])
def test_drink_steps_missing_on_class(step):
    """Privacy check is per instance: class lookup is a plain AttributeError."""
    with pytest.raises(AttributeError) as exc_info:
        getattr(Bartender, step)

    assert not isinstance(exc_info.value, PrivateMethodError)
    assert not hasattr(Bartender, step)


def test_drink_steps_not_exported():
    assert set(bartender_module.__all__) == {"Bartender", "PrivateMethodError"}


def test_unknown_attribute_is_plain_attribute_error(roster):
    phil = Bartender("Phil", roster)

    with pytest.raises(AttributeError) as exc_info:
        phil.pour_beer()  # type: ignore[attr-defined]

    assert not isinstance(exc_info.value, PrivateMethodError)


def test_later_construction_does_not_affect_earlier(roster):
    """Constructing B leaves A's name and outputs unchanged."""
    a = Bartender("Phil", roster)
    greeting, drink = a.intro(), a.make_drink()

    Bartender("Nancy", roster)

    assert a.name == "Phil"
    assert a.intro() == greeting
    assert a.make_drink() == drink


def test_repr_shows_name(roster):
    assert repr(Bartender("Phil", roster)) == "Bartender(name='Phil')"
