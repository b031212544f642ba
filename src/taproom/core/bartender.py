"""Bartender entity.

Usage:
    roster = Roster()
    phil = Bartender("Phil", roster)
    phil.intro()       # "Hello, my name is Phil!"
    phil.make_drink()  # "Here is your drink. It contains whiskey, vermouth, olives"

Drink steps are module-private functions run only by make_drink(). Looking one
up on a bartender instance raises PrivateMethodError. The check is per instance:
on the Bartender class itself the steps are simply missing and lookup raises a
plain AttributeError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from taproom.roster.protocol import Registry

__all__ = [
    "Bartender",
    "PrivateMethodError",
]


class PrivateMethodError(AttributeError):
    """Raised when a private drink step is accessed from outside the bartender."""

    pass


def _choose_liquor(ingredients: list[str]) -> None:
    ingredients.append("whiskey")


def _choose_mixer(ingredients: list[str]) -> None:
    ingredients.append("vermouth")


def _choose_garnish(ingredients: list[str]) -> None:
    ingredients.append("olives")


# Run in order by make_drink()
_DRINK_STEPS = (_choose_liquor, _choose_mixer, _choose_garnish)
_PRIVATE_STEP_NAMES = frozenset(step.__name__.lstrip("_") for step in _DRINK_STEPS)


class Bartender:
    """Named entity recorded in a registry when constructed.

    Equality is identity: two bartenders with the same name are distinct.

    Args:
        name: Any string, including empty or duplicate names.
        roster: Registry the new bartender is appended to.
    """

    __slots__ = ("name", "__weakref__")

    def __init__(self, name: str, roster: Registry):
        self.name = name
        roster.register(self)

    def intro(self) -> str:
        """Greeting built from the current name."""
        return f"Hello, my name is {self.name}!"

    def make_drink(self) -> str:
        """Run the fixed drink steps and describe the result.

        Ingredients are collected in a list local to this call, so nothing is
        left on the bartender afterwards.

        Returns:
            Description listing ingredients in the order they were added.
        """
        ingredients: list[str] = []
        for step in _DRINK_STEPS:
            step(ingredients)
        return f"Here is your drink. It contains {', '.join(ingredients)}"

    def __getattr__(self, attr: str) -> object:
        # Only reached when normal lookup fails
        if attr in _PRIVATE_STEP_NAMES:
            raise PrivateMethodError(
                f"private method '{attr}' called for {type(self).__name__}"
            )
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{attr}'")

    def __repr__(self) -> str:
        return f"Bartender(name={self.name!r})"
