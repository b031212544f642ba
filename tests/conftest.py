"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from taproom import Roster, TaproomSettings


@pytest.fixture
def roster():
    """Fresh Roster with locked registration."""
    return Roster(TaproomSettings(lock_registration=True))


@pytest.fixture
def unlocked_roster():
    """Fresh Roster without a registration lock."""
    return Roster(TaproomSettings(lock_registration=False))
