"""Taproom: bartenders, their roster, and a drink made in private steps.

Usage:
    from taproom import Bartender, Roster

    roster = Roster()
    phil = Bartender("Phil", roster)
    nancy = roster.hire("Nancy")

    phil.intro()          # "Hello, my name is Phil!"
    nancy.make_drink()    # "Here is your drink. It contains whiskey, vermouth, olives"
    roster.list_all()     # [Bartender(name='Phil'), Bartender(name='Nancy')]
"""

__version__ = "0.1.0"

# Configuration
from taproom.config import TaproomSettings, configure_logging

# Core entity
from taproom.core import Bartender, PrivateMethodError

# Registries
from taproom.roster import Registry, Roster

__all__ = [
    # Version
    "__version__",
    # Core
    "Bartender",
    "PrivateMethodError",
    # Roster
    "Registry",
    "Roster",
    # Config
    "TaproomSettings",
    "configure_logging",
]
