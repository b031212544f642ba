"""Bartender registries."""

from taproom.roster.protocol import Registry
from taproom.roster.roster import Roster

__all__ = [
    "Registry",
    "Roster",
]
