"""Registry protocol for anything bartenders can be recorded in.

Usage:
    roster = Roster()
    phil = Bartender("Phil", roster)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from taproom.core.bartender import Bartender


class Registry(Protocol):
    """Ordered, append-only record of constructed bartenders."""

    def register(self, bartender: Bartender) -> None:
        """Record a newly constructed bartender."""
        ...

    def list_all(self) -> list[Bartender]:
        """All recorded bartenders in construction order."""
        ...
