"""Roster: the explicitly owned registry of bartenders.

A roster lives exactly as long as whatever created it. There is no
process-wide default; pass the roster to each Bartender you construct.

Usage:
    roster = Roster()
    phil = roster.hire("Phil")
    nancy = Bartender("Nancy", roster)

    assert roster.list_all() == [phil, nancy]
    assert len(roster) == 2
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import AbstractContextManager, nullcontext

from taproom.config.settings import TaproomSettings
from taproom.core.bartender import Bartender

logger = logging.getLogger(__name__)


class Roster:
    """Insertion-ordered registry holding shared references to bartenders.

    Never pruned: length always equals the number of bartenders constructed
    against it, and order matches construction order.

    Args:
        settings: Roster configuration. Loaded from the environment when omitted.
    """

    def __init__(self, settings: TaproomSettings | None = None):
        settings = settings or TaproomSettings()
        self._members: list[Bartender] = []
        # id() is stable: members are never removed, so never collected
        self._member_ids: set[int] = set()
        self._lock: AbstractContextManager[object] = (
            threading.Lock() if settings.lock_registration else nullcontext()
        )

    def register(self, bartender: Bartender) -> None:
        """Append a bartender. Re-registering the same instance is a no-op.

        Args:
            bartender: Bartender to record.
        """
        with self._lock:
            if id(bartender) in self._member_ids:
                logger.debug("Bartender %r already on roster, skipping", bartender.name)
                return
            self._members.append(bartender)
            self._member_ids.add(id(bartender))
            position = len(self._members)
        logger.debug("Registered bartender %r at position %d", bartender.name, position)

    def hire(self, name: str) -> Bartender:
        """Construct a bartender against this roster.

        Args:
            name: Bartender name, unconstrained.

        Returns:
            The new bartender, already the last roster entry.
        """
        return Bartender(name, self)

    def list_all(self) -> list[Bartender]:
        """Snapshot of all bartenders in construction order.

        Returns:
            New list; changing it leaves the roster untouched. Elements are
            the shared bartender objects, not copies.
        """
        with self._lock:
            return list(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Bartender]:
        return iter(self.list_all())

    def __contains__(self, bartender: object) -> bool:
        return id(bartender) in self._member_ids

    def __repr__(self) -> str:
        return f"Roster(size={len(self._members)})"
