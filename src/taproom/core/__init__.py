"""Core entity types.

Architecture Note:
    core/ holds the entity itself and no registry state. Registries live in
    roster/, which depends on core/ and never the other way round.
"""

from taproom.core.bartender import Bartender, PrivateMethodError

__all__ = [
    "Bartender",
    "PrivateMethodError",
]
