"""
Link model for micromuse.

A Link is a directed edge in the navigable map: it connects an origin room
to a destination room through a named exit ("north", "climb ladder", ...).
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, eq=False)
class Link:
    """
    Immutable directed edge between two rooms.

    The rooms are referenced, never owned or copied: ``from_`` and ``to``
    return the very objects passed to the constructor, and their lifetime
    belongs to whatever structure keeps them. No field is validated.

    ``from`` is a reserved word, so the origin is exposed as ``from_``.
    Equality and hashing are by identity.
    """

    from_: Any
    exit: str
    to: Any
