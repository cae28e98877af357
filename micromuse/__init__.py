"""
micromuse: rooms and the directed links between them in a MUD-style map.
"""

from .models import Link, Room

__all__ = ["Link", "Room"]
