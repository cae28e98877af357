"""Map models: rooms and the links between them."""

from .link import Link
from .room import Room

__all__ = ["Link", "Room"]
