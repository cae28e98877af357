"""
Room model for micromuse.

Rooms are the nodes that Links connect. They hold only their static
description; exits are expressed as Link objects kept elsewhere.
"""

from typing import Any

from ..exceptions import ValidationError, create_error_context
from ..logging.logging_config import get_logger

logger = get_logger(__name__)


class Room:
    """
    Represents a room in the navigable map.

    Rooms compare by identity.
    """

    def __init__(self, room_id: str, name: str = "", description: str = ""):
        """
        Initialize a Room.

        Args:
            room_id: Unique identifier of the room
            name: Short display name
            description: Long description shown to players

        Raises:
            ValidationError: If room_id is not a non-empty string
        """
        if not isinstance(room_id, str) or not room_id:
            context = create_error_context(operation="room_init")
            raise ValidationError("Room ID must be a non-empty string", context, field="id", value=room_id)

        self.id = room_id
        self.name = name
        self.description = description

        logger.debug("Initialized room", room_id=self.id, room_name=self.name)

    @classmethod
    def from_dict(cls, room_data: dict[str, Any]) -> "Room":
        """
        Build a Room from a room data dictionary.

        Args:
            room_data: Dictionary with "id" and optional "name" and "description"

        Returns:
            Room instance
        """
        return cls(
            room_data.get("id", ""),
            name=room_data.get("name", ""),
            description=room_data.get("description", ""),
        )

    def to_dict(self) -> dict[str, str]:
        """Get a dictionary snapshot of the room."""
        return {"id": self.id, "name": self.name, "description": self.description}

    def __repr__(self) -> str:
        return f"Room(id={self.id!r}, name={self.name!r})"
