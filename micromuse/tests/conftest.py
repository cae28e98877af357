"""
Test configuration and fixtures for the micromuse test suite.
"""

import os
from collections.abc import Generator

import pytest

os.environ.setdefault("LOGGING_ENVIRONMENT", "unit_test")
os.environ.setdefault("LOGGING_LEVEL", "DEBUG")

from micromuse.config import reset_config  # noqa: E402
from micromuse.logging.logging_config import reset_logging  # noqa: E402
from micromuse.models import Room  # noqa: E402


@pytest.fixture(autouse=True)
def reset_config_singleton() -> Generator[None, None, None]:
    """Reset configuration and logging state around each test."""
    reset_config()
    reset_logging()
    yield
    reset_config()
    reset_logging()


@pytest.fixture
def room_a() -> Room:
    """The library, south of the hall."""
    return Room("miskatonic_library", name="Orne Library", description="Shelves of forbidden volumes.")


@pytest.fixture
def room_b() -> Room:
    """The hall, north of the library."""
    return Room("miskatonic_hall", name="Main Hall", description="A draughty entrance hall.")


@pytest.fixture
def sample_room_data() -> dict:
    """Sample room data dictionary."""
    return {
        "id": "arkham_001",
        "name": "Derby Street",
        "description": "A narrow street lined with gambrel roofs.",
    }
