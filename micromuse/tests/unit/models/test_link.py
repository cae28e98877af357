"""
Unit tests for the Link model.

Covers accessor round trips, immutability and the non-owning references
a Link keeps to its rooms.
"""

import dataclasses
import subprocess
import sys
from pathlib import Path

import pytest

from micromuse import Link as PackageLink
from micromuse.models import Link, Room


def test_link_accessors_return_constructor_values(room_a, room_b):
    """Test Link exposes exactly what it was built with."""
    link = Link(room_a, "north", room_b)

    assert link.from_ is room_a
    assert link.exit == "north"
    assert link.to is room_b


def test_link_keyword_construction(room_a, room_b):
    """Test Link accepts keyword arguments."""
    link = Link(from_=room_a, exit="climb ladder", to=room_b)

    assert link.from_ is room_a
    assert link.exit == "climb ladder"
    assert link.to is room_b


def test_link_accessors_are_idempotent(room_a, room_b):
    """Test repeated accessor reads return the same value."""
    link = Link(room_a, "north", room_b)

    for _ in range(3):
        assert link.from_ is room_a
        assert link.exit == "north"
        assert link.to is room_b


@pytest.mark.parametrize("field_name", ["from_", "exit", "to"])
def test_link_fields_cannot_be_reassigned(room_a, room_b, field_name):
    """Test assignment to any field fails and leaves the link unchanged."""
    link = Link(room_a, "north", room_b)

    with pytest.raises(dataclasses.FrozenInstanceError):
        setattr(link, field_name, "elsewhere")

    assert link.from_ is room_a
    assert link.exit == "north"
    assert link.to is room_b


def test_link_fields_cannot_be_deleted(room_a, room_b):
    """Test deleting a field fails."""
    link = Link(room_a, "north", room_b)

    with pytest.raises(AttributeError):
        del link.exit

    assert link.exit == "north"


def test_link_accepts_unvalidated_values():
    """Test Link performs no validation on its inputs."""
    link = Link(None, "", None)

    assert link.from_ is None
    assert link.exit == ""
    assert link.to is None


def test_link_accepts_room_identifiers():
    """Test Link can reference rooms by plain identifier."""
    link = Link("arkham_001", "east", "arkham_002")

    assert link.from_ == "arkham_001"
    assert link.to == "arkham_002"


def test_link_does_not_own_rooms(room_a, room_b):
    """Test changes to a referenced room are visible through the link."""
    link = Link(room_a, "north", room_b)

    room_b.name = "Flooded Hall"

    assert link.to.name == "Flooded Hall"


def test_link_self_loop(room_a):
    """Test a link may lead back to its origin."""
    link = Link(room_a, "wait", room_a)

    assert link.from_ is link.to


def test_links_with_equal_triples_expose_equal_values(room_a, room_b):
    """Test value consistency is observable through accessors, not identity."""
    first = Link(room_a, "north", room_b)
    second = Link(room_a, "north", room_b)

    assert (first.from_, first.exit, first.to) == (second.from_, second.exit, second.to)
    assert first != second
    assert first == first


def test_link_is_hashable_by_identity(room_a, room_b):
    """Test links can be stored in sets and as dictionary keys."""
    first = Link(room_a, "north", room_b)
    second = Link(room_a, "north", room_b)

    assert len({first, second, first}) == 2


def test_link_repr_shows_fields(room_a, room_b):
    """Test repr includes the exit label and both rooms."""
    text = repr(Link(room_a, "north", room_b))

    assert "north" in text
    assert "miskatonic_library" in text
    assert "miskatonic_hall" in text


def test_link_exported_from_package():
    """Test Link is importable from the package root."""
    assert PackageLink is Link


def test_link_shared_between_rooms_in_both_directions():
    """Test a pair of links models a two-way passage."""
    street = Room("arkham_001", name="Derby Street")
    alley = Room("arkham_002", name="Alley")

    there = Link(street, "east", alley)
    back = Link(alley, "west", street)

    assert there.to is back.from_
    assert back.to is there.from_


def test_link_construction_writes_no_output():
    """Test building a link has no side effect beyond allocation."""
    project_root = Path(__file__).resolve().parents[4]
    script = "from micromuse import Link\nLink('arkham_001', 'north', 'arkham_002')\n"

    result = subprocess.run(
        [sys.executable, "-c", script], cwd=project_root, capture_output=True, text=True, check=True
    )

    assert result.stdout == ""
    assert result.stderr == ""


def test_link_never_inspects_rooms():
    """Test rooms whose attributes raise do not affect construction."""

    class BrokenRoom:
        @property
        def id(self):
            raise RuntimeError("room registry unavailable")

    origin, destination = BrokenRoom(), BrokenRoom()
    link = Link(origin, "north", destination)

    assert link.from_ is origin
    assert link.to is destination
