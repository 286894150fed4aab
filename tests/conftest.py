"""Pytest conftest: ensure src is on path for heroengine imports; shared catalog fixtures."""

import sys
from pathlib import Path

import pytest

src = Path(__file__).resolve().parent.parent / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from heroengine.data.catalog import Catalog  # noqa: E402
from heroengine.data.entity import Entity, Statline  # noqa: E402


def make_entity(entity_id: int, name: str, *stats: int, image: str = "") -> Entity:
    """Entity from six stats in canonical order (intelligence .. combat)."""
    return Entity(
        id=entity_id,
        name=name,
        image=image or f"https://example.test/{entity_id}.jpg",
        powerstats=Statline(*stats),
    )


@pytest.fixture
def heroes():
    return [
        make_entity(1, "A-Bomb", 38, 100, 17, 80, 24, 64),
        make_entity(2, "Ant-Man", 100, 18, 23, 28, 32, 32),
        make_entity(3, "Bane", 90, 55, 43, 80, 62, 82),
        make_entity(4, "Twin", 100, 18, 23, 28, 32, 32),
    ]


@pytest.fixture
def catalog(heroes):
    return Catalog(heroes)
