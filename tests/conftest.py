# tests/conftest.py
import pytest

from planedit.models import Point2D, Room, Wall
from planedit.services.memory_host import InMemoryGraphHost


def _build_wall(wall_id, start, end, thickness=100.0, **overrides):
    fields = dict(
        id=wall_id,
        start=Point2D(x=start[0], y=start[1]),
        end=Point2D(x=end[0], y=end[1]),
        thickness=thickness,
        height=3000.0,
        wall_type="interior",
        wall_type_id="test",
    )
    fields.update(overrides)
    return Wall(**fields)


@pytest.fixture
def make_wall():
    """Factory for walls with test defaults; start/end are (x, y) tuples."""
    return _build_wall


@pytest.fixture
def corner_walls():
    """Two perpendicular walls meeting at the origin."""
    return [
        _build_wall("a", (0, 0), (100, 0)),
        _build_wall("b", (0, 0), (0, 100)),
    ]


@pytest.fixture
def room():
    return Room(
        id="r1",
        name="Lobby",
        vertices=[Point2D(x=0, y=0), Point2D(x=100, y=0), Point2D(x=0, y=100)],
        wall_ids=["a", "b"],
        area=5000.0,
    )


@pytest.fixture
def host(corner_walls, room):
    return InMemoryGraphHost(corner_walls, [room])
