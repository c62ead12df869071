"""Tests for the corner angle (center handle) drag.

Tests cover:
- Node moves to the pointer's projection on the center radial
- Both walls of the pair follow the node; unrelated walls pass through
- Angle limits on either side
- Input immutability
"""

import pytest

from planedit.core.corner_drag import apply_corner_center_drag, move_corner_node
from planedit.core.corner_geometry import resolve_corner_control_geometry
from planedit.core.corner_resolver import resolve_corner_pair
from planedit.models import Point2D, Vector2D

ORIGIN = Point2D(x=0, y=0)


def resolve(walls):
    pair = resolve_corner_pair(walls, ORIGIN, ["a", "b"])
    assert pair is not None
    geometry = resolve_corner_control_geometry(pair)
    assert geometry is not None
    return pair, geometry


def find(walls, wall_id):
    return next(w for w in walls if w.id == wall_id)


class TestCenterDrag:

    def test_moves_shared_node_along_radial(self, corner_walls):
        pair, geometry = resolve(corner_walls)
        result = apply_corner_center_drag(corner_walls, pair, geometry, Point2D(x=10, y=10))
        assert result is not None
        a, b = find(result, "a"), find(result, "b")
        assert (a.start.x, a.start.y) == pytest.approx((10, 10))
        assert (b.start.x, b.start.y) == pytest.approx((10, 10))
        assert (a.end.x, a.end.y) == (100, 0)
        assert (b.end.x, b.end.y) == (0, 100)

    def test_off_axis_pointer_is_projected(self, corner_walls):
        pair, geometry = resolve(corner_walls)
        result = apply_corner_center_drag(corner_walls, pair, geometry, Point2D(x=20, y=0))
        a = find(result, "a")
        assert (a.start.x, a.start.y) == pytest.approx((10, 10))

    def test_wall_ending_at_corner_moves_its_end(self, make_wall):
        walls = [make_wall("a", (100, 0), (0, 0)), make_wall("b", (0, 0), (0, 100))]
        pair, geometry = resolve(walls)
        result = apply_corner_center_drag(walls, pair, geometry, Point2D(x=10, y=10))
        a = find(result, "a")
        assert (a.start.x, a.start.y) == (100, 0)
        assert (a.end.x, a.end.y) == pytest.approx((10, 10))

    def test_unrelated_wall_passes_through(self, corner_walls, make_wall):
        other = make_wall("c", (200, 200), (300, 200))
        walls = corner_walls + [other]
        pair, geometry = resolve(walls)
        result = apply_corner_center_drag(walls, pair, geometry, Point2D(x=10, y=10))
        assert [w.id for w in result] == ["a", "b", "c"]
        assert result[2] is other

    def test_inputs_not_mutated(self, corner_walls):
        pair, geometry = resolve(corner_walls)
        apply_corner_center_drag(corner_walls, pair, geometry, Point2D(x=10, y=10))
        assert (corner_walls[0].start.x, corner_walls[0].start.y) == (0, 0)
        assert (corner_walls[1].start.x, corner_walls[1].start.y) == (0, 0)


class TestAngleLimits:

    def test_opening_past_max_angle_rejected(self, corner_walls):
        # Node at (45, 45) opens the corner to about 168 degrees
        pair, geometry = resolve(corner_walls)
        assert apply_corner_center_drag(corner_walls, pair, geometry, Point2D(x=45, y=45)) is None

    def test_pinching_below_min_angle_rejected(self, corner_walls):
        # Node at (-500, -500) pinches the corner to about 10 degrees
        pair, geometry = resolve(corner_walls)
        assert apply_corner_center_drag(corner_walls, pair, geometry, Point2D(x=-500, y=-500)) is None

    def test_limits_are_configurable(self, corner_walls):
        pair, geometry = resolve(corner_walls)
        result = apply_corner_center_drag(
            corner_walls, pair, geometry, Point2D(x=45, y=45), max_angle_deg=170.0,
        )
        assert result is not None

    def test_zero_radial(self, corner_walls):
        pair, geometry = resolve(corner_walls)
        bad = geometry.model_copy(update={"center_radial": Vector2D(x=0, y=0)})
        assert apply_corner_center_drag(corner_walls, pair, bad, Point2D(x=10, y=10)) is None


class TestMoveCornerNode:

    def test_collapsing_a_wall_fails(self, corner_walls):
        assert move_corner_node(corner_walls, ORIGIN, Point2D(x=100, y=0)) is None

    def test_only_touching_endpoints_move(self, corner_walls, make_wall):
        walls = corner_walls + [make_wall("c", (500, 0), (500, 100))]
        moved = move_corner_node(walls, ORIGIN, Point2D(x=5, y=5))
        assert (moved[2].start.x, moved[2].start.y) == (500, 0)
        assert (moved[0].start.x, moved[0].start.y) == (5, 5)
