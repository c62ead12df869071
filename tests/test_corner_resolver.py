"""Tests for corner pair resolution.

Tests cover:
- L-corners with either endpoint orientation
- Match count failures (none, one, three walls)
- Collinear and overlapping walls
- Thickness-proportional tolerance
- Candidate id filtering
"""

import math

import pytest

from planedit.core.corner_resolver import find_corner_endpoint, resolve_corner_pair
from planedit.models import Point2D, WallEndpoint

ORIGIN = Point2D(x=0, y=0)


class TestFindCornerEndpoint:

    def test_start_within_radius(self, make_wall):
        wall = make_wall("w", (0, 0), (100, 0))
        assert find_corner_endpoint(wall, Point2D(x=3, y=0), 5) == WallEndpoint.START

    def test_end_within_radius(self, make_wall):
        wall = make_wall("w", (0, 0), (100, 0))
        assert find_corner_endpoint(wall, Point2D(x=99, y=1), 5) == WallEndpoint.END

    def test_outside_radius(self, make_wall):
        wall = make_wall("w", (0, 0), (100, 0))
        assert find_corner_endpoint(wall, Point2D(x=50, y=0), 5) is None

    def test_nearest_endpoint_wins(self, make_wall):
        wall = make_wall("w", (0, 0), (10, 0))
        assert find_corner_endpoint(wall, Point2D(x=8, y=0), 20) == WallEndpoint.END


class TestResolveCornerPair:

    def test_perpendicular_corner(self, corner_walls):
        pair = resolve_corner_pair(corner_walls, ORIGIN, ["a", "b"], 0.5)
        assert pair is not None
        assert pair.wall_ids == ("a", "b")
        assert pair.endpoint_a == WallEndpoint.START
        assert pair.endpoint_b == WallEndpoint.START
        assert (pair.away_a.x, pair.away_a.y) == pytest.approx((1, 0))
        assert (pair.away_b.x, pair.away_b.y) == pytest.approx((0, 1))
        assert pair.length_a == pytest.approx(100)
        assert pair.length_b == pytest.approx(100)

    def test_wall_ending_at_corner(self, make_wall):
        walls = [
            make_wall("a", (0, 0), (100, 0)),
            make_wall("b", (0, 100), (0, 0)),
        ]
        pair = resolve_corner_pair(walls, ORIGIN)
        assert pair is not None
        assert pair.endpoint_b == WallEndpoint.END
        assert (pair.away_b.x, pair.away_b.y) == pytest.approx((0, 1))

    def test_node_is_midpoint_of_touching_endpoints(self, make_wall):
        walls = [
            make_wall("a", (0, 0), (100, 0)),
            make_wall("b", (2, 0), (2, 100)),
        ]
        pair = resolve_corner_pair(walls, Point2D(x=1, y=0))
        assert pair is not None
        assert (pair.node.x, pair.node.y) == pytest.approx((1, 0))

    def test_approximate_point_within_tolerance(self, corner_walls):
        pair = resolve_corner_pair(corner_walls, Point2D(x=30, y=0), tolerance_factor=0.5)
        assert pair is not None
        assert (pair.node.x, pair.node.y) == pytest.approx((0, 0))

    def test_approximate_point_outside_tolerance(self, corner_walls):
        assert resolve_corner_pair(corner_walls, Point2D(x=30, y=0), tolerance_factor=0.2) is None

    def test_tolerance_scales_with_each_wall_thickness(self, make_wall):
        walls = [
            make_wall("a", (0, 0), (100, 0), thickness=100),
            make_wall("b", (0, 0), (0, 100), thickness=20),
        ]
        # 15 units away: inside a's radius (50), outside b's (10)
        assert resolve_corner_pair(walls, Point2D(x=15, y=0), tolerance_factor=0.5) is None

    def test_no_walls_at_point(self, corner_walls):
        assert resolve_corner_pair(corner_walls, Point2D(x=500, y=500)) is None

    def test_single_wall_at_point(self, corner_walls):
        assert resolve_corner_pair(corner_walls, Point2D(x=100, y=0)) is None

    def test_three_walls_at_point(self, corner_walls, make_wall):
        walls = corner_walls + [make_wall("c", (0, 0), (-70, -70))]
        assert resolve_corner_pair(walls, ORIGIN) is None

    def test_candidate_ids_restrict_matches(self, corner_walls, make_wall):
        walls = corner_walls + [make_wall("c", (0, 0), (-70, -70))]
        pair = resolve_corner_pair(walls, ORIGIN, ["a", "c"])
        assert pair is not None
        assert pair.wall_ids == ("a", "c")

    def test_empty_candidate_ids_consider_all_walls(self, corner_walls):
        assert resolve_corner_pair(corner_walls, ORIGIN, []) is not None

    def test_collinear_walls(self, make_wall):
        walls = [
            make_wall("a", (0, 0), (100, 0)),
            make_wall("c", (0, 0), (-100, 0)),
        ]
        assert resolve_corner_pair(walls, ORIGIN) is None

    def test_overlapping_walls(self, make_wall):
        walls = [
            make_wall("a", (0, 0), (100, 0)),
            make_wall("d", (0, 0), (50, 0)),
        ]
        assert resolve_corner_pair(walls, ORIGIN) is None

    def test_nearly_collinear_within_epsilon(self, make_wall):
        angle = math.radians(0.1)
        walls = [
            make_wall("a", (0, 0), (100, 0)),
            make_wall("c", (0, 0), (-100 * math.cos(angle), 100 * math.sin(angle))),
        ]
        assert resolve_corner_pair(walls, ORIGIN, angle_epsilon_deg=0.5) is None
        assert resolve_corner_pair(walls, ORIGIN, angle_epsilon_deg=0.05) is not None

    def test_inputs_untouched(self, corner_walls):
        before = [w.model_copy(deep=True) for w in corner_walls]
        resolve_corner_pair(corner_walls, ORIGIN)
        assert corner_walls == before
