"""Corner detection — find the two walls meeting at an approximate point."""

from __future__ import annotations
import logging
import math
from collections.abc import Iterable, Sequence

from planedit.models import (
    CornerPair, Point2D, Wall, WallEndpoint, direction_from_points,
)
from planedit.models.parameters import (
    DEFAULT_ANGLE_EPSILON_DEG, DEFAULT_TOLERANCE_FACTOR,
)

logger = logging.getLogger(__name__)

MIN_WALL_LENGTH = 1e-4


def find_corner_endpoint(wall: Wall, point: Point2D, radius: float) -> WallEndpoint | None:
    """Return the endpoint of `wall` within `radius` of `point`, nearest first."""
    d_start = wall.start.distance_to(point)
    d_end = wall.end.distance_to(point)
    if d_start <= radius and d_start <= d_end:
        return WallEndpoint.START
    if d_end <= radius:
        return WallEndpoint.END
    return None


def _far_endpoint(wall: Wall, endpoint: WallEndpoint) -> Point2D:
    return wall.end if endpoint == WallEndpoint.START else wall.start


def resolve_corner_pair(
    walls: Sequence[Wall],
    approximate_corner: Point2D,
    candidate_ids: Iterable[str] | None = None,
    tolerance_factor: float = DEFAULT_TOLERANCE_FACTOR,
    angle_epsilon_deg: float = DEFAULT_ANGLE_EPSILON_DEG,
) -> CornerPair | None:
    """
    Package the two walls touching `approximate_corner` as a CornerPair.

    Each wall is matched within its own radius of
    `tolerance_factor * wall.thickness`. Only walls listed in
    `candidate_ids` are considered (all walls when empty). Returns None
    unless exactly two walls match and they form a proper angle.
    """
    allowed = set(candidate_ids or ())
    matches: list[tuple[Wall, WallEndpoint]] = []
    for wall in walls:
        if allowed and wall.id not in allowed:
            continue
        endpoint = find_corner_endpoint(wall, approximate_corner, tolerance_factor * wall.thickness)
        if endpoint is not None:
            matches.append((wall, endpoint))

    if len(matches) != 2:
        logger.debug(
            "Corner at (%.3f, %.3f): expected 2 walls, found %d",
            approximate_corner.x, approximate_corner.y, len(matches),
        )
        return None

    (wall_a, end_a), (wall_b, end_b) = matches
    node = wall_a.endpoint(end_a).lerp(wall_b.endpoint(end_b), 0.5)

    far_a = _far_endpoint(wall_a, end_a)
    far_b = _far_endpoint(wall_b, end_b)
    length_a = node.distance_to(far_a)
    length_b = node.distance_to(far_b)
    if length_a <= MIN_WALL_LENGTH or length_b <= MIN_WALL_LENGTH:
        logger.debug("Corner %s/%s: wall too short", wall_a.id, wall_b.id)
        return None

    away_a = direction_from_points(node, far_a).normalized()
    away_b = direction_from_points(node, far_b).normalized()

    # Collinear in either orientation: no corner angle to bevel
    if abs(away_a.cross(away_b)) <= math.sin(math.radians(angle_epsilon_deg)):
        logger.debug("Corner %s/%s: walls are collinear", wall_a.id, wall_b.id)
        return None

    return CornerPair(
        node=node,
        wall_a=wall_a,
        wall_b=wall_b,
        endpoint_a=end_a,
        endpoint_b=end_b,
        away_a=away_a,
        away_b=away_b,
        length_a=length_a,
        length_b=length_b,
    )
