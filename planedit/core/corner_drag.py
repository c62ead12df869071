"""Corner angle editing — drag the shared node along the center handle."""

from __future__ import annotations
import logging
import math
from collections.abc import Sequence

from planedit.models import CornerGeometry, CornerPair, Point2D, Wall, WallEndpoint
from planedit.models.parameters import (
    CORNER_MAX_ANGLE_DEG, CORNER_MIN_ANGLE_DEG, DEFAULT_TOLERANCE_FACTOR,
)
from planedit.core.corner_resolver import (
    MIN_WALL_LENGTH, find_corner_endpoint, resolve_corner_pair,
)

logger = logging.getLogger(__name__)


def move_corner_node(
    walls: Sequence[Wall],
    node: Point2D,
    target: Point2D,
    tolerance_factor: float = DEFAULT_TOLERANCE_FACTOR,
) -> list[Wall] | None:
    """Move every wall endpoint touching `node` onto `target`.

    Returns None if a moved wall would collapse to a point.
    """
    moved: list[Wall] = []
    for wall in walls:
        endpoint = find_corner_endpoint(wall, node, tolerance_factor * wall.thickness)
        if endpoint is None:
            moved.append(wall)
            continue
        field = "start" if endpoint == WallEndpoint.START else "end"
        far = wall.end if endpoint == WallEndpoint.START else wall.start
        if far.distance_to(target) <= MIN_WALL_LENGTH:
            logger.debug("Moving node onto the far end of wall %s", wall.id)
            return None
        moved.append(wall.model_copy(update={field: target}))
    return moved


def apply_corner_center_drag(
    walls: Sequence[Wall],
    pair: CornerPair,
    geometry: CornerGeometry,
    pointer: Point2D,
    tolerance_factor: float = DEFAULT_TOLERANCE_FACTOR,
    min_angle_deg: float = CORNER_MIN_ANGLE_DEG,
    max_angle_deg: float = CORNER_MAX_ANGLE_DEG,
) -> list[Wall] | None:
    """
    Move the corner node to the pointer's projection on the center radial.

    The pair's walls stay attached to the moved node, so the corner angle
    changes. Returns None when the resulting corner can no longer be
    resolved or its angle falls outside [min_angle_deg, max_angle_deg].
    """
    radial = geometry.center_radial
    if radial.is_zero():
        return None

    travel = (pointer - geometry.center).dot(radial)
    target = pair.node.offset(radial, travel)

    moved = move_corner_node(walls, pair.node, target, tolerance_factor)
    if moved is None:
        return None

    moved_pair = resolve_corner_pair(moved, target, pair.wall_ids, tolerance_factor)
    if moved_pair is None:
        logger.debug("Corner %s/%s lost after node move", *pair.wall_ids)
        return None

    angle = math.degrees(moved_pair.away_a.angle_to(moved_pair.away_b))
    if angle < min_angle_deg or angle > max_angle_deg:
        logger.debug("Corner %s/%s: angle %.1f outside limits", *pair.wall_ids, angle)
        return None

    return moved
