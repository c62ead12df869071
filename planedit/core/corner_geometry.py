"""Offset-corner (miter) construction for a corner pair."""

from __future__ import annotations
import logging
import math

from planedit.models import (
    CornerGeometry, CornerPair, CornerSide, Point2D, Vector2D, Wall,
    direction_from_points, intersect_lines,
)
from planedit.models.parameters import DEFAULT_MAX_BEVEL_FRACTION

logger = logging.getLogger(__name__)


def _offset_vertex(pair: CornerPair, outward: bool) -> Point2D | None:
    """Intersect both walls' face lines on one side of the corner.

    Each face line passes through the node shifted by half the wall
    thickness along the wall's exterior (outward) or interior normal,
    and runs along the wall's away direction.
    """
    def face_origin(wall: Wall) -> Point2D:
        normal = wall.exterior_normal()
        if not outward:
            normal = -normal
        return pair.node.offset(normal, wall.thickness / 2)

    return intersect_lines(
        face_origin(pair.wall_a), pair.away_a,
        face_origin(pair.wall_b), pair.away_b,
    )


def resolve_corner_control_geometry(
    pair: CornerPair,
    side: CornerSide = CornerSide.OUTER,
    max_bevel_fraction: float = DEFAULT_MAX_BEVEL_FRACTION,
) -> CornerGeometry | None:
    """
    Compute the bevel and center handle construction for `pair`.

    The outer construction is always resolved; `side` INNER or BOTH adds
    the inner one to the result. The radials bisect the corner angle: the
    outer radial points away from the wedge enclosed by the two walls, the
    inner radial into it. The center handle sits midway between the outer
    and inner vertices and moves along the node-to-center direction, or
    along the inner bisector when the center coincides with the node.

    `max_bevel_length` is the smaller of the per-wall limits
    `length * max_bevel_fraction`. The fraction must lie in (0, 1) so a
    trim never reaches a far endpoint and both walls keep a positive
    remainder.
    """
    if not 0 < max_bevel_fraction < 1:
        logger.debug("Bevel fraction %r outside (0, 1)", max_bevel_fraction)
        return None
    if pair.length_a <= 0 or pair.length_b <= 0:
        logger.debug("Corner %s/%s: non-positive wall length", *pair.wall_ids)
        return None

    bisector: Vector2D = (pair.away_a + pair.away_b).normalized()
    if bisector.is_zero():
        logger.debug("Corner %s/%s: opposite directions, no bisector", *pair.wall_ids)
        return None

    outer_vertex = _offset_vertex(pair, outward=True)
    inner_vertex = _offset_vertex(pair, outward=False)
    if outer_vertex is None or inner_vertex is None:
        logger.debug("Corner %s/%s: parallel offset lines", *pair.wall_ids)
        return None

    center = outer_vertex.lerp(inner_vertex, 0.5)
    center_radial = direction_from_points(pair.node, center).normalized()
    if center_radial.is_zero():
        center_radial = bisector

    max_bevel_length = min(pair.length_a, pair.length_b) * max_bevel_fraction
    if max_bevel_length <= 0:
        return None

    with_inner = side in (CornerSide.INNER, CornerSide.BOTH)
    return CornerGeometry(
        outer_vertex=outer_vertex,
        outer_radial=-bisector,
        inner_vertex=inner_vertex if with_inner else None,
        inner_radial=bisector if with_inner else None,
        center=center,
        center_radial=center_radial,
        max_bevel_length=max_bevel_length,
        angle_deg=math.degrees(pair.away_a.angle_to(pair.away_b)),
    )
