"""Bevel application — trim a corner pair and insert the bevel segment.

Runs on every pointer move during a drag, so it is a pure function of
its inputs: it builds a new wall list and leaves the given one alone.
"""

from __future__ import annotations
import logging
from collections.abc import Sequence

from planedit.models import (
    CornerGeometry, CornerPair, CornerSide, Opening, Point2D, Vector2D, Wall,
    WallEndpoint,
)
from planedit.models.parameters import (
    DEFAULT_MIN_BEVEL_LENGTH, DEFAULT_TOLERANCE_FACTOR,
)
from planedit.core.corner_resolver import MIN_WALL_LENGTH, find_corner_endpoint

logger = logging.getLogger(__name__)


def node_key(point: Point2D) -> str:
    """Stable key for a corner location (micro-unit resolution)."""
    return f"{round(point.x * 1000)}:{round(point.y * 1000)}"


def bevel_wall_id(pair: CornerPair) -> str:
    ids = sorted(pair.wall_ids)
    return f"bevel:{ids[0]}:{ids[1]}:{node_key(pair.node)}"


def resolve_bevel_length(
    geometry: CornerGeometry, side: CornerSide, pointer: Point2D,
) -> float | None:
    """Project the pointer on the handle radial and clamp to [0, max]."""
    control = geometry.control(side)
    if control is None:
        return None
    origin, radial = control
    if radial.is_zero():
        return None
    requested = (pointer - origin).dot(radial)
    return max(0.0, min(geometry.max_bevel_length, requested))


def _fit_openings(openings: list[Opening], shift: float, wall_length: float) -> list[Opening]:
    """Re-measure openings after a trim; drop those that no longer fit."""
    fitted: list[Opening] = []
    for o in openings:
        offset = o.offset - shift
        if offset - o.width / 2 < 0 or offset + o.width / 2 > wall_length:
            continue
        fitted.append(o.model_copy(update={"offset": offset}) if shift else o)
    return fitted


def _trim_wall(
    wall: Wall, endpoint: WallEndpoint, node: Point2D, away: Vector2D, bevel_length: float,
) -> Wall | None:
    far = wall.end if endpoint == WallEndpoint.START else wall.start
    # The cut must stay strictly between the corner and the far endpoint
    if far.distance_to(node) - bevel_length <= MIN_WALL_LENGTH:
        return None
    cut = node.offset(away, bevel_length)
    if endpoint == WallEndpoint.END:
        start, end, shift = wall.start, cut, 0.0
    else:
        # Openings are measured from the start, which just moved forward
        start, end, shift = cut, wall.end, bevel_length
    return wall.model_copy(update={
        "start": start,
        "end": end,
        "openings": _fit_openings(wall.openings, shift, start.distance_to(end)),
    })


def _is_bevel_of(wall: Wall, pair: CornerPair, key: str) -> bool:
    return (
        wall.is_bevel_segment
        and wall.bevel_node_key == key
        and pair.wall_a.id in wall.bevel_source_wall_ids
        and pair.wall_b.id in wall.bevel_source_wall_ids
    )


def apply_corner_bevel(
    walls: Sequence[Wall],
    pair: CornerPair,
    geometry: CornerGeometry,
    side: CornerSide,
    pointer: Point2D,
    tolerance_factor: float = DEFAULT_TOLERANCE_FACTOR,
    min_bevel_length: float = DEFAULT_MIN_BEVEL_LENGTH,
) -> list[Wall] | None:
    """
    Bevel the corner of `pair` to the length the pointer asks for.

    Both walls are shortened along their own axes by the clamped bevel
    length and a bevel segment joining the two cut points is appended,
    replacing any earlier bevel of the same corner. A bevel at or below
    `min_bevel_length` leaves the pair's walls untouched. Openings that
    fall in the cut-away part of a wall are dropped.

    Returns None when the pair's walls are missing from `walls`, no longer
    touch the corner, would be trimmed to nothing, or `geometry` has no
    usable handle for `side`.
    """
    bevel_length = resolve_bevel_length(geometry, side, pointer)
    if bevel_length is None:
        logger.debug("Corner %s/%s: no %s handle in geometry", *pair.wall_ids, side.value)
        return None

    by_id = {w.id: w for w in walls}
    current_a = by_id.get(pair.wall_a.id)
    current_b = by_id.get(pair.wall_b.id)
    if current_a is None or current_b is None:
        logger.debug("Corner %s/%s: wall not in graph", *pair.wall_ids)
        return None

    end_a = find_corner_endpoint(current_a, pair.node, tolerance_factor * current_a.thickness)
    end_b = find_corner_endpoint(current_b, pair.node, tolerance_factor * current_b.thickness)
    if end_a is None or end_b is None:
        logger.debug("Corner %s/%s: walls no longer meet at the corner", *pair.wall_ids)
        return None

    key = node_key(pair.node)
    kept = [w for w in walls if not _is_bevel_of(w, pair, key)]
    if bevel_length <= min_bevel_length:
        return kept

    trimmed_a = _trim_wall(current_a, end_a, pair.node, pair.away_a, bevel_length)
    trimmed_b = _trim_wall(current_b, end_b, pair.node, pair.away_b, bevel_length)
    if trimmed_a is None or trimmed_b is None:
        logger.debug("Corner %s/%s: bevel %.3f consumes a wall", *pair.wall_ids, bevel_length)
        return None
    trimmed = {trimmed_a.id: trimmed_a, trimmed_b.id: trimmed_b}

    # Type metadata follows the first wall of the pair; size takes the thinner/lower
    bevel = Wall(
        id=bevel_wall_id(pair),
        start=trimmed_a.endpoint(end_a),
        end=trimmed_b.endpoint(end_b),
        thickness=min(current_a.thickness, current_b.thickness),
        height=min(current_a.height, current_b.height),
        wall_type=current_a.wall_type,
        wall_type_id=current_a.wall_type_id,
        interior_side=current_a.interior_side,
        exterior_side=current_a.exterior_side,
        is_bevel_segment=True,
        bevel_node_key=key,
        bevel_source_wall_ids=[current_a.id, current_b.id],
    )

    next_walls = [trimmed.get(w.id, w) for w in kept]
    next_walls.append(bevel)
    return next_walls
