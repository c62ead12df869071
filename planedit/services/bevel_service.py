"""Corner bevel gesture service — facade over kernel and commands.

The service is the caller side of the edit protocol: it decides when a
gesture begins and ends, and it keeps the pre-gesture snapshot so an
abandoned gesture can be rolled back.
"""

from __future__ import annotations
import logging
from collections.abc import Iterable
from pydantic import BaseModel

from planedit.models import (
    CornerGeometry, CornerPair, EditParams, GraphHost, Point2D, Room, Wall,
)
from planedit.core.corner_resolver import resolve_corner_pair
from planedit.core.corner_geometry import resolve_corner_control_geometry
from planedit.core.bevel import apply_corner_bevel
from planedit.commands.wall_edit import (
    ApplyTransientWallGraphCommand, FinalizeWallEditCommand,
    RevertWallEditCommand, WallEditFinalizePayload,
)

logger = logging.getLogger(__name__)


class CornerEditError(Exception):
    """Base class for corner edit failures reported to callers."""


class CornerNotFoundError(CornerEditError):
    pass


class CornerGeometryError(CornerEditError):
    pass


class BevelApplyError(CornerEditError):
    pass


class NoActiveGestureError(CornerEditError):
    pass


class BevelGesture(BaseModel):
    """State of one drag: the resolved corner and the retained snapshot."""
    pair: CornerPair
    geometry: CornerGeometry
    original_walls: list[Wall]
    original_rooms: list[Room]
    previews: int = 0


class CornerBevelService:
    """Runs begin -> preview* -> commit | cancel against one graph host."""

    def __init__(self, host: GraphHost, params: EditParams | None = None) -> None:
        self.host = host
        self.params = params or EditParams()
        self._gesture: BevelGesture | None = None

    @property
    def active(self) -> bool:
        return self._gesture is not None

    @property
    def gesture(self) -> BevelGesture:
        if self._gesture is None:
            raise NoActiveGestureError("no bevel gesture in progress")
        return self._gesture

    def begin(
        self,
        approximate_corner: Point2D,
        candidate_ids: Iterable[str] | None = None,
    ) -> BevelGesture:
        """Resolve the corner under the pointer and snapshot the graph."""
        p = self.params
        walls = list(self.host.get_walls())
        pair = resolve_corner_pair(
            walls, approximate_corner, candidate_ids,
            tolerance_factor=p.tolerance_factor,
            angle_epsilon_deg=p.angle_epsilon_deg,
        )
        if pair is None:
            raise CornerNotFoundError(
                f"no editable corner at ({approximate_corner.x:g}, {approximate_corner.y:g})"
            )

        geometry = resolve_corner_control_geometry(
            pair, p.side, max_bevel_fraction=p.max_bevel_fraction,
        )
        if geometry is None:
            raise CornerGeometryError(f"cannot construct bevel for walls {pair.wall_ids}")

        self._gesture = BevelGesture(
            pair=pair,
            geometry=geometry,
            original_walls=walls,
            original_rooms=list(self.host.get_rooms()),
        )
        logger.debug("Bevel gesture started on %s/%s", *pair.wall_ids)
        return self._gesture

    def preview(self, pointer: Point2D) -> list[Wall]:
        """Bevel the snapshot for `pointer` and show it on the host."""
        gesture = self.gesture
        next_walls = apply_corner_bevel(
            gesture.original_walls,
            gesture.pair,
            gesture.geometry,
            self.params.side,
            pointer,
            tolerance_factor=self.params.tolerance_factor,
            min_bevel_length=self.params.min_bevel_length,
        )
        if next_walls is None:
            raise BevelApplyError(f"cannot bevel walls {gesture.pair.wall_ids}")

        ApplyTransientWallGraphCommand(self.host, next_walls, list(gesture.pair.wall_ids)).execute()
        gesture.previews += 1
        return next_walls

    def commit(self) -> None:
        """Record the current preview as one history entry."""
        gesture = self.gesture
        payload = WallEditFinalizePayload(
            wall_id=gesture.pair.wall_a.id,
            selection_ids=list(gesture.pair.wall_ids),
            action=self.params.bevel_action,
            original_walls=gesture.original_walls,
            original_rooms=gesture.original_rooms,
        )
        FinalizeWallEditCommand(self.host, payload).execute()
        self._gesture = None

    def cancel(self) -> None:
        """Drop the gesture and put the pre-gesture graph back."""
        gesture = self.gesture
        RevertWallEditCommand(
            self.host,
            gesture.original_walls,
            gesture.original_rooms,
            list(gesture.pair.wall_ids),
        ).execute()
        self._gesture = None
        logger.info("Bevel gesture on %s/%s cancelled", *gesture.pair.wall_ids)
