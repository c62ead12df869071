"""Ephemeral corner models, recomputed on every interaction."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field

from .building import Wall, WallEndpoint
from .geometry import Point2D, Vector2D


class CornerSide(str, Enum):
    """Which offset construction(s) of a corner to work with."""
    OUTER = "outer"
    INNER = "inner"
    BOTH = "both"


class CornerPair(BaseModel):
    """Two walls meeting at a shared endpoint."""
    node: Point2D               # Shared corner (midpoint of the touching endpoints)
    wall_a: Wall
    wall_b: Wall
    endpoint_a: WallEndpoint    # Which endpoint of wall_a touches the corner
    endpoint_b: WallEndpoint
    away_a: Vector2D            # Unit direction from the corner along wall_a
    away_b: Vector2D
    length_a: float             # Corner to far endpoint of wall_a
    length_b: float

    @property
    def wall_ids(self) -> tuple[str, str]:
        return self.wall_a.id, self.wall_b.id


class CornerGeometry(BaseModel):
    """Offset-corner construction used to drive a bevel handle."""
    outer_vertex: Point2D
    outer_radial: Vector2D
    inner_vertex: Point2D | None = None
    inner_radial: Vector2D | None = None
    center: Point2D                  # Midpoint of the outer and inner vertices
    center_radial: Vector2D          # Direction the center handle moves the node along
    max_bevel_length: float = Field(gt=0)
    angle_deg: float   # Angle between the two away directions

    def control(self, side: CornerSide) -> tuple[Point2D, Vector2D] | None:
        """Return (origin, radial) for a handle side, if resolved."""
        if side == CornerSide.OUTER:
            return self.outer_vertex, self.outer_radial
        if side == CornerSide.INNER and self.inner_vertex is not None and self.inner_radial is not None:
            return self.inner_vertex, self.inner_radial
        return None
