"""Floor-plan entity models — walls, openings, rooms."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field, model_validator

from .geometry import Point2D, Vector2D, direction_from_points


class OpeningType(str, Enum):
    WINDOW = "window"
    DOOR = "door"


class WallSide(str, Enum):
    """Side of a wall relative to its start -> end direction."""
    LEFT = "left"
    RIGHT = "right"


class WallEndpoint(str, Enum):
    START = "start"
    END = "end"


class Opening(BaseModel):
    """An opening (window/door) positioned along a wall."""
    id: str
    type: OpeningType
    offset: float       # Distance from wall start to opening center (mm)
    width: float        # Opening width (mm)
    height: float       # Opening height (mm)
    sill_height: float = 0.0  # Height from floor to bottom of opening (mm)


class Wall(BaseModel):
    """A wall segment defined by two plan endpoints on its center line."""
    id: str
    start: Point2D
    end: Point2D
    thickness: float = Field(gt=0)
    height: float = Field(default=3000.0, gt=0)
    wall_type: str = "interior"
    wall_type_id: str = ""
    openings: list[Opening] = []
    interior_side: WallSide = WallSide.RIGHT
    exterior_side: WallSide = WallSide.LEFT
    is_bevel_segment: bool = False
    bevel_node_key: str | None = None      # Corner a bevel segment replaced
    bevel_source_wall_ids: list[str] = []

    @model_validator(mode="after")
    def _check_not_degenerate(self) -> Wall:
        if self.start.x == self.end.x and self.start.y == self.end.y:
            raise ValueError(f"wall {self.id!r} has identical start and end points")
        return self

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    def direction(self) -> Vector2D:
        """Unit vector from start to end."""
        return direction_from_points(self.start, self.end).normalized()

    def exterior_normal(self) -> Vector2D:
        """Unit normal pointing to the exterior face."""
        left = self.direction().perpendicular()
        return left if self.exterior_side == WallSide.LEFT else -left

    def endpoint(self, which: WallEndpoint) -> Point2D:
        return self.start if which == WallEndpoint.START else self.end


class Room(BaseModel):
    """A room polygon derived from the wall graph (read-only here)."""
    id: str
    name: str = ""
    vertices: list[Point2D] = []
    wall_ids: list[str] = []
    area: float = 0.0
