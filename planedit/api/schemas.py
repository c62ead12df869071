"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from planedit.models import (
    CornerGeometry, CornerSide, EditParams, Point2D, Room, Wall,
)


class BevelRequest(BaseModel):
    """Stateless bevel computation over a wall list."""
    walls: list[Wall]
    corner: Point2D
    pointer: Point2D
    candidate_ids: list[str] = []
    side: CornerSide = CornerSide.OUTER
    params: EditParams = EditParams()


class BevelResponse(BaseModel):
    walls: list[Wall]
    bevel_length: float
    geometry: CornerGeometry


class PlanState(BaseModel):
    """The in-memory plan as held by the host."""
    walls: list[Wall]
    rooms: list[Room] = []
    selected_ids: list[str] = []
    history: list[str] = []


class PlanLoadRequest(BaseModel):
    walls: list[Wall]
    rooms: list[Room] = []


class GestureBeginRequest(BaseModel):
    corner: Point2D
    candidate_ids: list[str] = []


class GestureBeginResponse(BaseModel):
    wall_ids: list[str]
    node: Point2D
    geometry: CornerGeometry


class PointerRequest(BaseModel):
    pointer: Point2D


class CornerDragRequest(BaseModel):
    """Stateless center-handle drag over a wall list."""
    walls: list[Wall]
    corner: Point2D
    pointer: Point2D
    candidate_ids: list[str] = []
    params: EditParams = EditParams()


class CornerDragResponse(BaseModel):
    walls: list[Wall]
    geometry: CornerGeometry
