"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from planedit.core.corner_resolver import resolve_corner_pair
from planedit.core.corner_geometry import resolve_corner_control_geometry
from planedit.core.bevel import apply_corner_bevel, resolve_bevel_length
from planedit.core.corner_drag import apply_corner_center_drag
from planedit.services.memory_host import InMemoryGraphHost
from planedit.services.bevel_service import (
    CornerBevelService, CornerEditError, NoActiveGestureError,
)
from planedit.api.schemas import (
    BevelRequest, BevelResponse, CornerDragRequest, CornerDragResponse,
    GestureBeginRequest, GestureBeginResponse,
    PlanLoadRequest, PlanState, PointerRequest,
)

router = APIRouter()

# Shared in-memory plan and its gesture service
_host = InMemoryGraphHost()
_service = CornerBevelService(_host)


def _plan_state() -> PlanState:
    return PlanState(
        walls=_host.get_walls(),
        rooms=_host.get_rooms(),
        selected_ids=_host.selected_ids,
        history=_host.history_labels,
    )


def _http_error(exc: CornerEditError) -> HTTPException:
    status = 409 if isinstance(exc, NoActiveGestureError) else 422
    return HTTPException(status_code=status, detail=str(exc))


@router.post("/corner/bevel", response_model=BevelResponse)
async def bevel_corner(request: BevelRequest) -> BevelResponse:
    """Bevel one corner of the given walls without touching the plan."""
    p = request.params
    pair = resolve_corner_pair(
        request.walls, request.corner, request.candidate_ids,
        tolerance_factor=p.tolerance_factor,
        angle_epsilon_deg=p.angle_epsilon_deg,
    )
    if pair is None:
        raise HTTPException(status_code=422, detail="no editable corner at the given point")

    geometry = resolve_corner_control_geometry(pair, request.side, p.max_bevel_fraction)
    if geometry is None:
        raise HTTPException(status_code=422, detail="cannot construct bevel for this corner")

    walls = apply_corner_bevel(
        request.walls, pair, geometry, request.side, request.pointer,
        tolerance_factor=p.tolerance_factor,
        min_bevel_length=p.min_bevel_length,
    )
    bevel_length = resolve_bevel_length(geometry, request.side, request.pointer)
    if walls is None or bevel_length is None:
        raise HTTPException(status_code=422, detail="cannot bevel this corner")

    return BevelResponse(walls=walls, bevel_length=bevel_length, geometry=geometry)


@router.post("/corner/angle", response_model=CornerDragResponse)
async def drag_corner_angle(request: CornerDragRequest) -> CornerDragResponse:
    """Move a corner node along its center handle without touching the plan."""
    p = request.params
    pair = resolve_corner_pair(
        request.walls, request.corner, request.candidate_ids,
        tolerance_factor=p.tolerance_factor,
        angle_epsilon_deg=p.angle_epsilon_deg,
    )
    if pair is None:
        raise HTTPException(status_code=422, detail="no editable corner at the given point")

    geometry = resolve_corner_control_geometry(pair, max_bevel_fraction=p.max_bevel_fraction)
    if geometry is None:
        raise HTTPException(status_code=422, detail="cannot construct handles for this corner")

    walls = apply_corner_center_drag(
        request.walls, pair, geometry, request.pointer,
        tolerance_factor=p.tolerance_factor,
    )
    if walls is None:
        raise HTTPException(status_code=422, detail="corner angle out of range")

    return CornerDragResponse(walls=walls, geometry=geometry)


@router.get("/plan", response_model=PlanState)
async def get_plan() -> PlanState:
    return _plan_state()


@router.put("/plan", response_model=PlanState)
async def load_plan(request: PlanLoadRequest) -> PlanState:
    """Replace the plan; any gesture in progress is discarded."""
    if _service.active:
        _service.cancel()
    _host.load(request.walls, request.rooms)
    return _plan_state()


@router.post("/plan/bevel/begin", response_model=GestureBeginResponse)
async def begin_bevel(request: GestureBeginRequest) -> GestureBeginResponse:
    try:
        gesture = _service.begin(request.corner, request.candidate_ids)
    except CornerEditError as exc:
        raise _http_error(exc) from exc
    return GestureBeginResponse(
        wall_ids=list(gesture.pair.wall_ids),
        node=gesture.pair.node,
        geometry=gesture.geometry,
    )


@router.post("/plan/bevel/preview", response_model=PlanState)
async def preview_bevel(request: PointerRequest) -> PlanState:
    try:
        _service.preview(request.pointer)
    except CornerEditError as exc:
        raise _http_error(exc) from exc
    return _plan_state()


@router.post("/plan/bevel/commit", response_model=PlanState)
async def commit_bevel() -> PlanState:
    try:
        _service.commit()
    except CornerEditError as exc:
        raise _http_error(exc) from exc
    return _plan_state()


@router.post("/plan/bevel/cancel", response_model=PlanState)
async def cancel_bevel() -> PlanState:
    try:
        _service.cancel()
    except CornerEditError as exc:
        raise _http_error(exc) from exc
    return _plan_state()


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
