"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from floorplan.models import ViewTransform
from floorplan.services.plan_service import PlanService
from floorplan.api.schemas import (
    FloorPlanRequest, FloorPlanResponse, RuleInfo,
)

router = APIRouter()

# Shared service instance
_service = PlanService()


@router.post("/floorplan", response_model=FloorPlanResponse)
async def render_floorplan(request: FloorPlanRequest) -> FloorPlanResponse:
    """Render a floor plan scene from a captured room."""
    view = None
    if request.viewport is not None:
        vp = request.viewport
        view = ViewTransform.fit(
            _service.plan_bounds(request.room, request.params),
            vp.width, vp.height, vp.zoom, vp.pan_x, vp.pan_z,
        )

    scene = _service.render(request.room, request.params, request.options, view)

    return FloorPlanResponse(
        scene=scene,
        rule_count=len(_service.list_rules()),
        wall_count=len(request.room.walls),
    )


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available plan rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
