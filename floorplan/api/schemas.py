"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel, Field

from floorplan.models import (
    RoomRecordSet, PlanParams, DisplayOptions, FloorPlanScene,
)


class Viewport(BaseModel):
    """Screen area the plan is fitted into, with user zoom and pan."""
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    zoom: float = Field(default=1.0, gt=0)
    pan_x: float = 0.0
    pan_z: float = 0.0


class FloorPlanRequest(BaseModel):
    """Request body for the /floorplan endpoint."""
    room: RoomRecordSet
    params: PlanParams = PlanParams()
    options: DisplayOptions = DisplayOptions()
    viewport: Viewport | None = None


class FloorPlanResponse(BaseModel):
    """Response from the /floorplan endpoint."""
    scene: FloorPlanScene
    rule_count: int
    wall_count: int


class RuleInfo(BaseModel):
    id: str
    name: str
