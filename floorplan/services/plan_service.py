"""High-level floor plan service — facade for the API layer."""

from __future__ import annotations

from floorplan.models import (
    RoomRecordSet, FloorPlanScene, PlanParams, DisplayOptions, Rect, ViewTransform,
)
from floorplan.core.generator import PlanGenerator
from floorplan.core.projector import RoomProjector
from floorplan.core.registry import RuleRegistry, create_default_registry


class PlanService:
    """Fills in defaults, delegates to the generator."""

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.generator = PlanGenerator(self.registry)

    def render(
        self,
        room: RoomRecordSet,
        params: PlanParams | None = None,
        options: DisplayOptions | None = None,
        view: ViewTransform | None = None,
    ) -> FloorPlanScene:
        if params is None:
            params = PlanParams()
        if options is None:
            options = DisplayOptions()

        return self.generator.generate(room, params, options, view)

    def plan_bounds(self, room: RoomRecordSet, params: PlanParams | None = None) -> Rect:
        """Padded plan-space extent of *room*, used to fit a viewport."""
        if params is None:
            params = PlanParams()
        projected = RoomProjector(params.min_window_thickness).project(room, params.scale)
        return PlanGenerator.compute_bounds(projected, params.bounds_padding)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
