"""Window symbols: two parallel sill lines with evenly spaced pane ticks."""

from __future__ import annotations
import logging
import math

from floorplan.rules.base import PlanRule
from floorplan.models import PlanContext, RuleOutput, Shape, Layer, PlanElement
from floorplan.models.geometry import local_point, segment_path


logger = logging.getLogger(__name__)


class WindowPaneRule(PlanRule):

    priority = 20

    def get_id(self) -> str:
        return "opening.window_panes"

    def get_name(self) -> str:
        return "Window Panes"

    def applies(self, context: PlanContext) -> bool:
        return len(context.room.windows) > 0

    def generate(self, context: PlanContext) -> RuleOutput:
        shapes: list[Shape] = []
        spacing = context.params.window_pane_spacing
        for window in context.room.windows:
            shape = self._window(window, spacing)
            if shape is not None:
                shapes.append(shape)
        return RuleOutput(shapes=shapes)

    def _window(self, window: PlanElement, spacing: float) -> Shape | None:
        if not (window.position.is_finite() and math.isfinite(window.angle)):
            logger.warning("Skipping window %d: non-finite pose", window.index)
            return None
        if not window.width > 0:
            logger.debug("Skipping window %d: zero width", window.index)
            return None
        if not math.isfinite(window.width):
            logger.warning("Skipping window %d: width out of range", window.index)
            return None

        hw = window.width / 2
        ht = window.thickness / 2
        pos, angle = window.position, window.angle

        def pt(x: float, z: float):
            return local_point(x, z, angle, pos)

        paths = [
            segment_path(pt(-hw, -ht), pt(hw, -ht)),
            segment_path(pt(-hw, ht), pt(hw, ht)),
        ]

        divisions = max(int(window.width / spacing), 1)
        for i in range(divisions + 1):
            x = -hw + window.width * i / divisions
            paths.append(segment_path(pt(x, -ht), pt(x, ht)))

        return Shape(
            layer=Layer.WINDOW,
            source_index=window.index,
            paths=paths,
            tags={"rule": self.get_id(), "panes": str(divisions)},
        )
