"""Wall fills: one solid rectangle per wall at its policy thickness.

Walls that meet at a corner are stretched a little past their endpoints
so the fills overlap and the corner reads as one solid joint.
"""

from __future__ import annotations
import logging

from floorplan.rules.base import PlanRule
from floorplan.models import (
    PlanContext, RuleOutput, Shape, Layer, WallSegment,
)
from floorplan.models.geometry import box_corners, rectangle_path


logger = logging.getLogger(__name__)


class WallFillRule(PlanRule):
    """Filled wall rectangles, emitted in corner-first draw order."""

    priority = 10  # Walls paint first; everything else sits on top

    def get_id(self) -> str:
        return "wall.fill"

    def get_name(self) -> str:
        return "Wall Fills"

    def applies(self, context: PlanContext) -> bool:
        return len(context.walls) > 0

    def generate(self, context: PlanContext) -> RuleOutput:
        corner_walls = set(context.topology.corner_walls)
        shapes: list[Shape] = []
        for position, index in enumerate(context.topology.draw_order):
            wall = context.get_wall(index)
            if wall is None:
                continue
            shape = self._fill(wall, index in corner_walls, context)
            if shape is None:
                continue
            shape.tags["draw_order"] = str(position)
            shapes.append(shape)
        return RuleOutput(shapes=shapes)

    def _fill(
        self, wall: WallSegment, at_corner: bool, context: PlanContext,
    ) -> Shape | None:
        if not wall.is_finite():
            logger.warning("Skipping wall %d: non-finite endpoints", wall.index)
            return None
        length = wall.length
        if length == 0:
            logger.debug("Skipping wall %d: zero length", wall.index)
            return None

        half_thickness = wall.thickness / 2
        extension = half_thickness * context.params.corner_extension if at_corner else 0.0
        corners = box_corners(
            wall.midpoint, length / 2 + extension, half_thickness, wall.direction.angle(),
        )
        return Shape(
            layer=Layer.WALL,
            source_index=wall.index,
            paths=[rectangle_path(corners)],
            filled=True,
            line_width=0.0,
            tags={
                "rule": self.get_id(),
                "exterior": str(wall.is_exterior).lower(),
                "corner": str(at_corner).lower(),
            },
        )
