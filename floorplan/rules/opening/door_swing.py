"""Door symbols: frame line, open leaf and quarter-circle swing arc.

With door state display turned on, doors the scanner is not confident
are open are drawn as a closed slab across the opening instead.
"""

from __future__ import annotations
import logging
import math

from floorplan.rules.base import PlanRule
from floorplan.models import PlanContext, RuleOutput, Shape, Layer, PlanElement
from floorplan.models.geometry import (
    arc_path, box_corners, local_point, offset_point, rectangle_path, segment_path,
    Vector2D,
)


logger = logging.getLogger(__name__)

SLAB_RATIO = 0.1  # Closed slab thickness, x door width


class DoorSwingRule(PlanRule):

    priority = 30

    def get_id(self) -> str:
        return "opening.door_swing"

    def get_name(self) -> str:
        return "Door Swings"

    def applies(self, context: PlanContext) -> bool:
        return len(context.room.doors) > 0

    def generate(self, context: PlanContext) -> RuleOutput:
        shapes: list[Shape] = []
        for door in context.room.doors:
            if not (door.position.is_finite() and math.isfinite(door.angle)):
                logger.warning("Skipping door %d: non-finite pose", door.index)
                continue
            if not door.width > 0:
                logger.debug("Skipping door %d: zero width", door.index)
                continue
            if self._is_closed(door, context):
                shapes.append(self._closed(door))
            else:
                shapes.append(self._open(door, context.params.door_swing_ratio))
        return RuleOutput(shapes=shapes)

    def _is_closed(self, door: PlanElement, context: PlanContext) -> bool:
        return (
            context.options.show_door_state
            and door.confidence <= context.params.door_open_confidence
        )

    def _open(self, door: PlanElement, swing_ratio: float) -> Shape:
        hw = door.width / 2
        frame_start = local_point(-hw, 0.0, door.angle, door.position)
        frame_end = local_point(hw, 0.0, door.angle, door.position)

        radius = door.width * swing_ratio
        leaf_angle = door.angle + math.pi / 2
        leaf_end = offset_point(frame_start, Vector2D.from_angle(leaf_angle), radius)

        return Shape(
            layer=Layer.DOOR,
            source_index=door.index,
            paths=[
                segment_path(frame_start, frame_end),
                segment_path(frame_start, leaf_end),
                arc_path(frame_start, radius, door.angle, leaf_angle, clockwise=False),
            ],
            tags={"rule": self.get_id(), "state": "open"},
        )

    def _closed(self, door: PlanElement) -> Shape:
        corners = box_corners(
            door.position, door.width / 2, door.width * SLAB_RATIO / 2, door.angle,
        )
        return Shape(
            layer=Layer.DOOR,
            source_index=door.index,
            paths=[rectangle_path(corners)],
            filled=True,
            tags={"rule": self.get_id(), "state": "closed"},
        )
