"""Room model adapter: captured oriented boxes -> projection-plane elements."""

from __future__ import annotations
import logging
import math

from floorplan.models import (
    OrientedBox, RoomRecordSet, ElementKind, Point2D, Vector2D,
    WallSegment, PlanElement, ProjectedRoom,
)


logger = logging.getLogger(__name__)

DEFAULT_SCALE = 100.0  # Drawing units per meter


class RoomProjector:
    """Flattens a captured room onto the X-Z plane.

    Stateless: the same room and scale always give the same projection.
    """

    def __init__(self, min_window_thickness: float = 0.05) -> None:
        self.min_window_thickness = min_window_thickness

    def project(self, room: RoomRecordSet, scale: float = DEFAULT_SCALE) -> ProjectedRoom:
        return ProjectedRoom(
            walls=[self._wall(i, box, scale) for i, box in enumerate(room.walls)],
            doors=[
                self._element(i, box, ElementKind.DOOR, scale)
                for i, box in enumerate(room.doors)
            ],
            windows=[
                self._element(i, box, ElementKind.WINDOW, scale)
                for i, box in enumerate([*room.windows, *room.openings])
            ],
            furniture=[
                self._element(i, box, ElementKind.OBJECT, scale)
                for i, box in enumerate(room.objects)
            ],
        )

    def _pose(self, box: OrientedBox, scale: float) -> tuple[Point2D, float]:
        position = box.center.to_plan(scale)
        angle = box.rotation_y
        if not (position.is_finite() and math.isfinite(angle)):
            logger.warning(
                "Degenerate transform for %r; element will be skipped when drawn",
                box.identifier or "<unnamed>",
            )
        return position, angle

    def _wall(self, index: int, box: OrientedBox, scale: float) -> WallSegment:
        position, angle = self._pose(box, scale)
        half = box.width * scale / 2
        d = Vector2D.from_angle(angle)
        return WallSegment(
            index=index,
            p1=Point2D(x=position.x - d.x * half, z=position.z - d.z * half),
            p2=Point2D(x=position.x + d.x * half, z=position.z + d.z * half),
            thickness=box.height * scale,
            length_m=box.width,
        )

    def _element(
        self, index: int, box: OrientedBox, kind: ElementKind, scale: float,
    ) -> PlanElement:
        position, angle = self._pose(box, scale)
        thickness = box.height
        if kind == ElementKind.WINDOW:
            thickness = max(box.height, self.min_window_thickness)
        return PlanElement(
            index=index,
            kind=kind,
            position=position,
            angle=angle,
            width=box.width * scale,
            depth=box.depth * scale,
            thickness=thickness * scale,
            width_m=box.width,
            depth_m=box.depth,
            category=box.category,
            confidence=box.confidence,
        )


def project(room: RoomRecordSet, scale: float = DEFAULT_SCALE) -> ProjectedRoom:
    """Project a captured room with default settings."""
    return RoomProjector().project(room, scale)
