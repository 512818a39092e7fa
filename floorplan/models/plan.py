"""Projected plan elements and wall topology."""

from __future__ import annotations
from pydantic import BaseModel

from .geometry import Point2D, Vector2D, direction_from_points, distance
from .room import ElementKind


class WallSegment(BaseModel):
    """A wall flattened onto the projection plane.

    ``index`` is the wall's position in the captured wall list and stays
    stable through classification and draw ordering.
    """
    index: int
    p1: Point2D
    p2: Point2D
    thickness: float
    is_exterior: bool = False
    length_m: float = 0.0

    @property
    def length(self) -> float:
        return distance(self.p1, self.p2)

    @property
    def direction(self) -> Vector2D:
        return direction_from_points(self.p1, self.p2)

    @property
    def midpoint(self) -> Point2D:
        return self.p1.midpoint(self.p2)

    def is_finite(self) -> bool:
        return self.p1.is_finite() and self.p2.is_finite()


class PlanElement(BaseModel):
    """A projected door, window or object."""
    index: int
    kind: ElementKind
    position: Point2D
    angle: float
    width: float
    depth: float
    thickness: float = 0.0
    width_m: float = 0.0
    depth_m: float = 0.0
    category: str = ""
    confidence: float = 1.0


class ProjectedRoom(BaseModel):
    walls: list[WallSegment] = []
    doors: list[PlanElement] = []
    windows: list[PlanElement] = []
    furniture: list[PlanElement] = []


class Junction(BaseModel):
    """A grid-snapped point where wall endpoints meet."""
    key: tuple[int, int]
    point: Point2D
    wall_indices: list[int]

    @property
    def is_corner(self) -> bool:
        return len(self.wall_indices) >= 2


class WallTopology(BaseModel):
    """Result of analyzing how walls connect."""
    junctions: list[Junction] = []
    connections: dict[int, int] = {}
    exterior: list[int] = []
    corners: list[list[int]] = []   # member walls per corner, in draw order
    draw_order: list[int] = []
    corner_walls: list[int] = []    # walls drawn in the corner pass

    def junction_map(self) -> dict[tuple[int, int], list[int]]:
        return {j.key: j.wall_indices for j in self.junctions}

    def is_exterior(self, index: int) -> bool:
        return index in self.exterior
