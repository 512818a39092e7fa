"""Captured room records, as handed over by the scanning session."""

from __future__ import annotations
import math
from enum import Enum
from pydantic import BaseModel, field_validator

from .geometry import Point3D


class ElementKind(str, Enum):
    WALL = "wall"
    DOOR = "door"
    WINDOW = "window"
    OBJECT = "object"


# RoomPlan reports confidence as an enum rather than a number.
CONFIDENCE_LEVELS = {"low": 0.25, "medium": 0.5, "high": 0.9}


class OrientedBox(BaseModel):
    """A box positioned and yaw-rotated in world space.

    ``transform`` is the 4x4 world transform flattened column-major, the
    layout RoomPlan uses when it serializes a captured room. Walls, doors,
    windows and objects all share this shape.
    """
    transform: list[float]
    dimensions: tuple[float, float, float]  # width, height, depth (meters)
    identifier: str = ""
    category: str = ""
    confidence: float = 1.0

    @field_validator("transform")
    @classmethod
    def _check_transform(cls, v: list[float]) -> list[float]:
        if len(v) != 16:
            raise ValueError(f"transform needs 16 values, got {len(v)}")
        return v

    @field_validator("confidence", mode="before")
    @classmethod
    def _parse_confidence(cls, v: object) -> object:
        if isinstance(v, str) and v.lower() in CONFIDENCE_LEVELS:
            return CONFIDENCE_LEVELS[v.lower()]
        return v

    @classmethod
    def from_pose(
        cls,
        center: tuple[float, float, float],
        rotation_y: float,
        dimensions: tuple[float, float, float],
        **kwargs: object,
    ) -> OrientedBox:
        """Build a box from a center point and a plan-view yaw.

        The yaw is measured in the plan from +X toward +Z, so
        ``rotation_y`` round-trips through the ``rotation_y`` property.
        """
        c = math.cos(rotation_y)
        s = math.sin(rotation_y)
        transform = [
            c, 0.0, s, 0.0,     # column 0: local X (length axis)
            0.0, 1.0, 0.0, 0.0,  # column 1: up
            -s, 0.0, c, 0.0,    # column 2
            center[0], center[1], center[2], 1.0,
        ]
        return cls(transform=transform, dimensions=dimensions, **kwargs)

    @property
    def center(self) -> Point3D:
        t = self.transform
        return Point3D(x=t[12], y=t[13], z=t[14])

    @property
    def forward(self) -> Point3D:
        """First basis column: the box's local X axis in world space."""
        t = self.transform
        return Point3D(x=t[0], y=t[1], z=t[2])

    @property
    def rotation_y(self) -> float:
        f = self.forward
        return math.atan2(f.z, f.x)

    @property
    def width(self) -> float:
        return self.dimensions[0]

    @property
    def height(self) -> float:
        return self.dimensions[1]

    @property
    def depth(self) -> float:
        return self.dimensions[2]


class RoomRecordSet(BaseModel):
    """Everything the scanning session captured for one room."""
    walls: list[OrientedBox] = []
    doors: list[OrientedBox] = []
    windows: list[OrientedBox] = []
    openings: list[OrientedBox] = []
    objects: list[OrientedBox] = []

    @property
    def element_count(self) -> int:
        return (len(self.walls) + len(self.doors) + len(self.windows)
                + len(self.openings) + len(self.objects))
