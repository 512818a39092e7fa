from .geometry import (
    Point2D, Point3D, Vector2D, Polyline, Rect, ViewTransform,
    direction_from_points,
)
from .room import OrientedBox, RoomRecordSet, ElementKind
from .plan import WallSegment, PlanElement, ProjectedRoom, Junction, WallTopology
from .scene import (
    Shape, Layer, TextLabel, LabelKind, DimensionMarker, DimensionSource,
    FloorPlanScene, SceneStats,
)
from .parameters import PlanParams, DisplayOptions, Units
from .context import PlanContext, RuleOutput

__all__ = [
    "Point2D", "Point3D", "Vector2D", "Polyline", "Rect", "ViewTransform",
    "direction_from_points",
    "OrientedBox", "RoomRecordSet", "ElementKind",
    "WallSegment", "PlanElement", "ProjectedRoom", "Junction", "WallTopology",
    "Shape", "Layer", "TextLabel", "LabelKind", "DimensionMarker", "DimensionSource",
    "FloorPlanScene", "SceneStats",
    "PlanParams", "DisplayOptions", "Units",
    "PlanContext", "RuleOutput",
]
