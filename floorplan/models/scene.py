"""Floor plan output models: drawable shapes, labels, dimensions."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

from .geometry import Point2D, Polyline, Rect, ViewTransform
from .plan import WallSegment, WallTopology


class Layer(str, Enum):
    WALL = "wall"
    DOOR = "door"
    WINDOW = "window"
    FURNITURE = "furniture"
    DIMENSION = "dimension"


class LabelKind(str, Enum):
    DIMENSION = "dimension"
    FURNITURE = "furniture"
    FURNITURE_SIZE = "furniture_size"
    ROOM = "room"


class DimensionSource(str, Enum):
    WALL = "wall"
    DOOR = "door"
    WINDOW = "window"
    OVERALL = "overall"


class Shape(BaseModel):
    """One drawable item: a set of sub-paths sharing a style."""
    layer: Layer
    source_index: int = -1
    paths: list[Polyline]
    filled: bool = False
    dash: list[float] = []
    line_width: float = 1.0
    tags: dict[str, str] = {}  # Extensible metadata (rule that created it, etc.)

    def points(self) -> list[Point2D]:
        return [p for path in self.paths for p in path.points]

    def transformed(self, view: ViewTransform) -> Shape:
        return self.model_copy(update={"paths": [view.apply_path(p) for p in self.paths]})


class TextLabel(BaseModel):
    """Positioned text. ``background`` is an opaque box behind the text."""
    text: str
    position: Point2D
    kind: LabelKind
    font_size: float = 10.0
    background: Rect | None = None

    def transformed(self, view: ViewTransform) -> TextLabel:
        return self.model_copy(update={
            "position": view.apply(self.position),
            "background": view.apply_rect(self.background) if self.background else None,
        })


class DimensionMarker(BaseModel):
    """An offset dimension line for one measured span.

    Recomputed on every render pass; never stored with the room.
    """
    start: Point2D
    end: Point2D
    label: str
    offset_distance: float
    outward_sign: int
    extension_lines: list[Polyline]
    ticks: list[Polyline]
    dimension_line: Polyline
    label_position: Point2D
    label_box: Rect
    source: DimensionSource = DimensionSource.WALL
    source_index: int = -1

    def transformed(self, view: ViewTransform) -> DimensionMarker:
        return self.model_copy(update={
            "start": view.apply(self.start),
            "end": view.apply(self.end),
            "extension_lines": [view.apply_path(p) for p in self.extension_lines],
            "ticks": [view.apply_path(p) for p in self.ticks],
            "dimension_line": view.apply_path(self.dimension_line),
            "label_position": view.apply(self.label_position),
            "label_box": view.apply_rect(self.label_box),
        })


class FloorPlanScene(BaseModel):
    """The complete floor plan for one paint.

    Rebuilt in full whenever the room or a display option changes.
    """
    walls: list[WallSegment] = []
    topology: WallTopology = WallTopology()
    shapes: list[Shape] = []
    labels: list[TextLabel] = []
    dimensions: list[DimensionMarker] = []
    bounds: Rect = Rect()
    stats: SceneStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = SceneStats.from_scene(self)

    def shapes_on(self, layer: Layer) -> list[Shape]:
        return [s for s in self.shapes if s.layer == layer]

    def transformed(self, view: ViewTransform) -> FloorPlanScene:
        """Map every coordinate through *view*; topology stays in plan space."""
        return FloorPlanScene(
            walls=self.walls,
            topology=self.topology,
            shapes=[s.transformed(view) for s in self.shapes],
            labels=[lb.transformed(view) for lb in self.labels],
            dimensions=[dm.transformed(view) for dm in self.dimensions],
            bounds=view.apply_rect(self.bounds),
            stats=self.stats,
        )


class SceneStats(BaseModel):
    """Summary counts for a generated scene."""
    total_shapes: int = 0
    walls: int = 0
    exterior_walls: int = 0
    interior_walls: int = 0
    doors: int = 0
    windows: int = 0
    furniture: int = 0
    dimensions: int = 0
    labels: int = 0

    @classmethod
    def from_scene(cls, scene: FloorPlanScene) -> SceneStats:
        exterior = sum(1 for w in scene.walls if w.is_exterior)
        return cls(
            total_shapes=len(scene.shapes),
            walls=sum(1 for s in scene.shapes if s.layer == Layer.WALL),
            exterior_walls=exterior,
            interior_walls=len(scene.walls) - exterior,
            doors=sum(1 for s in scene.shapes if s.layer == Layer.DOOR),
            windows=sum(1 for s in scene.shapes if s.layer == Layer.WINDOW),
            furniture=sum(1 for s in scene.shapes if s.layer == Layer.FURNITURE),
            dimensions=len(scene.dimensions),
            labels=len(scene.labels),
        )


FloorPlanScene.model_rebuild()
