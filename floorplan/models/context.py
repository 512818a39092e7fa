"""Plan context: accumulates state during one scene build."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .geometry import Point2D, ViewTransform
from .parameters import PlanParams, DisplayOptions
from .plan import ProjectedRoom, WallSegment, WallTopology
from .scene import Shape, TextLabel, DimensionMarker


class RuleOutput(BaseModel):
    """What a single rule contributes to the scene."""
    shapes: list[Shape] = []
    labels: list[TextLabel] = []
    dimensions: list[DimensionMarker] = []


class PlanContext(BaseModel):
    """
    Holds all state during a single scene build.

    The analyzer adds topology and the classified walls.
    Rules add shapes, labels and dimension markers.
    The generator orchestrates the flow.
    """
    # Input
    room: ProjectedRoom
    params: PlanParams = Field(default_factory=PlanParams)
    options: DisplayOptions = Field(default_factory=DisplayOptions)
    view: ViewTransform = Field(default_factory=ViewTransform)

    # Analysis results (populated by the analyzer)
    walls: list[WallSegment] = []
    topology: WallTopology = Field(default_factory=WallTopology)
    centroid: Point2D = Field(default_factory=lambda: Point2D(x=0.0, z=0.0))

    # Output (populated by rules)
    shapes: list[Shape] = []
    labels: list[TextLabel] = []
    dimensions: list[DimensionMarker] = []

    def add(self, output: RuleOutput) -> None:
        self.shapes.extend(output.shapes)
        self.labels.extend(output.labels)
        self.dimensions.extend(output.dimensions)

    def get_wall(self, index: int) -> WallSegment | None:
        for w in self.walls:
            if w.index == index:
                return w
        return None
