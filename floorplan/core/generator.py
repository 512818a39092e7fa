"""Main plan generator — orchestrates projection, analysis and rule execution."""

from __future__ import annotations
import logging

from floorplan.models import (
    RoomRecordSet, FloorPlanScene, PlanParams, DisplayOptions, PlanContext,
    ProjectedRoom, Rect, ViewTransform, WallSegment, WallTopology,
)
from floorplan.core.registry import RuleRegistry
from floorplan.core.projector import RoomProjector
from floorplan.core.analyzer import TopologyAnalyzer, room_centroid
from floorplan.models.geometry import box_corners, local_point


logger = logging.getLogger(__name__)


class PlanGenerator:
    """
    Stateless plan generator.

    Takes a captured room + params, projects and analyzes it, executes
    the applicable rules and returns a complete FloorPlanScene. Every
    call rebuilds the scene from scratch.
    """

    def __init__(self, registry: RuleRegistry) -> None:
        self.registry = registry

    def generate(
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

        projected = RoomProjector(params.min_window_thickness).project(room, params.scale)
        analyzer = TopologyAnalyzer(
            grid=params.junction_grid,
            exterior_max_connections=params.exterior_max_connections,
            all_exterior_max_walls=params.all_exterior_max_walls,
        )

        # Analysis phase — junctions, perimeter walls, draw order
        topology = analyzer.analyze(projected.walls)
        walls = self._apply_policy(projected.walls, topology, params)

        context = PlanContext(
            room=projected,
            params=params,
            options=options,
            view=view or ViewTransform.identity(),
            walls=walls,
            topology=topology,
            centroid=room_centroid(walls),
        )

        # Generation phase — run applicable rules
        rules = self.registry.get_applicable_rules(context)
        for rule in rules:
            context.add(rule.generate(context))
        logger.debug("Ran %d rules: %d shapes, %d dimensions",
                     len(rules), len(context.shapes), len(context.dimensions))

        scene = FloorPlanScene(
            walls=walls,
            topology=topology,
            shapes=context.shapes,
            labels=context.labels,
            dimensions=context.dimensions,
            bounds=self.compute_bounds(projected, params.bounds_padding),
        )
        return scene.transformed(view) if view is not None else scene

    def _apply_policy(
        self, walls: list[WallSegment], topology: WallTopology, params: PlanParams,
    ) -> list[WallSegment]:
        """Replace measured thickness with the exterior/interior drawing thickness."""
        exterior = set(topology.exterior)
        result: list[WallSegment] = []
        for wall in walls:
            is_exterior = wall.index in exterior
            thickness = (
                params.exterior_wall_thickness if is_exterior
                else params.interior_wall_thickness
            )
            result.append(wall.model_copy(update={
                "is_exterior": is_exterior,
                "thickness": thickness * params.scale,
            }))
        return result

    @staticmethod
    def compute_bounds(room: ProjectedRoom, padding: float) -> Rect:
        """Extent of all walls, openings and furniture, plus padding."""
        points = [p for w in room.walls for p in (w.p1, w.p2)]
        for element in [*room.doors, *room.windows]:
            hw = element.width / 2
            points.append(local_point(-hw, 0.0, element.angle, element.position))
            points.append(local_point(hw, 0.0, element.angle, element.position))
        for obj in room.furniture:
            points.extend(box_corners(obj.position, obj.width / 2, obj.depth / 2, obj.angle))

        extent = Rect.from_points(points)
        if extent is None:
            return Rect()
        return extent.padded(padding)
