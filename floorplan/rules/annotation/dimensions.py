"""Dimension annotations for walls, openings and the overall room."""

from __future__ import annotations
import math

from floorplan.rules.base import PlanRule
from floorplan.core.dimensioning import dimension_line
from floorplan.core.units import format_length
from floorplan.models import (
    PlanContext, RuleOutput, TextLabel, LabelKind, DimensionMarker, DimensionSource,
    PlanElement, Point2D, Rect,
)
from floorplan.models.geometry import local_point


class DimensionRule(PlanRule):
    """
    Offset dimension lines with length labels.

    Walls longer than ``min_dimension_length`` are always measured; doors
    and windows get their opening width on a tighter offset, and the
    overall room width and depth sit outside everything else.
    """

    priority = 80  # After all symbols so labels paint over them

    def get_id(self) -> str:
        return "annotation.dimensions"

    def get_name(self) -> str:
        return "Dimensions"

    def applies(self, context: PlanContext) -> bool:
        return context.options.show_dimensions and len(context.walls) > 0

    def generate(self, context: PlanContext) -> RuleOutput:
        output = RuleOutput()
        params = context.params

        for wall in context.walls:
            if wall.length_m > params.min_dimension_length:
                self._add(output, context, wall.p1, wall.p2, wall.length_m,
                          params.dimension_offset, DimensionSource.WALL, wall.index)

        for door in context.room.doors:
            self._add_opening(output, context, door, DimensionSource.DOOR)
        for window in context.room.windows:
            self._add_opening(output, context, window, DimensionSource.WINDOW)

        if context.options.show_overall_dimensions:
            self._add_overall(output, context)

        return output

    def _add_opening(
        self,
        output: RuleOutput,
        context: PlanContext,
        element: PlanElement,
        source: DimensionSource,
    ) -> None:
        if not (element.width_m > 0 and math.isfinite(element.angle)):
            return
        hw = element.width / 2
        start = local_point(-hw, 0.0, element.angle, element.position)
        end = local_point(hw, 0.0, element.angle, element.position)
        self._add(output, context, start, end, element.width_m,
                  context.params.dimension_offset / 2, source, element.index)

    def _add_overall(self, output: RuleOutput, context: PlanContext) -> None:
        extent = Rect.from_points([p for w in context.walls for p in (w.p1, w.p2)])
        if extent is None:
            return
        scale = context.params.scale
        offset = context.params.dimension_offset * 2
        corners = extent.corners()
        # Width along the near edge, depth along the left edge
        self._add(output, context, corners[0], corners[1], extent.width / scale,
                  offset, DimensionSource.OVERALL, 0, centroid=extent.mid)
        self._add(output, context, corners[3], corners[0], extent.height / scale,
                  offset, DimensionSource.OVERALL, 1, centroid=extent.mid)

    def _add(
        self,
        output: RuleOutput,
        context: PlanContext,
        start: Point2D,
        end: Point2D,
        length_m: float,
        offset: float,
        source: DimensionSource,
        source_index: int,
        centroid: Point2D | None = None,
    ) -> None:
        params = context.params
        text = format_length(length_m, context.options.units)
        marker: DimensionMarker | None = dimension_line(
            start,
            end,
            centroid or context.centroid,
            offset=offset,
            tick_length=params.tick_length,
            label=text,
            label_gap=params.label_gap,
            font_size=params.dimension_font_size,
            padding=params.label_padding,
            source=source,
            source_index=source_index,
        )
        if marker is None:
            return
        output.dimensions.append(marker)
        output.labels.append(TextLabel(
            text=text,
            position=marker.label_position,
            kind=LabelKind.DIMENSION,
            font_size=params.dimension_font_size,
            background=marker.label_box,
        ))
