"""Furniture glyphs: architectural plan symbols per object category.

The captured category label is matched against a fixed, ordered list of
substrings. The first hit picks the glyph; anything unmatched gets the
dashed generic outline.
"""

from __future__ import annotations
import logging
import math
from enum import Enum
from typing import Callable

from floorplan.rules.base import PlanRule
from floorplan.models import (
    PlanContext, RuleOutput, Shape, Layer, PlanElement, Point2D, Polyline,
)
from floorplan.models.geometry import (
    box_corners, ellipse_path, local_point, rectangle_path, segment_path,
)


logger = logging.getLogger(__name__)


class GlyphKind(str, Enum):
    TUB = "tub"
    TOILET = "toilet"
    SINK = "sink"
    BED = "bed"
    TABLE = "table"
    SEATING = "seating"
    GENERIC = "generic"


# Checked in order; matching is case-sensitive like the captured labels.
GLYPH_PATTERNS: list[tuple[tuple[str, ...], GlyphKind]] = [
    (("bathtub", "shower"), GlyphKind.TUB),
    (("toilet",), GlyphKind.TOILET),
    (("sink",), GlyphKind.SINK),
    (("bed",), GlyphKind.BED),
    (("table", "desk"), GlyphKind.TABLE),
    (("chair", "sofa"), GlyphKind.SEATING),
]

GENERIC_DASH = [4.0, 2.0]


def classify_category(category: str) -> GlyphKind:
    for needles, kind in GLYPH_PATTERNS:
        if any(n in category for n in needles):
            return kind
    return GlyphKind.GENERIC


def _outline(obj: PlanElement) -> Polyline:
    return rectangle_path(box_corners(obj.position, obj.width / 2, obj.depth / 2, obj.angle))


def _tub(obj: PlanElement) -> list[Polyline]:
    hw = obj.width / 2
    drain = Point2D(
        x=obj.position.x - hw * 0.25 * math.cos(obj.angle),
        z=obj.position.z - hw * 0.25 * math.sin(obj.angle),
    )
    r = min(obj.width, obj.depth) * 0.05
    return [_outline(obj), ellipse_path(drain, r, r, obj.angle)]


def _toilet(obj: PlanElement) -> list[Polyline]:
    w, d = obj.width, obj.depth
    bowl = ellipse_path(obj.position, w * 0.35, d * 0.3, obj.angle)
    # Tank sits behind the bowl
    tank = rectangle_path([
        local_point(x, z, obj.angle, obj.position)
        for x, z in ((-w * 0.35, d * 0.3), (w * 0.35, d * 0.3),
                     (w * 0.35, d * 0.6), (-w * 0.35, d * 0.6))
    ])
    return [bowl, tank]


def _sink(obj: PlanElement) -> list[Polyline]:
    w, d = obj.width, obj.depth
    return [
        ellipse_path(obj.position, w * 0.35, d * 0.35, obj.angle),
        ellipse_path(obj.position, w * 0.05, d * 0.05, obj.angle),
    ]


def _bed(obj: PlanElement) -> list[Polyline]:
    hw, hd = obj.width / 2, obj.depth / 2

    def line(z: float) -> Polyline:
        return segment_path(
            local_point(-hw * 0.8, z, obj.angle, obj.position),
            local_point(hw * 0.8, z, obj.angle, obj.position),
        )

    return [_outline(obj), line(-hd * 0.8), line(hd * 0.4)]


def _table(obj: PlanElement) -> list[Polyline]:
    p1, p2, p3, p4 = box_corners(obj.position, obj.width / 2, obj.depth / 2, obj.angle)
    return [_outline(obj), segment_path(p1, p3), segment_path(p2, p4)]


def _seating(obj: PlanElement) -> list[Polyline]:
    w, d = obj.width, obj.depth
    hw, hd = w / 2, d / 2
    back = -hd + d * 0.2
    return [
        _outline(obj),
        segment_path(
            local_point(-hw + w * 0.2, back, obj.angle, obj.position),
            local_point(hw - w * 0.2, back, obj.angle, obj.position),
        ),
    ]


def _generic(obj: PlanElement) -> list[Polyline]:
    return [_outline(obj)]


GLYPH_DISPATCH: dict[GlyphKind, Callable[[PlanElement], list[Polyline]]] = {
    GlyphKind.TUB: _tub,
    GlyphKind.TOILET: _toilet,
    GlyphKind.SINK: _sink,
    GlyphKind.BED: _bed,
    GlyphKind.TABLE: _table,
    GlyphKind.SEATING: _seating,
    GlyphKind.GENERIC: _generic,
}


class FurnitureGlyphRule(PlanRule):
    """One symbol per captured object, chosen by its category."""

    priority = 40

    def get_id(self) -> str:
        return "furniture.glyphs"

    def get_name(self) -> str:
        return "Furniture Glyphs"

    def applies(self, context: PlanContext) -> bool:
        return len(context.room.furniture) > 0

    def generate(self, context: PlanContext) -> RuleOutput:
        shapes: list[Shape] = []
        for obj in context.room.furniture:
            if not (obj.position.is_finite() and math.isfinite(obj.angle)):
                logger.warning("Skipping object %d (%s): non-finite pose",
                               obj.index, obj.category)
                continue
            kind = classify_category(obj.category)
            shapes.append(Shape(
                layer=Layer.FURNITURE,
                source_index=obj.index,
                paths=GLYPH_DISPATCH[kind](obj),
                dash=list(GENERIC_DASH) if kind == GlyphKind.GENERIC else [],
                line_width=1.5,
                tags={"rule": self.get_id(), "glyph": kind.value},
            ))
        return RuleOutput(shapes=shapes)
