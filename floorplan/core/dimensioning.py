"""Dimension annotator: outward-offset dimension lines with ticks and labels."""

from __future__ import annotations
import logging
import math

from floorplan.models import (
    DimensionMarker, DimensionSource, Point2D, Rect, direction_from_points,
)
from floorplan.models.geometry import offset_point, segment_path


logger = logging.getLogger(__name__)

CHAR_WIDTH_RATIO = 0.6  # Average glyph advance relative to font size


def outward_sign(start: Point2D, end: Point2D, centroid: Point2D) -> int:
    """+1 if the left-hand perpendicular of start->end points away from centroid."""
    perp = direction_from_points(start, end).normalized().perpendicular()
    to_wall = direction_from_points(centroid, start.midpoint(end))
    return 1 if perp.dot(to_wall) > 0 else -1


def label_box(text: str, center: Point2D, font_size: float, padding: float) -> Rect:
    """Opaque background sized to the text, centered on the label position."""
    width = len(text) * font_size * CHAR_WIDTH_RATIO + 2 * padding
    height = font_size + 2 * padding
    return Rect.around(center, width / 2, height / 2)


def dimension_line(
    start: Point2D,
    end: Point2D,
    centroid: Point2D,
    offset: float = 40.0,
    tick_length: float = 7.0,
    label: str = "",
    label_gap: float = 6.0,
    font_size: float = 10.0,
    padding: float = 6.0,
    source: DimensionSource = DimensionSource.WALL,
    source_index: int = -1,
) -> DimensionMarker | None:
    """Build the dimension marker for the span start -> end.

    Extension lines run from each endpoint away from the room centroid,
    a 45-degree tick crosses each outer end, and the label sits just past
    the middle of the dimension line. Returns None for zero-length or
    non-finite spans.
    """
    if not (start.is_finite() and end.is_finite() and centroid.is_finite()):
        logger.warning("Skipping dimension %r: non-finite geometry", label)
        return None
    unit = direction_from_points(start, end).normalized()
    if unit.is_zero():
        logger.debug("Skipping dimension %r: zero-length span", label)
        return None

    sign = outward_sign(start, end, centroid)
    out = unit.perpendicular() * sign
    ext1 = offset_point(start, out, offset)
    ext2 = offset_point(end, out, offset)

    slash = (unit.x + out.x, unit.z + out.z)
    ln = math.hypot(*slash)
    half = tick_length / 2
    ticks = [
        segment_path(
            Point2D(x=p.x - slash[0] / ln * half, z=p.z - slash[1] / ln * half),
            Point2D(x=p.x + slash[0] / ln * half, z=p.z + slash[1] / ln * half),
        )
        for p in (ext1, ext2)
    ]

    label_position = offset_point(ext1.midpoint(ext2), out, label_gap)
    return DimensionMarker(
        start=start,
        end=end,
        label=label,
        offset_distance=offset,
        outward_sign=sign,
        extension_lines=[segment_path(start, ext1), segment_path(end, ext2)],
        ticks=ticks,
        dimension_line=segment_path(ext1, ext2),
        label_position=label_position,
        label_box=label_box(label, label_position, font_size, padding),
        source=source,
        source_index=source_index,
    )
