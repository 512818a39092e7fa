"""Furniture captions and furniture-inferred room names."""

from __future__ import annotations
import re

from floorplan.rules.base import PlanRule
from floorplan.models import (
    PlanContext, RuleOutput, TextLabel, LabelKind, PlanElement, Point2D,
)


CATEGORY_PREFIX = "CapturedRoom.ObjectCategory."
_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")

FURNITURE_FONT_SIZE = 8.0
SIZE_FONT_SIZE = 7.0
ROOM_FONT_SIZE = 12.0
NAME_OFFSET = -8.0  # Category name above the object center
SIZE_OFFSET = 5.0   # Size caption below it


def display_category(category: str) -> str:
    """'CapturedRoom.ObjectCategory.diningTable' -> 'Dining Table'."""
    name = category.replace(CATEGORY_PREFIX, "")
    return _CAMEL_BOUNDARY.sub(r"\1 \2", name).title()


def size_caption(obj: PlanElement) -> str:
    return f"{obj.width_m:.1f}×{obj.depth_m:.1f}m"


def infer_room_type(category: str) -> str:
    if "bed" in category:
        return "BEDROOM"
    if "bathtub" in category or "toilet" in category or "shower" in category:
        return "BATHROOM"
    if "sink" in category and "bathroom" not in category:
        return "KITCHEN"
    if "table" in category and "coffee" not in category:
        return "DINING"
    if "sofa" in category or "couch" in category or "coffee" in category:
        return "LIVING"
    if "storage" in category or "shelf" in category:
        return "STORAGE"
    return "ROOM"


class LabelRule(PlanRule):
    """
    Text labels for objects and rooms.

    Every object gets its category name and a size caption. Objects are
    then grouped by the room type they suggest, and each group gets one
    room name at the mean position of its members. All labels are hidden
    when the view is zoomed out to ``label_min_zoom`` or below.
    """

    priority = 90
    dependencies = ["annotation.dimensions"]  # Room names paint over dimension text

    def get_id(self) -> str:
        return "annotation.labels"

    def get_name(self) -> str:
        return "Labels"

    def applies(self, context: PlanContext) -> bool:
        return (
            context.options.show_labels
            and context.view.scale > context.params.label_min_zoom
            and len(context.room.furniture) > 0
        )

    def generate(self, context: PlanContext) -> RuleOutput:
        labels: list[TextLabel] = []
        rooms: dict[str, list[Point2D]] = {}

        for obj in context.room.furniture:
            if not obj.position.is_finite():
                continue
            pos = obj.position
            labels.append(TextLabel(
                text=display_category(obj.category),
                position=Point2D(x=pos.x, z=pos.z + NAME_OFFSET),
                kind=LabelKind.FURNITURE,
                font_size=FURNITURE_FONT_SIZE,
            ))
            labels.append(TextLabel(
                text=size_caption(obj),
                position=Point2D(x=pos.x, z=pos.z + SIZE_OFFSET),
                kind=LabelKind.FURNITURE_SIZE,
                font_size=SIZE_FONT_SIZE,
            ))
            rooms.setdefault(infer_room_type(obj.category), []).append(pos)

        for room_type, positions in rooms.items():
            labels.append(TextLabel(
                text=room_type,
                position=Point2D(
                    x=sum(p.x for p in positions) / len(positions),
                    z=sum(p.z for p in positions) / len(positions),
                ),
                kind=LabelKind.ROOM,
                font_size=ROOM_FONT_SIZE,
            ))

        return RuleOutput(labels=labels)
