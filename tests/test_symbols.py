"""Tests for the symbol rules: walls, doors, windows, furniture, labels."""
import math

import pytest

from floorplan.models import (
    DisplayOptions, Layer, LabelKind, OrientedBox, PlanElement, ElementKind,
    Point2D, RoomRecordSet, ViewTransform,
)
from floorplan.rules.furniture.glyphs import GlyphKind, GLYPH_DISPATCH, classify_category
from floorplan.rules.annotation.labels import display_category, infer_room_type, size_caption
from floorplan.services.plan_service import PlanService

from conftest import make_object


def close(a, b, tol=1e-9):
    return abs(a - b) < tol


@pytest.fixture(scope="module")
def service():
    return PlanService()


def door_room(confidence=1.0):
    return RoomRecordSet(doors=[
        OrientedBox.from_pose((0.0, 1.0, 0.0), 0.0, (0.9, 2.0, 0.1), confidence=confidence),
    ])


class TestWallFill:
    def test_one_fill_per_wall(self, service, rect_room):
        walls = service.render(rect_room).shapes_on(Layer.WALL)
        assert len(walls) == 4
        assert all(s.filled for s in walls)
        assert [s.source_index for s in walls] == [3, 0, 1, 2]

    def test_exterior_thickness_and_corner_extension(self, service, rect_room):
        south = next(s for s in service.render(rect_room).shapes_on(Layer.WALL)
                     if s.source_index == 0)
        xs = [p.x for p in south.points()]
        zs = [p.z for p in south.points()]
        ext = 12.7 * 0.3
        assert close(max(xs), 200.0 + ext, 1e-6) and close(min(xs), -200.0 - ext, 1e-6)
        assert close(max(zs), -150.0 + 12.7, 1e-6) and close(min(zs), -150.0 - 12.7, 1e-6)
        assert south.tags["corner"] == "true"
        assert south.tags["exterior"] == "true"

    def test_free_standing_wall_not_extended(self, service):
        room = RoomRecordSet(walls=[OrientedBox.from_pose((0.0, 0.0, 0.0), 0.0, (2.0, 2.5, 0.2))])
        shape = service.render(room).shapes_on(Layer.WALL)[0]
        assert close(max(p.x for p in shape.points()), 100.0)
        assert shape.tags["corner"] == "false"

    def test_interior_walls_thinner(self, service, split_room):
        scene = service.render(split_room)
        assert all(not w.is_exterior for w in scene.walls)
        assert all(close(w.thickness, 15.0) for w in scene.walls)

    def test_zero_length_wall_skipped(self, service):
        room = RoomRecordSet(walls=[OrientedBox.from_pose((0.0, 0.0, 0.0), 0.0, (0.0, 2.5, 0.2))])
        scene = service.render(room)
        assert scene.shapes_on(Layer.WALL) == []
        assert scene.topology.draw_order == [0]


class TestDoorSwing:
    def test_open_door_geometry(self, service):
        shape = service.render(door_room()).shapes_on(Layer.DOOR)[0]
        frame, leaf, arc = shape.paths
        start, end = frame.points
        assert close(start.x, -45.0) and close(end.x, 45.0)
        assert close(start.z, 0.0) and close(end.z, 0.0)
        hinge, tip = leaf.points
        assert close(hinge.x, -45.0) and close(hinge.z, 0.0)
        assert close(tip.x, -45.0) and close(tip.z, 81.0)
        assert close(arc.points[0].x, 36.0) and close(arc.points[0].z, 0.0)
        assert close(arc.points[-1].x, -45.0) and close(arc.points[-1].z, 81.0)
        assert all(close(p.distance_to(hinge), 81.0) for p in arc.points)
        assert shape.tags["state"] == "open"

    def test_low_confidence_closed_when_state_shown(self, service):
        options = DisplayOptions(show_door_state=True)
        shape = service.render(door_room("medium"), options=options).shapes_on(Layer.DOOR)[0]
        assert shape.filled and shape.tags["state"] == "closed"
        zs = [p.z for p in shape.points()]
        assert close(max(zs) - min(zs), 9.0)

    def test_confident_door_stays_open(self, service):
        options = DisplayOptions(show_door_state=True)
        shape = service.render(door_room("high"), options=options).shapes_on(Layer.DOOR)[0]
        assert shape.tags["state"] == "open"

    def test_state_ignored_by_default(self, service):
        shape = service.render(door_room("low")).shapes_on(Layer.DOOR)[0]
        assert shape.tags["state"] == "open"


class TestWindowPanes:
    def window_shape(self, service, width):
        room = RoomRecordSet(windows=[
            OrientedBox.from_pose((0.0, 1.0, 0.0), 0.0, (width, 0.1, 0.1)),
        ])
        return service.render(room).shapes_on(Layer.WINDOW)[0]

    def test_pane_count(self, service):
        shape = self.window_shape(service, 1.2)
        # 2 sill lines + 5 ticks for 4 divisions
        assert len(shape.paths) == 7
        assert shape.tags["panes"] == "4"

    def test_unbounded_width_skipped(self, service):
        room = RoomRecordSet(windows=[
            OrientedBox.from_pose((0.0, 1.0, 0.0), 0.0, (1e307, 0.1, 0.1)),
        ])
        assert service.render(room).shapes_on(Layer.WINDOW) == []

    def test_narrow_window_has_one_division(self, service):
        shape = self.window_shape(service, 0.2)
        assert len(shape.paths) == 4

    def test_sill_lines_at_half_thickness(self, service):
        outer, inner = self.window_shape(service, 1.2).paths[:2]
        assert all(close(p.z, -5.0) for p in outer.points)
        assert all(close(p.z, 5.0) for p in inner.points)


class TestFurnitureGlyphs:
    @pytest.mark.parametrize("category, kind", [
        ("CapturedRoom.ObjectCategory.bathtub", GlyphKind.TUB),
        ("shower", GlyphKind.TUB),
        ("toilet", GlyphKind.TOILET),
        ("sink", GlyphKind.SINK),
        ("bed", GlyphKind.BED),
        ("table", GlyphKind.TABLE),
        ("desk", GlyphKind.TABLE),
        ("chair", GlyphKind.SEATING),
        ("sofa", GlyphKind.SEATING),
        ("refrigerator", GlyphKind.GENERIC),
        ("Bed", GlyphKind.GENERIC),
    ])
    def test_classification(self, category, kind):
        assert classify_category(category) == kind

    def test_priority_order(self):
        # "bathtub" before "bed", "sink" before "table"
        assert classify_category("bathtubBed") == GlyphKind.TUB
        assert classify_category("sinkTable") == GlyphKind.SINK

    def test_dispatch_covers_every_kind(self):
        assert set(GLYPH_DISPATCH) == set(GlyphKind)

    @pytest.mark.parametrize("kind, n_paths", [
        (GlyphKind.TUB, 2), (GlyphKind.TOILET, 2), (GlyphKind.SINK, 2),
        (GlyphKind.BED, 3), (GlyphKind.TABLE, 3), (GlyphKind.SEATING, 2),
        (GlyphKind.GENERIC, 1),
    ])
    def test_glyph_paths(self, kind, n_paths):
        obj = PlanElement(index=0, kind=ElementKind.OBJECT, position=Point2D(x=10.0, z=20.0),
                          angle=0.4, width=100.0, depth=60.0)
        paths = GLYPH_DISPATCH[kind](obj)
        assert len(paths) == n_paths
        assert all(p.is_finite() for p in paths)

    def test_tub_drain_position(self):
        obj = PlanElement(index=0, kind=ElementKind.OBJECT, position=Point2D(x=0.0, z=0.0),
                          angle=0.0, width=100.0, depth=60.0)
        drain = GLYPH_DISPATCH[GlyphKind.TUB](obj)[1]
        xs = [p.x for p in drain.points]
        assert close((max(xs) + min(xs)) / 2, -12.5)
        assert close(max(xs) - min(xs), 6.0)

    def test_generic_dashed(self, service):
        room = RoomRecordSet(objects=[make_object("storage", 0.0, 0.0, 1.0, 0.5)])
        shape = service.render(room).shapes_on(Layer.FURNITURE)[0]
        assert shape.dash == [4.0, 2.0]
        assert shape.tags["glyph"] == "generic"

    def test_non_finite_object_skipped(self, service):
        room = RoomRecordSet(objects=[make_object("bed", math.nan, 0.0, 1.0, 2.0)])
        assert service.render(room).shapes_on(Layer.FURNITURE) == []


class TestLabels:
    def test_display_category(self):
        assert display_category("CapturedRoom.ObjectCategory.diningTable") == "Dining Table"
        assert display_category("bed") == "Bed"

    def test_size_caption(self):
        obj = PlanElement(index=0, kind=ElementKind.OBJECT, position=Point2D(x=0.0, z=0.0),
                          angle=0.0, width=120.0, depth=80.0, width_m=1.2, depth_m=0.8)
        assert size_caption(obj) == "1.2×0.8m"

    @pytest.mark.parametrize("category, room", [
        ("bed", "BEDROOM"),
        ("toilet", "BATHROOM"),
        ("sink", "KITCHEN"),
        ("bathroomSink", "ROOM"),
        ("table", "DINING"),
        ("coffeeTable", "LIVING"),
        ("sofa", "LIVING"),
        ("storage", "STORAGE"),
        ("television", "ROOM"),
    ])
    def test_room_inference(self, category, room):
        assert infer_room_type(category) == room

    def test_labels_for_furnished_room(self, service, furnished_room):
        labels = service.render(furnished_room).labels
        kinds = [lb.kind for lb in labels]
        assert kinds.count(LabelKind.FURNITURE) == 3
        assert kinds.count(LabelKind.FURNITURE_SIZE) == 3
        rooms = {lb.text for lb in labels if lb.kind == LabelKind.ROOM}
        assert rooms == {"BEDROOM", "DINING", "STORAGE"}

    def test_room_label_at_mean_position(self, service):
        room = RoomRecordSet(objects=[
            make_object("bed", -1.0, 0.0, 1.5, 2.0),
            make_object("bed", 1.0, 2.0, 1.5, 2.0),
        ])
        label = next(lb for lb in service.render(room).labels if lb.kind == LabelKind.ROOM)
        assert (label.text, label.position.x, label.position.z) == ("BEDROOM", 0.0, 100.0)

    def test_labels_hidden_when_zoomed_out(self, service, furnished_room):
        scene = service.render(furnished_room, view=ViewTransform.scaling(0.7))
        assert not any(lb.kind != LabelKind.DIMENSION for lb in scene.labels)

    def test_labels_toggle(self, service, furnished_room):
        scene = service.render(furnished_room, options=DisplayOptions(show_labels=False))
        assert all(lb.kind == LabelKind.DIMENSION for lb in scene.labels)
