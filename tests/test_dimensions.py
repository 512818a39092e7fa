"""Tests for floorplan/core/dimensioning.py dimension markers."""
import math

from floorplan.core.dimensioning import dimension_line, outward_sign, label_box
from floorplan.models import DimensionSource, Point2D


ORIGIN = Point2D(x=0.0, z=0.0)


def P(x, z):
    return Point2D(x=x, z=z)


def close(a, b, tol=1e-9):
    return abs(a - b) < tol


class TestOutwardSign:
    def test_south_wall_points_down(self):
        assert outward_sign(P(-200, -150), P(200, -150), ORIGIN) == -1

    def test_reversed_wall_flips_sign(self):
        assert outward_sign(P(200, -150), P(-200, -150), ORIGIN) == 1

    def test_east_wall(self):
        assert outward_sign(P(200, -150), P(200, 150), ORIGIN) == -1


class TestDimensionLine:
    def test_offset_away_from_centroid(self):
        m = dimension_line(P(-200, -150), P(200, -150), ORIGIN, label="13'1 1/2\"")
        assert m.outward_sign == -1
        ext1, ext2 = m.dimension_line.points
        assert (ext1.x, ext1.z) == (-200.0, -190.0)
        assert (ext2.x, ext2.z) == (200.0, -190.0)

    def test_east_wall_offsets_to_the_right(self):
        m = dimension_line(P(200, -150), P(200, 150), ORIGIN)
        assert all(close(p.x, 240.0) for p in m.dimension_line.points)

    def test_extension_lines(self):
        m = dimension_line(P(-200, -150), P(200, -150), ORIGIN, offset=30.0)
        first = m.extension_lines[0]
        assert (first.points[0].x, first.points[0].z) == (-200.0, -150.0)
        assert (first.points[1].x, first.points[1].z) == (-200.0, -180.0)
        assert close(first.length(), 30.0)

    def test_ticks_centered_on_outer_ends(self):
        m = dimension_line(P(-200, -150), P(200, -150), ORIGIN, tick_length=7.0)
        assert len(m.ticks) == 2
        for tick, end in zip(m.ticks, m.dimension_line.points):
            assert close(tick.length(), 7.0)
            mid = tick.points[0].midpoint(tick.points[1])
            assert close(mid.x, end.x) and close(mid.z, end.z)

    def test_ticks_slash_at_45_degrees(self):
        # South wall: along +x, outward -z
        m = dimension_line(P(-200, -150), P(200, -150), ORIGIN, tick_length=7.0)
        for tick in m.ticks:
            a, b = tick.points
            assert close(b.x - a.x, 3.5 * math.sqrt(2))
            assert close(b.z - a.z, -3.5 * math.sqrt(2))

    def test_label_past_the_line(self):
        m = dimension_line(P(-200, -150), P(200, -150), ORIGIN, label="x", label_gap=6.0)
        assert (m.label_position.x, m.label_position.z) == (0.0, -196.0)
        assert m.label_box.contains(m.label_position)

    def test_source_recorded(self):
        m = dimension_line(P(0, 0), P(10, 0), P(5, 5), source=DimensionSource.DOOR,
                           source_index=3)
        assert m.source == DimensionSource.DOOR and m.source_index == 3

    def test_zero_length_returns_none(self):
        assert dimension_line(P(5, 5), P(5, 5), ORIGIN) is None

    def test_non_finite_returns_none(self, caplog):
        assert dimension_line(P(math.nan, 0), P(5, 5), ORIGIN) is None
        assert "non-finite" in caplog.text


class TestLabelBox:
    def test_size_from_text(self):
        box = label_box("12'", P(0, 0), font_size=10.0, padding=6.0)
        assert close(box.width, 3 * 10 * 0.6 + 12)
        assert close(box.height, 22.0)
        assert close(box.mid.x, 0.0) and close(box.mid.z, 0.0)
