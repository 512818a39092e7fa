"""Geometric primitives used throughout the floor plan generator.

Everything here is forgiving: zero-length vectors normalize to the zero
vector and NaN inputs flow through as non-finite points that callers can
detect with ``is_finite()``. Nothing in this module raises.
"""

from __future__ import annotations
import math
from pydantic import BaseModel


class Point2D(BaseModel):
    """Point on the projection plane (world X-Z, vertical axis dropped)."""
    x: float
    z: float

    def distance_to(self, other: Point2D) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.z - other.z) ** 2)

    def lerp(self, other: Point2D, t: float) -> Point2D:
        return Point2D(
            x=self.x + (other.x - self.x) * t,
            z=self.z + (other.z - self.z) * t,
        )

    def midpoint(self, other: Point2D) -> Point2D:
        return self.lerp(other, 0.5)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.z)


class Point3D(BaseModel):
    """Point in 3D world space (Y up)."""
    x: float
    y: float
    z: float

    def to_plan(self, scale: float = 1.0) -> Point2D:
        """Drop the vertical axis and scale into drawing units."""
        return Point2D(x=self.x * scale, z=self.z * scale)


class Vector2D(BaseModel):
    """2D vector for direction calculations on the projection plane."""
    x: float
    z: float

    @classmethod
    def from_angle(cls, angle: float) -> Vector2D:
        return cls(x=math.cos(angle), z=math.sin(angle))

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.z * self.z)

    def normalized(self) -> Vector2D:
        ln = self.length()
        if not ln >= 1e-10:  # also catches NaN
            return Vector2D(x=0.0, z=0.0)
        return Vector2D(x=self.x / ln, z=self.z / ln)

    def perpendicular(self) -> Vector2D:
        """90-degree counterclockwise rotation, (-dz, dx)."""
        return Vector2D(x=-self.z, z=self.x)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.z * other.z

    def angle(self) -> float:
        return math.atan2(self.z, self.x)

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.z == 0.0

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(x=self.x * scalar, z=self.z * scalar)


def direction_from_points(start: Point2D, end: Point2D) -> Vector2D:
    """Get direction vector from start to end."""
    return Vector2D(x=end.x - start.x, z=end.z - start.z)


def perpendicular(direction: Vector2D) -> Vector2D:
    return direction.perpendicular()


def normalize(vector: Vector2D) -> Vector2D:
    return vector.normalized()


def distance(a: Point2D, b: Point2D) -> float:
    return a.distance_to(b)


def offset_point(point: Point2D, direction: Vector2D, d: float) -> Point2D:
    """Offset *point* by distance *d* along *direction*."""
    return Point2D(x=point.x + direction.x * d, z=point.z + direction.z * d)


def rotate(point: Point2D, angle: float, around: Point2D) -> Point2D:
    """Rotate a point given in local coordinates by *angle*, then translate to *around*.

    Local coordinates are relative to the pivot, which is how every symbol
    in the plan is laid out (corners as +/- half extents about the center).
    """
    c = math.cos(angle)
    s = math.sin(angle)
    return Point2D(
        x=point.x * c - point.z * s + around.x,
        z=point.x * s + point.z * c + around.z,
    )


def local_point(x: float, z: float, angle: float, around: Point2D) -> Point2D:
    return rotate(Point2D(x=x, z=z), angle, around)


class Polyline(BaseModel):
    """A stroked sub-path. Closed polylines are filled/stroked as polygons."""
    points: list[Point2D]
    closed: bool = False

    def is_finite(self) -> bool:
        return all(p.is_finite() for p in self.points)

    def length(self) -> float:
        pts = self.points + (self.points[:1] if self.closed else [])
        return sum(a.distance_to(b) for a, b in zip(pts, pts[1:]))


def segment_path(start: Point2D, end: Point2D) -> Polyline:
    return Polyline(points=[start, end])


def rectangle_path(corners: list[Point2D]) -> Polyline:
    """Closed 4-corner polygon."""
    return Polyline(points=list(corners[:4]), closed=True)


def box_corners(center: Point2D, half_w: float, half_d: float, angle: float) -> list[Point2D]:
    """Corners of a rotated box, counterclockwise from local (-w, -d)."""
    return [
        local_point(-half_w, -half_d, angle, center),
        local_point(half_w, -half_d, angle, center),
        local_point(half_w, half_d, angle, center),
        local_point(-half_w, half_d, angle, center),
    ]


def arc_path(
    center: Point2D,
    radius: float,
    start_angle: float,
    end_angle: float,
    clockwise: bool = False,
    segments: int = 24,
) -> Polyline:
    """Sample a circular arc from start_angle to end_angle (radians).

    Counterclockwise sweeps go the positive way round, clockwise the
    negative way, matching the usual path-builder convention.
    """
    if clockwise:
        sweep = -((start_angle - end_angle) % (2 * math.pi))
    else:
        sweep = (end_angle - start_angle) % (2 * math.pi)
    if sweep == 0 and end_angle != start_angle:
        sweep = -2 * math.pi if clockwise else 2 * math.pi
    n = max(segments, 1)
    return Polyline(points=[
        Point2D(
            x=center.x + radius * math.cos(start_angle + sweep * i / n),
            z=center.z + radius * math.sin(start_angle + sweep * i / n),
        )
        for i in range(n + 1)
    ])


def ellipse_path(
    center: Point2D, rx: float, rz: float, angle: float = 0.0, segments: int = 32,
) -> Polyline:
    """Closed ellipse with semi-axes rx, rz in local coordinates, rotated by angle."""
    n = max(segments, 3)
    pts = [
        local_point(rx * math.cos(2 * math.pi * i / n), rz * math.sin(2 * math.pi * i / n),
                    angle, center)
        for i in range(n)
    ]
    return Polyline(points=pts, closed=True)


class Rect(BaseModel):
    """Axis-aligned rectangle on the projection plane."""
    min_x: float = 0.0
    min_z: float = 0.0
    max_x: float = 0.0
    max_z: float = 0.0

    @classmethod
    def from_points(cls, points: list[Point2D]) -> Rect | None:
        finite = [p for p in points if p.is_finite()]
        if not finite:
            return None
        return cls(
            min_x=min(p.x for p in finite),
            min_z=min(p.z for p in finite),
            max_x=max(p.x for p in finite),
            max_z=max(p.z for p in finite),
        )

    @classmethod
    def around(cls, center: Point2D, half_w: float, half_d: float) -> Rect:
        return cls(
            min_x=center.x - half_w, min_z=center.z - half_d,
            max_x=center.x + half_w, max_z=center.z + half_d,
        )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_z - self.min_z

    @property
    def mid(self) -> Point2D:
        return Point2D(x=(self.min_x + self.max_x) / 2, z=(self.min_z + self.max_z) / 2)

    def corners(self) -> list[Point2D]:
        return [
            Point2D(x=self.min_x, z=self.min_z),
            Point2D(x=self.max_x, z=self.min_z),
            Point2D(x=self.max_x, z=self.max_z),
            Point2D(x=self.min_x, z=self.max_z),
        ]

    def union(self, other: Rect) -> Rect:
        return Rect(
            min_x=min(self.min_x, other.min_x),
            min_z=min(self.min_z, other.min_z),
            max_x=max(self.max_x, other.max_x),
            max_z=max(self.max_z, other.max_z),
        )

    def padded(self, padding: float) -> Rect:
        return Rect(
            min_x=self.min_x - padding, min_z=self.min_z - padding,
            max_x=self.max_x + padding, max_z=self.max_z + padding,
        )

    def contains(self, p: Point2D) -> bool:
        return self.min_x <= p.x <= self.max_x and self.min_z <= p.z <= self.max_z


class ViewTransform(BaseModel):
    """Affine pan/zoom transform, laid out like a 2D graphics CTM.

    x' = a*x + c*z + tx
    z' = b*x + d*z + ty
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> ViewTransform:
        return cls()

    @classmethod
    def translation(cls, dx: float, dz: float) -> ViewTransform:
        return cls(tx=dx, ty=dz)

    @classmethod
    def scaling(cls, s: float) -> ViewTransform:
        return cls(a=s, d=s)

    @classmethod
    def fit(
        cls,
        bounds: Rect,
        width: float,
        height: float,
        zoom: float = 1.0,
        pan_x: float = 0.0,
        pan_z: float = 0.0,
    ) -> ViewTransform:
        """Center *bounds* in a width x height viewport, then zoom and pan."""
        mid = bounds.mid
        return (
            cls.translation(-mid.x, -mid.z)
            .then(cls.scaling(zoom))
            .then(cls.translation(width / 2 + pan_x, height / 2 + pan_z))
        )

    def then(self, other: ViewTransform) -> ViewTransform:
        """Compose: apply self first, then other."""
        return ViewTransform(
            a=other.a * self.a + other.c * self.b,
            b=other.b * self.a + other.d * self.b,
            c=other.a * self.c + other.c * self.d,
            d=other.b * self.c + other.d * self.d,
            tx=other.a * self.tx + other.c * self.ty + other.tx,
            ty=other.b * self.tx + other.d * self.ty + other.ty,
        )

    @property
    def scale(self) -> float:
        return math.sqrt(abs(self.a * self.d - self.b * self.c))

    def apply(self, p: Point2D) -> Point2D:
        return Point2D(
            x=self.a * p.x + self.c * p.z + self.tx,
            z=self.b * p.x + self.d * p.z + self.ty,
        )

    def apply_path(self, path: Polyline) -> Polyline:
        return Polyline(points=[self.apply(p) for p in path.points], closed=path.closed)

    def apply_rect(self, rect: Rect) -> Rect:
        return Rect.from_points([self.apply(p) for p in rect.corners()]) or Rect()
