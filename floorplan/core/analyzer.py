"""Wall topology analysis: junctions, exterior classification, draw order."""

from __future__ import annotations
import logging
import math

from floorplan.models import Junction, Point2D, WallSegment, WallTopology


logger = logging.getLogger(__name__)

GRID = 0.1  # Drawing units; merges endpoints from independently computed transforms


class TopologyAnalyzer:
    """Analyzes walls to detect junctions, perimeter walls and corner draw order.

    Exterior classification is a connection-count heuristic: a wall that
    touches at most ``exterior_max_connections`` other walls is taken to be
    on the perimeter. It matches simple rectangular rooms; it is not a
    topological guarantee for L-shapes or multi-wing layouts.

    Junctions are fixed grid cells, not a distance test: two endpoints
    closer than ``grid`` still land in different cells when a cell boundary
    (a half-grid value) falls between them, and those walls do not connect.
    """

    def __init__(
        self,
        grid: float = GRID,
        exterior_max_connections: int = 2,
        all_exterior_max_walls: int = 4,
    ) -> None:
        self.grid = grid
        self.exterior_max_connections = exterior_max_connections
        self.all_exterior_max_walls = all_exterior_max_walls

    def analyze(self, walls: list[WallSegment]) -> WallTopology:
        """Run all analysis passes. Pure: same walls in, same topology out."""
        buckets = self._build_junctions(walls)
        junctions = [
            Junction(key=key, point=self._snap_point(key), wall_indices=indices)
            for key, indices in buckets.items()
        ]
        connections = self._count_connections(walls, buckets)
        exterior = self._classify(walls, connections)
        corners = self._corner_groups(walls, junctions)
        draw_order, corner_walls = self._draw_order(walls, corners)

        return WallTopology(
            junctions=junctions,
            connections=connections,
            exterior=exterior,
            corners=corners,
            draw_order=draw_order,
            corner_walls=corner_walls,
        )

    def _snap(self, v: float) -> int:
        """Grid cell of v, rounding halves away from zero."""
        return int(math.copysign(math.floor(abs(v) / self.grid + 0.5), v))

    def _snap_key(self, pt: Point2D) -> tuple[int, int] | None:
        """Snap to grid for grouping nearby points; None if the cell overflows."""
        if not (math.isfinite(pt.x / self.grid) and math.isfinite(pt.z / self.grid)):
            return None
        return (self._snap(pt.x), self._snap(pt.z))

    def _snap_point(self, key: tuple[int, int]) -> Point2D:
        return Point2D(x=key[0] * self.grid, z=key[1] * self.grid)

    def _build_junctions(self, walls: list[WallSegment]) -> dict[tuple[int, int], list[int]]:
        """Map each snapped endpoint to the walls touching it, one entry per endpoint."""
        buckets: dict[tuple[int, int], list[int]] = {}
        for wall in walls:
            for pt in (wall.p1, wall.p2):
                key = self._snap_key(pt) if pt.is_finite() else None
                if key is None:
                    logger.warning("Wall %d has a non-finite endpoint; left out of junctions",
                                   wall.index)
                    continue
                buckets.setdefault(key, []).append(wall.index)
        return buckets

    def _count_connections(
        self, walls: list[WallSegment], buckets: dict[tuple[int, int], list[int]],
    ) -> dict[int, int]:
        """Number of other walls sharing any junction with each wall."""
        keys_by_wall: dict[int, set[tuple[int, int]]] = {w.index: set() for w in walls}
        for key, indices in buckets.items():
            for idx in indices:
                keys_by_wall[idx].add(key)

        connections: dict[int, int] = {}
        for wall in walls:
            own = keys_by_wall[wall.index]
            connections[wall.index] = sum(
                1 for other in walls
                if other.index != wall.index and own & keys_by_wall[other.index]
            )
        return connections

    def _classify(self, walls: list[WallSegment], connections: dict[int, int]) -> list[int]:
        if len(walls) <= self.all_exterior_max_walls:
            return sorted(w.index for w in walls)
        return sorted(
            idx for idx, count in connections.items()
            if count <= self.exterior_max_connections
        )

    def _corner_groups(
        self, walls: list[WallSegment], junctions: list[Junction],
    ) -> list[list[int]]:
        """Member walls of every multi-wall junction, most-connected corners first."""
        angles = {w.index: self._wall_angle(w) for w in walls}
        groups: list[tuple[int, list[int]]] = []
        for junction in junctions:
            if not junction.is_corner:
                continue
            members = sorted(set(junction.wall_indices), key=lambda i: (angles[i], i))
            groups.append((len(junction.wall_indices), members))

        # Stable sort keeps discovery order between equally connected corners
        groups.sort(key=lambda g: -g[0])
        return [members for _, members in groups]

    def _draw_order(
        self, walls: list[WallSegment], corners: list[list[int]],
    ) -> tuple[list[int], list[int]]:
        """Corner walls first (first assignment wins), then everything else."""
        order: list[int] = []
        drawn: set[int] = set()
        for members in corners:
            for idx in members:
                if idx in drawn:
                    continue
                order.append(idx)
                drawn.add(idx)
        corner_walls = list(order)

        for wall in walls:
            if wall.index not in drawn:
                order.append(wall.index)
                drawn.add(wall.index)
        return order, corner_walls

    def _wall_angle(self, wall: WallSegment) -> float:
        angle = wall.direction.angle()
        return angle if math.isfinite(angle) else 0.0


def room_centroid(walls: list[WallSegment]) -> Point2D:
    """Mean of wall midpoints; the origin for an empty room."""
    mids = [w.midpoint for w in walls if w.is_finite()]
    if not mids:
        return Point2D(x=0.0, z=0.0)
    return Point2D(
        x=sum(m.x for m in mids) / len(mids),
        z=sum(m.z for m in mids) / len(mids),
    )
