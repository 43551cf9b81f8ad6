"""Simple polygon boundaries.

A Polygon is a cyclic sequence of vertices. Edge i runs from vertex i to
vertex i + 1, and the last edge closes the boundary back to vertex 0.

This module provides:
- Perimeter, centroid-relative signed area and area
- Boundary intersection with degenerate-vertex cleanup
- Point containment by ray casting (even-odd rule)
"""

import logging
import math
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from planargeom.config import GeometryConfig
from planargeom.core.line import ParametrizedLine
from planargeom.core.segment import Segment
from planargeom.domain import HitRecord, Vector, VectorLike
from planargeom.exceptions import OutOfRangeError

logger = logging.getLogger(__name__)


class Polygon:
    """A simple polygon boundary defined by its vertices.

    Vertices are only ever appended. Edges are derived on demand and never
    stored. No winding direction is required.
    """

    def __init__(
        self,
        vertices: Iterable[VectorLike] = (),
        config: GeometryConfig | None = None,
    ) -> None:
        self._vertices: list[Vector] = [Vector.coerce(v) for v in vertices]
        self.config = config or GeometryConfig()

    def __repr__(self) -> str:
        return f"Polygon({[v.to_tuple() for v in self._vertices]!r})"

    def __len__(self) -> int:
        return len(self._vertices)

    def __getitem__(self, index: int) -> Vector:
        return self.vertex(index)

    @property
    def vertices(self) -> tuple[Vector, ...]:
        return tuple(self._vertices)

    def add_vertex(self, vertex: VectorLike) -> "Polygon":
        """Append a vertex to the boundary.

        Returns:
            This polygon
        """
        self._vertices.append(Vector.coerce(vertex))
        return self

    def number_of_vertices(self) -> int:
        return len(self._vertices)

    def number_of_edges(self) -> int:
        return len(self._vertices)

    def vertex(self, index: int) -> Vector:
        """Vertex at a cyclic index (index modulo vertex count).

        Raises:
            OutOfRangeError: If the polygon has no vertices
        """
        if not self._vertices:
            raise OutOfRangeError("vertex", index, 0)
        return self._vertices[index % len(self._vertices)]

    def start(self) -> Vector:
        return self.vertex(0)

    def end(self) -> Vector:
        return self.vertex(-1)

    def edge(self, index: int) -> Segment:
        """Segment from vertex(index) to vertex(index + 1)."""
        return Segment(self.vertex(index), self.vertex(index + 1))

    def edges(self) -> Iterator[Segment]:
        for i in range(len(self._vertices)):
            yield self.edge(i)

    def perimeter(self, sqrt: Callable[[float], float] = math.sqrt) -> float:
        """Sum of edge lengths, closing edge included."""
        return sum((edge.length(sqrt) for edge in self.edges()), 0.0)

    def center(self) -> Vector:
        """Arithmetic mean of the vertices.

        Raises:
            OutOfRangeError: If the polygon has no vertices
        """
        n = len(self._vertices)
        if n == 0:
            raise OutOfRangeError("vertex", 0, 0)
        sx = sum(v.x for v in self._vertices)
        sy = sum(v.y for v in self._vertices)
        return Vector(sx / n, sy / n)

    def signed_area(self) -> float:
        """Calculate signed area with the shoelace formula.

        Vertices are translated by the centroid before summing, which keeps
        the cross terms small and reduces cancellation for polygons far from
        the origin.

        The sign indicates winding direction:
        - Positive area: counter-clockwise winding
        - Negative area: clockwise winding

        Returns:
            Signed area. Returns 0.0 for fewer than 3 vertices.

        Examples:
            >>> Polygon([(0, 0), (1, 0), (1, 1), (0, 1)]).signed_area()
            1.0
            >>> Polygon([(0, 0), (0, 1), (1, 1), (1, 0)]).signed_area()
            -1.0
        """
        n = len(self._vertices)
        if n < 3:
            return 0.0

        center = self.center()
        centered = [v - center for v in self._vertices]

        area = 0.0
        for i in range(n):
            c = centered[i]
            nxt = centered[(i + 1) % n]
            area += c.x * nxt.y - c.y * nxt.x

        return area / 2.0

    def area(self) -> float:
        return abs(self.signed_area())

    def intersect(self, line: "ParametrizedLine | Segment") -> HitRecord:
        """Intersect the boundary with a line, ray or segment.

        Each hit is tagged with the index of the edge that produced it and is
        oriented from the polygon's point of view: this_parameter is the
        edge-local parameter and other_parameter the probe's parameter.

        Args:
            line: Probe to intersect with every edge

        Returns:
            HitRecord in edge order, with duplicate vertex hits removed
        """
        probe = line.as_line()
        result = HitRecord()

        for i, edge in enumerate(self.edges()):
            inter = probe.intersect(edge)
            if inter.has_hit():
                inter.swap()
                result.add_intersection(inter.hits[0].located(vertex=i))

        return self._remove_degenerate_vertex_hits(result)

    def _remove_degenerate_vertex_hits(self, record: HitRecord) -> HitRecord:
        """Drop the second registration of a probe passing through a vertex.

        A probe through the vertex shared by edges i - 1 and i hits edge i - 1
        at parameter 1 and edge i at parameter 0. For every pair of
        neighbouring hits on consecutive edges (last/first included), the
        hit sitting at its edge's start vertex is removed.
        """
        count = record.number_of_hits()
        edges = len(self._vertices)
        if count < 2 or edges == 0:
            return record

        tolerance = self.config.vertex_tolerance
        to_delete: set[int] = set()

        for k in range(count):
            nxt = (k + 1) % count
            if nxt == k:
                continue
            current = record[k]
            following = record[nxt]
            if (following.location.vertex - current.location.vertex) % edges != 1:
                continue

            if abs(following.this_parameter) < tolerance:
                to_delete.add(nxt)
            elif abs(current.this_parameter) < tolerance:
                to_delete.add(k)

        for index in sorted(to_delete, reverse=True):
            logger.debug(
                "Dropping duplicate vertex hit on edge %d",
                record[index].location.vertex,
            )
            record.delete_by_index(index)

        return record

    def is_inside(self, point: VectorLike) -> bool:
        """Determine if a point is inside the polygon by ray casting.

        Casts a ray from the point directed away from the centroid and counts
        boundary crossings. Odd count = inside, even = outside.

        Args:
            point: The point to test

        Returns:
            True if point is inside polygon, False otherwise

        Examples:
            >>> square = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
            >>> square.is_inside((0.5, 0.3))
            True
            >>> square.is_inside((0.5, -0.3))
            False
        """
        if len(self._vertices) < 3:
            return False

        point = Vector.coerce(point)
        direction = point - self.center()
        if direction.dot() < self.config.centroid_tolerance:
            logger.debug("Point at centroid, using fallback probe direction")
            direction = Vector.coerce(self.config.fallback_direction)

        hits = self.intersect(ParametrizedLine.ray(point, direction))
        return hits.number_of_hits() % 2 == 1

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the vertex list
        """
        return {"vertices": [v.to_dict() for v in self._vertices]}

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], config: GeometryConfig | None = None
    ) -> "Polygon":
        """Deserialize from dictionary."""
        return cls([Vector.from_dict(v) for v in data["vertices"]], config=config)
