"""Open polygonal chains and their self-intersections."""

import logging
import math
from collections.abc import Callable, Iterable, Iterator

from planargeom.config import GeometryConfig
from planargeom.core.segment import Segment
from planargeom.domain import HitRecord, Vector, VectorLike
from planargeom.exceptions import CacheNotComputedError, OutOfRangeError

logger = logging.getLogger(__name__)


class PolygonalChain:
    """An open sequence of vertices joined by segments.

    Unlike Polygon, indexing is not cyclic and there is no closing edge.

    The self-intersection result is cached explicitly: find_self_intersections
    always recomputes and stores, self_intersections returns the stored
    record. Appending vertices does not invalidate the cache.
    """

    def __init__(
        self,
        vertices: Iterable[VectorLike] = (),
        config: GeometryConfig | None = None,
    ) -> None:
        self._vertices: list[Vector] = [Vector.coerce(v) for v in vertices]
        self.config = config or GeometryConfig()
        self._self_intersections: HitRecord | None = None

    def __repr__(self) -> str:
        return f"PolygonalChain({[v.to_tuple() for v in self._vertices]!r})"

    def __len__(self) -> int:
        return len(self._vertices)

    def __getitem__(self, index: int) -> Vector:
        return self.vertex(index)

    @property
    def vertices(self) -> tuple[Vector, ...]:
        return tuple(self._vertices)

    def add_vertex(self, vertex: VectorLike) -> "PolygonalChain":
        self._vertices.append(Vector.coerce(vertex))
        return self

    def number_of_vertices(self) -> int:
        return len(self._vertices)

    def number_of_edges(self) -> int:
        return max(len(self._vertices) - 1, 0)

    def vertex(self, index: int) -> Vector:
        """Vertex at a position in the chain.

        Raises:
            OutOfRangeError: If index is outside [0, number_of_vertices())
        """
        if not 0 <= index < len(self._vertices):
            raise OutOfRangeError("vertex", index, len(self._vertices))
        return self._vertices[index]

    def start(self) -> Vector:
        return self.vertex(0)

    def end(self) -> Vector:
        return self.vertex(len(self._vertices) - 1)

    def edge(self, index: int) -> Segment:
        """Segment from vertex(index) to vertex(index + 1)."""
        if not 0 <= index < self.number_of_edges():
            raise OutOfRangeError("edge", index, self.number_of_edges())
        return Segment(self._vertices[index], self._vertices[index + 1])

    def edges(self) -> Iterator[Segment]:
        for i in range(self.number_of_edges()):
            yield self.edge(i)

    def displacement(self) -> Vector:
        """Vector from the first to the last vertex."""
        return self.end() - self.start()

    def length(self, sqrt: Callable[[float], float] = math.sqrt) -> float:
        """Sum of consecutive vertex distances."""
        return sum((edge.length(sqrt) for edge in self.edges()), 0.0)

    def find_self_intersections(self) -> HitRecord:
        """Recompute and cache every crossing between non-adjacent edges.

        Adjacent edges share an endpoint and are skipped. Each hit is tagged
        with the earlier edge index as location.vertex and the later edge
        index as location.face.

        Returns:
            The freshly computed record, also stored as self_intersections
        """
        result = HitRecord()
        edges = list(self.edges())

        for i in range(len(edges)):
            for j in range(i + 2, len(edges)):
                inter = edges[i].intersect(edges[j])
                if inter.has_hit():
                    result.add_intersection(inter.hits[0].located(vertex=i, face=j))

        logger.debug(
            "Self-intersection search: %d edges, %d hits",
            len(edges),
            result.number_of_hits(),
        )
        self._self_intersections = result
        return result

    @property
    def self_intersections(self) -> HitRecord:
        """Record from the last find_self_intersections call.

        Raises:
            CacheNotComputedError: If never computed or cleared since
        """
        if self._self_intersections is None:
            raise CacheNotComputedError("self_intersections")
        return self._self_intersections

    def clear_self_intersections(self) -> None:
        self._self_intersections = None

    def is_simple(self) -> bool:
        """Recompute self-intersections and report whether there are none."""
        return not self.find_self_intersections().has_hit()
