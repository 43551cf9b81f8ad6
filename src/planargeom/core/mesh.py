"""Planar polygon meshes: a shared vertex pool plus index-list faces."""

import logging
from collections.abc import Iterable, Iterator

from planargeom.config import GeometryConfig
from planargeom.core.line import ParametrizedLine
from planargeom.core.polygon import Polygon
from planargeom.core.segment import Segment
from planargeom.domain import HitRecord, Vector, VectorLike
from planargeom.exceptions import OutOfRangeError

logger = logging.getLogger(__name__)


class PlanarMesh:
    """A growable pool of vertices and faces referencing them by index.

    Faces are not validated: overlapping or non-simple faces are accepted
    and simply contribute their own area to the total.
    """

    def __init__(
        self,
        vertices: Iterable[VectorLike] = (),
        faces: Iterable[Iterable[int]] = (),
        config: GeometryConfig | None = None,
    ) -> None:
        self._vertices: list[Vector] = [Vector.coerce(v) for v in vertices]
        self._faces: list[tuple[int, ...]] = [tuple(face) for face in faces]
        self.config = config or GeometryConfig()

    def __repr__(self) -> str:
        return (
            f"PlanarMesh(vertices={len(self._vertices)}, "
            f"faces={len(self._faces)})"
        )

    def add_vertex(self, position: VectorLike) -> int:
        """Append a vertex.

        Returns:
            Index of the new vertex
        """
        self._vertices.append(Vector.coerce(position))
        return len(self._vertices) - 1

    def add_face(self, face: Iterable[int]) -> int:
        """Append a face given as vertex indices.

        Returns:
            Index of the new face
        """
        self._faces.append(tuple(face))
        return len(self._faces) - 1

    def number_of_vertices(self) -> int:
        return len(self._vertices)

    def number_of_faces(self) -> int:
        return len(self._faces)

    def vertex(self, index: int) -> Vector:
        if not 0 <= index < len(self._vertices):
            raise OutOfRangeError("vertex", index, len(self._vertices))
        return self._vertices[index]

    def face_indices(self, index: int) -> tuple[int, ...]:
        if not 0 <= index < len(self._faces):
            raise OutOfRangeError("face", index, len(self._faces))
        return self._faces[index]

    def face(self, index: int) -> Polygon:
        """Polygon built from copies of the vertices referenced by a face.

        Raises:
            OutOfRangeError: If the face or one of its vertex indices is missing
        """
        return Polygon(
            [self.vertex(i) for i in self.face_indices(index)],
            config=self.config,
        )

    def faces(self) -> Iterator[Polygon]:
        for i in range(len(self._faces)):
            yield self.face(i)

    def area(self) -> float:
        """Sum of face areas; only meaningful for non-overlapping simple faces."""
        return sum((face.area() for face in self.faces()), 0.0)

    def intersect(self, line: "ParametrizedLine | Segment") -> HitRecord:
        """Intersect every face boundary with a probe.

        Shared edges between faces are reported once per face.

        Returns:
            HitRecord in face order, each hit tagged with its face index
        """
        result = HitRecord()
        for face_index, face in enumerate(self.faces()):
            for hit in face.intersect(line):
                result.add_intersection(hit.located(face=face_index))
        return result

    def locate(self, point: VectorLike) -> int | None:
        """Index of the first face containing the point, or None."""
        for face_index, face in enumerate(self.faces()):
            if face.is_inside(point):
                return face_index
        logger.debug("Point %s not inside any of %d faces", point, len(self._faces))
        return None
