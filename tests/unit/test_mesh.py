"""Unit tests for planar polygon meshes."""

import pytest

from planargeom.config import GeometryConfig
from planargeom.core import ParametrizedLine, PlanarMesh, Polygon
from planargeom.domain import Vector
from planargeom.exceptions import OutOfRangeError

ZERO = Vector(0.0, 0.0)
I = Vector(1.0, 0.0)
J = Vector(0.0, 1.0)


@pytest.fixture
def grid() -> PlanarMesh:
    """2x2 grid of unit squares."""
    mesh = PlanarMesh()

    v00 = mesh.add_vertex(ZERO)
    v01 = mesh.add_vertex(I)
    v02 = mesh.add_vertex(I + I)

    v10 = mesh.add_vertex(J)
    v11 = mesh.add_vertex(J + I)
    v12 = mesh.add_vertex(J + I + I)

    v20 = mesh.add_vertex(J + J)
    v21 = mesh.add_vertex(J + J + I)
    v22 = mesh.add_vertex(J + J + I + I)

    mesh.add_face([v00, v01, v11, v10])
    mesh.add_face([v01, v02, v12, v11])
    mesh.add_face([v10, v11, v21, v20])
    mesh.add_face([v11, v12, v22, v21])
    return mesh


class TestMeshAssembly:
    """Tests for building meshes."""

    def test_add_returns_indices(self):
        """Adding vertices and faces returns their indices."""
        mesh = PlanarMesh()
        assert mesh.add_vertex((0, 0)) == 0
        assert mesh.add_vertex((1, 0)) == 1
        assert mesh.add_vertex((0, 1)) == 2
        assert mesh.add_face([0, 1, 2]) == 0
        assert mesh.add_face((2, 1, 0)) == 1

    def test_counts(self, grid):
        """Counts and index lookups reflect the grid."""
        assert grid.number_of_faces() == 4
        assert grid.number_of_vertices() == 9
        assert grid.vertex(4) == Vector(1.0, 1.0)
        assert grid.face_indices(3) == (4, 5, 8, 7)

    def test_constructor_with_pools(self):
        """Vertices and faces can be passed to the constructor."""
        mesh = PlanarMesh([(0, 0), (2, 0), (0, 2)], [[0, 1, 2]])
        assert mesh.area() == pytest.approx(2.0)

    def test_config_is_passed_to_faces(self):
        """Faces inherit the mesh's tolerances."""
        config = GeometryConfig(vertex_tolerance=1e-3)
        mesh = PlanarMesh([(0, 0), (2, 0), (0, 2)], [[0, 1, 2]], config=config)
        assert mesh.face(0).config is config

    def test_default_configs_are_independent(self):
        """Meshes built without a config do not share tolerances."""
        a = PlanarMesh([(0, 0), (1, 0), (0, 1)], [[0, 1, 2]])
        b = PlanarMesh([(0, 0), (1, 0), (0, 1)], [[0, 1, 2]])
        a.config.centroid_tolerance = 100.0
        assert b.config.centroid_tolerance == 1e-4
        assert b.face(0).config.centroid_tolerance == 1e-4


class TestMeshFaces:
    """Tests for face materialization and area."""

    def test_faces(self, grid):
        """Every grid face is a unit square."""
        for face in grid.faces():
            assert isinstance(face, Polygon)
            assert face.number_of_vertices() == 4
            assert face.area() == pytest.approx(1.0)
            assert face.perimeter() == pytest.approx(4.0)

    def test_total_area(self, grid):
        """The 2x2 grid covers four units of area."""
        assert grid.area() == pytest.approx(4.0)

    def test_face_copies_vertices(self, grid):
        """Faces hold copies of the pooled coordinates."""
        face = grid.face(0)
        face.add_vertex((9.0, 9.0))
        assert grid.face(0).number_of_vertices() == 4

    def test_overlapping_faces_are_summed(self):
        """Overlapping faces each contribute their area."""
        mesh = PlanarMesh([(0, 0), (1, 0), (1, 1), (0, 1)], [[0, 1, 2, 3], [3, 2, 1, 0]])
        assert mesh.area() == pytest.approx(2.0)

    def test_missing_face(self, grid):
        """Unknown face indices raise."""
        with pytest.raises(OutOfRangeError):
            grid.face(4)

    def test_dangling_vertex_index(self):
        """A face referencing a missing vertex raises when materialized."""
        mesh = PlanarMesh([(0, 0), (1, 0)], [[0, 1, 7]])
        with pytest.raises(OutOfRangeError) as exc_info:
            mesh.face(0)
        assert exc_info.value.index == 7


class TestMeshQueries:
    """Tests for mesh-wide intersection and point location."""

    def test_intersect_tags_faces(self, grid):
        """Mesh hits carry the face and edge that produced them."""
        line = ParametrizedLine.line(Vector(-1.0, 0.5), I)
        hits = grid.intersect(line)

        assert hits.number_of_hits() == 4
        assert [h.location.face for h in hits] == [0, 0, 1, 1]
        assert [h.location.vertex for h in hits] == [1, 3, 1, 3]
        assert all(h.this_parameter == pytest.approx(0.5) for h in hits)

    def test_locate(self, grid):
        """locate returns the owning face or None."""
        assert grid.locate((0.5, 0.5)) == 0
        assert grid.locate((1.5, 0.5)) == 1
        assert grid.locate((0.5, 1.5)) == 2
        assert grid.locate((1.25, 1.75)) == 3
        assert grid.locate((5.0, 5.0)) is None
