"""Integration tests classifying grid nodes against polygons.

These mirror how a finite-difference solver consumes the kernel: every
node of a regular grid is tested with Polygon.is_inside to decide whether
it belongs to a fixed-value region.
"""

import pytest

from planargeom.core import PlanarMesh, Polygon
from planargeom.domain import Vector


def grid_nodes(size_x: int, size_y: int, spacing: float, start: Vector):
    """Yield (i, j, position) for every node of a regular grid."""
    for i in range(size_x):
        for j in range(size_y):
            yield i, j, Vector(start.x + i * spacing, start.y + j * spacing)


class TestGridClassification:
    """Classify grid nodes against simple polygons."""

    def test_l_shape_mask(self):
        """Nodes in the notch of the L are outside, all others inside."""
        shape = Polygon([(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)])

        for i, j, node in grid_nodes(4, 4, 0.5, Vector(0.25, 0.25)):
            expected = not (node.x > 1.0 and node.y > 1.0)
            assert shape.is_inside(node) == expected, (i, j, node)

    def test_square_region_inside_larger_grid(self):
        """Count nodes strictly inside a square region."""
        region = Polygon([(1.05, 1.05), (2.95, 1.05), (2.95, 2.95), (1.05, 2.95)])

        frozen = [
            (i, j) for i, j, node in grid_nodes(5, 5, 1.0, Vector(0.0, 0.0))
            if region.is_inside(node)
        ]

        assert frozen == [(2, 2)]

    def test_region_count_scales_with_area(self):
        """A fine grid inside a triangle covers about the triangle's area."""
        triangle = Polygon([(0.0, 0.0), (4.0, 0.0), (0.0, 4.0)])
        spacing = 0.1
        start = Vector(0.05 - 1.0, 0.033 - 1.0)

        inside = sum(
            triangle.is_inside(node)
            for _, _, node in grid_nodes(60, 60, spacing, start)
        )

        assert inside * spacing * spacing == pytest.approx(triangle.area(), rel=0.05)

    def test_mesh_faces_partition_the_grid(self):
        """Each interior node of a 2x2 face mesh belongs to exactly one face."""
        mesh = PlanarMesh(
            [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1), (0, 2), (1, 2), (2, 2)],
            [[0, 1, 4, 3], [1, 2, 5, 4], [3, 4, 7, 6], [4, 5, 8, 7]],
        )

        for _, _, node in grid_nodes(4, 4, 0.5, Vector(0.2, 0.35)):
            owners = [k for k, face in enumerate(mesh.faces()) if face.is_inside(node)]
            assert len(owners) == 1, node
            assert owners[0] == mesh.locate(node)
