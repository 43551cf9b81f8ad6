"""Core geometry kernel for planargeom.

This module contains the geometric primitives and the algorithms relating
them:

- Parametrized lines (infinite lines, rays, bounded lines) and the single
  two-line intersection solver
- Segments in the plane and in space
- Polygon boundaries (perimeter, area, boundary intersection, containment)
- Open polygonal chains (length, self-intersection search)
- Planar meshes (faces over a shared vertex pool, total area)

Key classes:
- ParametrizedLine: Line with configurable parameter range
- Segment: Finite directed edge between two points
- Segment3: Finite edge in space
- Polygon: Cyclic vertex list with containment test
- PolygonalChain: Open vertex list with self-intersection detection
- PlanarMesh: Vertex pool plus index-list faces
"""

from planargeom.core.chain import PolygonalChain
from planargeom.core.line import ParametrizedLine
from planargeom.core.mesh import PlanarMesh
from planargeom.core.polygon import Polygon
from planargeom.core.segment import Segment
from planargeom.core.segment3 import Segment3

__all__ = [
    # Lines
    "ParametrizedLine",
    "Segment",
    "Segment3",
    # Boundaries
    "Polygon",
    "PolygonalChain",
    "PlanarMesh",
]
