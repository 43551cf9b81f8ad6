"""Planargeom - a planar computational-geometry kernel.

Planargeom provides parametrized lines, rays and segments, simple polygon
boundaries, open polygonal chains and planar polygon meshes, together with
the intersection algebra that relates them.

Example:
    >>> from planargeom.core import Polygon
    >>> square = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
    >>> square.area()
    1.0
    >>> square.is_inside((0.5, 0.3))
    True
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
