"""Domain models for planargeom.

This module contains the value types shared by every kernel operation:

- Vector / Vector3: Coordinates with arithmetic and dot product
- HitLocation: Which edge/face produced an intersection
- SingleHit: One parametric intersection result
- HitRecord: Zero or more intersection results
"""

from planargeom.domain.hits import HitLocation, HitRecord, SingleHit
from planargeom.domain.vector import Vector, Vector3, VectorLike

__all__: list[str] = [
    # Coordinates
    "Vector",
    "Vector3",
    "VectorLike",
    # Intersection results
    "HitLocation",
    "SingleHit",
    "HitRecord",
]
