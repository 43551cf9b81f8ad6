"""Line segments in space.

Segment3 intersection solves the xy projection of both segments and then
requires the two segments to reach the same height at the solved
parameters.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass, field

from planargeom.config import GeometryConfig
from planargeom.domain import HitRecord, Vector3


@dataclass(frozen=True, slots=True)
class Segment3:
    """A finite edge in space from start (parameter 0) to end (parameter 1).

    Attributes:
        start: First endpoint
        end: Second endpoint
        config: Tolerances; z_tolerance bounds the height mismatch accepted
            by intersect
    """

    start: Vector3
    end: Vector3
    config: GeometryConfig | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", Vector3.coerce(self.start))
        object.__setattr__(self, "end", Vector3.coerce(self.end))
        if self.config is None:
            object.__setattr__(self, "config", GeometryConfig())

    @classmethod
    def from_origin(
        cls, end: Vector3, config: GeometryConfig | None = None
    ) -> "Segment3":
        return cls(Vector3(0.0, 0.0, 0.0), Vector3.coerce(end), config)

    def displacement(self) -> Vector3:
        return self.end - self.start

    def length_squared(self) -> float:
        return self.displacement().dot()

    def length(self, sqrt: Callable[[float], float] = math.sqrt) -> float:
        """Euclidean length, using the supplied square root."""
        return sqrt(self.length_squared())

    def intersect(self, other: "Segment3") -> HitRecord:
        """Intersect with another segment in space.

        Segments whose xy projections are parallel never intersect, even when
        they are vertical or collinear. The receiver's z_tolerance applies.

        Args:
            other: Segment to intersect with

        Returns:
            HitRecord with one hit (t, s, position) or no hits
        """
        d0 = self.displacement()
        d1 = other.displacement()
        diff = other.start - self.start

        det = d0.x * d1.y - d1.x * d0.y
        if det == 0.0:
            return HitRecord()

        t = (d1.y * diff.x - d1.x * diff.y) / det
        s = (d0.y * diff.x - d0.x * diff.y) / det

        if not (0 <= t <= 1 and 0 <= s <= 1):
            return HitRecord()

        z_this = self.start.z + d0.z * t
        z_other = other.start.z + d1.z * s
        if abs(z_this - z_other) > self.config.z_tolerance:
            return HitRecord()

        return HitRecord.single(t, s, self.start + d0 * t)
