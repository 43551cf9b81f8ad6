"""Finite directed line segments in the plane."""

import math
from collections.abc import Callable
from dataclasses import dataclass

from planargeom.core.line import ParametrizedLine
from planargeom.domain import HitRecord, Vector, VectorLike


@dataclass(frozen=True, slots=True)
class Segment:
    """A finite edge from start (parameter 0) to end (parameter 1).

    Intersection delegates to ParametrizedLine configured as directed and
    terminated with bound 1.

    Attributes:
        start: First endpoint
        end: Second endpoint
    """

    start: Vector
    end: Vector

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", Vector.coerce(self.start))
        object.__setattr__(self, "end", Vector.coerce(self.end))

    @classmethod
    def from_origin(cls, end: VectorLike) -> "Segment":
        """Segment from the origin to end."""
        return cls(Vector(0.0, 0.0), Vector.coerce(end))

    def displacement(self) -> Vector:
        """Vector from start to end."""
        return self.end - self.start

    def length_squared(self) -> float:
        return self.displacement().dot()

    def length(self, sqrt: Callable[[float], float] = math.sqrt) -> float:
        """Segment length.

        Args:
            sqrt: Square root routine, replaceable for custom numeric types

        Returns:
            Euclidean length of the segment
        """
        return sqrt(self.length_squared())

    def point_at(self, parameter: float) -> Vector:
        return self.start + self.displacement() * parameter

    def as_line(self) -> ParametrizedLine:
        """Equivalent directed, terminated parametrized line."""
        return ParametrizedLine(
            self.start,
            self.displacement(),
            directed=True,
            terminated=True,
            termination_parameter=1.0,
        )

    def intersect(self, other: "Segment | ParametrizedLine") -> HitRecord:
        """Intersect with another segment or parametrized line.

        Examples:
            >>> up = Segment((0.0, 0.0), (1.0, 1.0))
            >>> down = Segment((0.0, 1.0), (1.0, 0.0))
            >>> up.intersect(down).position
            Vector(x=0.5, y=0.5)
        """
        return self.as_line().intersect(other)
