"""Parametrized lines: infinite lines, rays and bounded lines.

A ParametrizedLine is the set of points start + t * direction for every t
in its valid parameter range. Two flags and a bound select the range:

    directed  terminated  range
    --------  ----------  -----------------
    False     False       (-inf, +inf)      infinite line
    True      False       [0, +inf)         ray
    True      True        [0, bound]        segment (bound 1)
    False     True        [-bound, bound]   symmetric bounded line

A single intersection routine serves every combination of variants.
"""

from dataclasses import dataclass

from planargeom.domain import HitRecord, Vector, VectorLike


@dataclass
class ParametrizedLine:
    """A line in the plane with a configurable parameter range.

    Attributes:
        start: Point at parameter 0
        direction: Displacement per unit parameter (not validated as non-zero)
        directed: Restrict the range to non-negative parameters
        terminated: Clip the range to the termination parameter
        termination_parameter: Range bound, used only when terminated
    """

    start: Vector
    direction: Vector
    directed: bool = False
    terminated: bool = False
    termination_parameter: float = 1.0

    def __post_init__(self) -> None:
        self.start = Vector.coerce(self.start)
        self.direction = Vector.coerce(self.direction)

    @classmethod
    def line(cls, start: VectorLike, direction: VectorLike) -> "ParametrizedLine":
        """Infinite line through start along direction."""
        return cls(Vector.coerce(start), Vector.coerce(direction))

    @classmethod
    def ray(cls, start: VectorLike, direction: VectorLike) -> "ParametrizedLine":
        """Ray from start along direction."""
        return cls(Vector.coerce(start), Vector.coerce(direction), directed=True)

    @classmethod
    def through(cls, start: VectorLike, end: VectorLike) -> "ParametrizedLine":
        """Segment configuration from start (t=0) to end (t=1)."""
        start = Vector.coerce(start)
        return cls(
            start,
            Vector.coerce(end) - start,
            directed=True,
            terminated=True,
            termination_parameter=1.0,
        )

    @classmethod
    def bounded(
        cls, start: VectorLike, direction: VectorLike, bound: float
    ) -> "ParametrizedLine":
        """Undirected line restricted to parameters in [-bound, bound]."""
        return cls(
            Vector.coerce(start),
            Vector.coerce(direction),
            directed=False,
            terminated=True,
            termination_parameter=bound,
        )

    def as_line(self) -> "ParametrizedLine":
        return self

    def point_at(self, parameter: float) -> Vector:
        """Point reached at the given parameter."""
        return self.start + self.direction * parameter

    def accepts(self, parameter: float) -> bool:
        """Check whether a parameter lies inside the valid range.

        Args:
            parameter: Parameter value along this line

        Returns:
            True if the parameter satisfies the directedness and termination rules
        """
        if self.directed:
            if parameter < 0:
                return False
            if self.terminated and parameter > self.termination_parameter:
                return False
            return True

        if self.terminated:
            bound = self.termination_parameter
            return -bound <= parameter <= bound

        return True

    def intersect(self, other) -> HitRecord:
        """Intersect with another parametrized line or segment.

        Solves start + t * direction == other.start + s * other.direction
        with Cramer's rule and filters t and s against each side's range.
        Parallel lines, collinear ones included, never intersect.

        Args:
            other: A ParametrizedLine, or anything exposing as_line()

        Returns:
            HitRecord with one hit (t, s, position) or no hits

        Examples:
            >>> a = ParametrizedLine.through((0.0, 0.0), (1.0, 1.0))
            >>> b = ParametrizedLine.through((0.0, 1.0), (1.0, 0.0))
            >>> hit = a.intersect(b)
            >>> hit.this_parameter, hit.other_parameter
            (0.5, 0.5)
        """
        other = other.as_line()

        diff = other.start - self.start

        a11 = self.direction.x
        a12 = other.direction.x
        a21 = self.direction.y
        a22 = other.direction.y
        b1 = diff.x
        b2 = diff.y

        det = a11 * a22 - a12 * a21
        if det == 0.0:
            return HitRecord()

        t = (a22 * b1 - a12 * b2) / det
        s = (a21 * b1 - a11 * b2) / det

        if not self.accepts(t) or not other.accepts(s):
            return HitRecord()

        return HitRecord.single(t, s, self.point_at(t))
