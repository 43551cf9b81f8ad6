"""Hit records produced by intersection queries.

Every intersection operation in the kernel returns a HitRecord. A record
with no hits is the normal way of saying "no intersection"; reading a
parameter or position from such a record is a programming error and raises
EmptyResultError.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Any

from planargeom.domain.vector import Vector, Vector3
from planargeom.exceptions import EmptyResultError, OutOfRangeError


@dataclass(frozen=True, slots=True)
class HitLocation:
    """Structural location of a hit on a boundary.

    Attributes:
        vertex: Index of the edge that produced the hit (edge i starts at vertex i)
        face: Index of the mesh face, or of a second edge for chain hits
    """

    vertex: int = 0
    face: int = 0


@dataclass(frozen=True, slots=True)
class SingleHit:
    """One intersection between two parametrized curves.

    Attributes:
        this_parameter: Position along the first curve
        other_parameter: Position along the second curve
        position: Intersection point
        location: Which edge/face produced the hit
    """

    this_parameter: float
    other_parameter: float
    position: Vector | Vector3
    location: HitLocation = field(default_factory=HitLocation)

    def swapped(self) -> "SingleHit":
        """Return a copy with this/other parameters exchanged."""
        return replace(
            self,
            this_parameter=self.other_parameter,
            other_parameter=self.this_parameter,
        )

    def located(self, vertex: int | None = None, face: int | None = None) -> "SingleHit":
        """Return a copy with an updated location.

        Args:
            vertex: New edge index, unchanged when None
            face: New face index, unchanged when None
        """
        location = HitLocation(
            vertex=self.location.vertex if vertex is None else vertex,
            face=self.location.face if face is None else face,
        )
        return replace(self, location=location)

    def to_dict(self) -> dict[str, Any]:
        return {
            "this_parameter": self.this_parameter,
            "other_parameter": self.other_parameter,
            "position": list(self.position.to_tuple()),
            "vertex": self.location.vertex,
            "face": self.location.face,
        }


@dataclass
class HitRecord:
    """Ordered collection of zero or more single hits.

    The record only grows through add_intersection and only shrinks through
    delete_by_index or clear. Hits are kept in insertion order.

    Attributes:
        hits: The contained hits
    """

    hits: list[SingleHit] = field(default_factory=list)

    @classmethod
    def single(
        cls,
        this_parameter: float,
        other_parameter: float,
        position: Vector | Vector3,
        location: HitLocation | None = None,
    ) -> "HitRecord":
        """Create a record holding exactly one hit."""
        hit = SingleHit(this_parameter, other_parameter, position, location or HitLocation())
        return cls([hit])

    def has_hit(self) -> bool:
        """Check whether the record holds at least one hit."""
        return bool(self.hits)

    def number_of_hits(self) -> int:
        """Number of hits in the record."""
        return len(self.hits)

    def __len__(self) -> int:
        return len(self.hits)

    def __iter__(self) -> Iterator[SingleHit]:
        return iter(self.hits)

    def __getitem__(self, index: int) -> SingleHit:
        if not -len(self.hits) <= index < len(self.hits):
            raise OutOfRangeError("hit", index, len(self.hits))
        return self.hits[index]

    def _first(self, attribute: str) -> SingleHit:
        if not self.hits:
            raise EmptyResultError(attribute)
        return self.hits[0]

    @property
    def this_parameter(self) -> float:
        """Parameter of the first hit along the first curve."""
        return self._first("this_parameter").this_parameter

    @property
    def other_parameter(self) -> float:
        """Parameter of the first hit along the second curve."""
        return self._first("other_parameter").other_parameter

    @property
    def position(self) -> Vector | Vector3:
        """Position of the first hit."""
        return self._first("position").position

    @property
    def location(self) -> HitLocation:
        """Location of the first hit."""
        return self._first("location").location

    def add_intersection(self, data: "SingleHit | HitRecord") -> "HitRecord":
        """Append one hit, or every hit of another record, in call order.

        Args:
            data: A single hit or a record to merge

        Returns:
            This record
        """
        if isinstance(data, HitRecord):
            self.hits.extend(data.hits)
        else:
            self.hits.append(data)
        return self

    def swap(self) -> "HitRecord":
        """Exchange this/other parameters on every hit, in place."""
        self.hits = [hit.swapped() for hit in self.hits]
        return self

    def delete_by_index(self, index: int) -> "HitRecord":
        """Remove one hit; later hits shift down by one."""
        if not 0 <= index < len(self.hits):
            raise OutOfRangeError("hit", index, len(self.hits))
        del self.hits[index]
        return self

    def clear(self) -> "HitRecord":
        """Remove every hit."""
        self.hits.clear()
        return self

    def to_dict(self) -> dict[str, Any]:
        return {"hits": [hit.to_dict() for hit in self.hits]}
