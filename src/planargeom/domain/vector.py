"""Coordinate vector types used by the geometry kernel.

This module defines the minimal vector algebra the kernel consumes:
- Vector: A 2D coordinate with arithmetic and dot product
- Vector3: The 3D counterpart, used only by 3D segments
"""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class Vector:
    """A point or displacement in the plane.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X component
        y: Y component
    """

    x: float
    y: float

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def __mul__(self, scalar: float) -> "Vector":
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector":
        return Vector(self.x / scalar, self.y / scalar)

    def dot(self, other: "Vector | None" = None) -> float:
        """Dot product with another vector.

        Args:
            other: Second operand; the vector itself when omitted

        Returns:
            The dot product, or the squared norm when called without argument
        """
        if other is None:
            other = self
        return self.x * other.x + self.y * other.y

    def norm(self, sqrt: Callable[[float], float] = math.sqrt) -> float:
        """Euclidean length, using the given square root routine."""
        return sqrt(self.dot())

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Vector":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Vector instance
        """
        return cls(x=data["x"], y=data["y"])

    @classmethod
    def coerce(cls, value: "VectorLike") -> "Vector":
        """Build a vector from a Vector or an (x, y) pair.

        Raises:
            ValueError: If value is a sequence without exactly two components
        """
        if isinstance(value, Vector):
            return value
        if len(value) != 2:
            raise ValueError(f"Expected 2 components for a planar vector, got {len(value)}")
        return cls(float(value[0]), float(value[1]))


VectorLike = Union[Vector, Sequence[float]]


@dataclass(frozen=True, slots=True)
class Vector3:
    """A point or displacement in space."""

    x: float
    y: float
    z: float

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def dot(self, other: "Vector3 | None" = None) -> float:
        """Dot product; the squared norm when called without argument."""
        if other is None:
            other = self
        return self.x * other.x + self.y * other.y + self.z * other.z

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @classmethod
    def coerce(cls, value: "Vector3 | Sequence[float]") -> "Vector3":
        """Build a vector from a Vector3 or an (x, y, z) triple."""
        if isinstance(value, Vector3):
            return value
        if len(value) != 3:
            raise ValueError(f"Expected 3 components for a spatial vector, got {len(value)}")
        return cls(float(value[0]), float(value[1]), float(value[2]))
