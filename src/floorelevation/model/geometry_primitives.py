"""
Geometric Primitives for boundary sampling and point ordering.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt

@dataclass(frozen=True)
class Vector:
    """
    A vector in 3D space representing direction and magnitude.
    """
    x: float
    y: float
    z: float = 0.0

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Vector:
        mag = self.magnitude
        if mag == 0.0: return Vector(0.0, 0.0, 0.0)
        return self / mag

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )


@dataclass(frozen=True)
class Point3D:
    """
    An immutable point sampled from a slab boundary.

    Dataclass equality is exact. Two samples describe the same corner when
    `is_almost_equal_to` holds for the working tolerance.
    """
    x: float
    y: float
    z: float = 0.0

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Point3D:
        """Build a point from an `[x, y, z]` sequence."""
        if len(values) != 3:
            raise ValueError(f"Expected 3 coordinates, got {len(values)}.")
        x, y, z = values
        return cls(float(x), float(y), float(z))

    def __sub__(self, other: Point3D) -> Vector:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point3D):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        raise TypeError("Can only subtract a Point3D from a Point3D.")

    def distance_to(self, other: Point3D) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2)

    def is_almost_equal_to(self, other: Point3D, tolerance: float) -> bool:
        return self.distance_to(other) <= tolerance

    def projected(self) -> Point3D:
        """Projection onto the horizontal plane (z dropped)."""
        return Point3D(self.x, self.y, 0.0)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])

    def to_list(self) -> list[float]:
        return [self.x, self.y, self.z]


def points_to_array(points: Sequence[Point3D]) -> npt.NDArray[np.float64]:
    """Stack points into an (N, 3) array. Empty input gives shape (0, 3)."""
    if not points:
        return np.empty((0, 3), dtype=np.float64)
    return np.array([p.to_array() for p in points], dtype=np.float64)
