"""
Vector value type used by the field models.

Vectors are immutable: every operation returns a new instance, so a light
snapshot handed to a model can never be mutated through a shared scratch
object.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np


@dataclass(frozen=True)
class Vector3:
    """3D vector for positions, directions and displacements (y is up)."""
    x: float
    y: float
    z: float

    def __add__(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'Vector3') -> 'Vector3':
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> 'Vector3':
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> 'Vector3':
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> 'Vector3':
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> 'Vector3':
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: 'Vector3') -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def length_squared(self) -> float:
        return self.x**2 + self.y**2 + self.z**2

    def distance_to(self, other: 'Vector3') -> float:
        return (other - self).length()

    def normalize(self, fallback: 'Vector3 | None' = None) -> 'Vector3':
        """Return unit vector; degenerate input yields `fallback` (zero vector by default)."""
        L = self.length()
        if L < 1e-10:
            return fallback if fallback is not None else Vector3(0.0, 0.0, 0.0)
        return self / L

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    @staticmethod
    def from_iterable(values: Iterable[float]) -> 'Vector3':
        vals = [float(v) for v in values]
        if len(vals) != 3:
            raise ValueError(f"Expected 3 components, got {len(vals)}")
        return Vector3(vals[0], vals[1], vals[2])

    @staticmethod
    def down() -> 'Vector3':
        return Vector3(0.0, -1.0, 0.0)
