"""Two-dimensional vectors."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass


@dataclass
class Vector2D:
    """A 2D vector with components ``x`` and ``y``."""

    x: float = 0.0
    y: float = 0.0

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y)[index]

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def __add__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, r: float) -> "Vector2D":
        if not isinstance(r, numbers.Real):
            return NotImplemented
        return Vector2D(self.x * r, self.y * r)

    def __rmul__(self, r: float) -> "Vector2D":
        return self.__mul__(r)

    def __truediv__(self, r: float) -> "Vector2D":
        if not isinstance(r, numbers.Real):
            return NotImplemented
        return Vector2D(self.x / r, self.y / r)

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.norm2())

    def norm2(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def unit(self) -> "Vector2D":
        """Unit vector parallel to this one."""
        return self / self.norm()


def dot(v1: Vector2D, v2: Vector2D) -> float:
    """Inner product."""
    return v1.x * v2.x + v1.y * v2.y


def cross(v1: Vector2D, v2: Vector2D) -> float:
    """Scalar cross product (z component of the 3D cross product)."""
    return v1.x * v2.y - v1.y * v2.x