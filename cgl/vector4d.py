"""Four-dimensional vectors."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

_FIELDS = ("x", "y", "z", "w")


def _reciprocal(value: float) -> float:
    if value == 0:
        return math.copysign(math.inf, value)
    return 1.0 / value


@dataclass
class Vector4D:
    """A 4D vector with components ``x``, ``y``, ``z`` and ``w``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def filled(cls, c: float) -> "Vector4D":
        """Vector with every component equal to ``c``."""
        return cls(c, c, c, c)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z, self.w)[index]

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, _FIELDS[index], value)

    def __neg__(self) -> "Vector4D":
        return Vector4D(-self.x, -self.y, -self.z, -self.w)

    def __add__(self, other: "Vector4D") -> "Vector4D":
        if not isinstance(other, Vector4D):
            return NotImplemented
        return Vector4D(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __sub__(self, other: "Vector4D") -> "Vector4D":
        if not isinstance(other, Vector4D):
            return NotImplemented
        return Vector4D(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def __mul__(self, c: float) -> "Vector4D":
        if not isinstance(c, numbers.Real):
            return NotImplemented
        return Vector4D(self.x * c, self.y * c, self.z * c, self.w * c)

    def __rmul__(self, c: float) -> "Vector4D":
        if not isinstance(c, numbers.Real):
            return NotImplemented
        return Vector4D(c * self.x, c * self.y, c * self.z, c * self.w)

    def __truediv__(self, c: float) -> "Vector4D":
        if not isinstance(c, numbers.Real):
            return NotImplemented
        rc = 1.0 / c
        return Vector4D(rc * self.x, rc * self.y, rc * self.z, rc * self.w)

    def rcp(self) -> "Vector4D":
        """Per-component reciprocal; zero components become signed infinity."""
        return Vector4D(*(_reciprocal(v) for v in (self.x, self.y, self.z, self.w)))

    def norm(self) -> float:
        """Euclidean length in four dimensions."""
        return math.sqrt(self.norm2())

    def norm2(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def unit(self) -> "Vector4D":
        """Scale x, y and z by the reciprocal 4D length; w is set to zero."""
        r_norm = 1.0 / math.sqrt(self.norm2())
        return Vector4D(r_norm * self.x, r_norm * self.y, r_norm * self.z)

    def normalize(self) -> None:
        """Divide every component by the length, in place."""
        scaled = self / self.norm()
        self.x, self.y, self.z, self.w = scaled.x, scaled.y, scaled.z, scaled.w


def dot(u: Vector4D, v: Vector4D) -> float:
    """Inner product."""
    return u.x * v.x + u.y * v.y + u.z * v.z + u.w * v.w