"""3x3 matrices stored as three column vectors."""

from __future__ import annotations

import math
import numbers
from typing import Iterable, List, Sequence, Tuple

_N = 3
_Vec3 = Tuple[float, float, float]


def _xyz(v) -> _Vec3:
    """Return the three components of a vector-like object."""
    if all(hasattr(v, name) for name in ("x", "y", "z")):
        return (float(v.x), float(v.y), float(v.z))
    values = tuple(float(c) for c in v)
    if len(values) != _N:
        raise ValueError(f"expected 3 components, got {len(values)}")
    return values  # type: ignore[return-value]


def _fmt(value: float) -> str:
    return f"{value:g}"


class Matrix3x3:
    """A 3x3 matrix of floats, indexed as ``A[i, j]`` (row, column).

    ``A[j]`` and ``A.column(j)`` give the j-th column as a tuple.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *args) -> None:
        """Build the identity (no arguments), or a matrix from nine values
        in row-major order, given either as one sequence or as nine numbers."""
        if not args:
            self._cols: List[List[float]] = [
                [1.0 if i == j else 0.0 for i in range(_N)] for j in range(_N)
            ]
            return
        if len(args) == 1:
            data = [float(v) for v in args[0]]
        elif len(args) == _N * _N:
            data = [float(v) for v in args]
        else:
            raise TypeError(
                f"Matrix3x3 takes 0, 1 or 9 arguments, got {len(args)}"
            )
        if len(data) != _N * _N:
            raise ValueError(f"expected 9 values, got {len(data)}")
        self._cols = [[data[i * _N + j] for i in range(_N)] for j in range(_N)]

    @classmethod
    def _from_columns(cls, columns: Iterable[Sequence[float]]) -> "Matrix3x3":
        matrix = cls()
        matrix._cols = [[float(v) for v in col] for col in columns]
        return matrix

    @classmethod
    def identity(cls) -> "Matrix3x3":
        """The 3x3 identity matrix."""
        return cls()

    @classmethod
    def cross_product(cls, u) -> "Matrix3x3":
        """Matrix representing the left cross product with ``u``."""
        x, y, z = _xyz(u)
        return cls(
            0.0, -z, y,
            z, 0.0, -x,
            -y, x, 0.0,
        )

    def zero(self, val: float = 0.0) -> None:
        """Set every element to ``val``."""
        self._cols = [[float(val)] * _N for _ in range(_N)]

    def det(self) -> float:
        """Determinant."""
        a = self
        return (
            -a[0, 2] * a[1, 1] * a[2, 0] + a[0, 1] * a[1, 2] * a[2, 0]
            + a[0, 2] * a[1, 0] * a[2, 1] - a[0, 0] * a[1, 2] * a[2, 1]
            - a[0, 1] * a[1, 0] * a[2, 2] + a[0, 0] * a[1, 1] * a[2, 2]
        )

    def norm(self) -> float:
        """Frobenius norm."""
        return math.sqrt(sum(v * v for col in self._cols for v in col))

    def column(self, i: int) -> _Vec3:
        """The i-th column."""
        return tuple(self._cols[i])  # type: ignore[return-value]

    def transpose(self) -> "Matrix3x3":
        """Transposed copy."""
        return Matrix3x3._from_columns(zip(*self._cols))

    def inv(self) -> "Matrix3x3":
        """Inverse; a singular matrix raises ``ZeroDivisionError``."""
        a = self
        b = Matrix3x3(
            -a[1, 2] * a[2, 1] + a[1, 1] * a[2, 2],
            a[0, 2] * a[2, 1] - a[0, 1] * a[2, 2],
            -a[0, 2] * a[1, 1] + a[0, 1] * a[1, 2],
            a[1, 2] * a[2, 0] - a[1, 0] * a[2, 2],
            -a[0, 2] * a[2, 0] + a[0, 0] * a[2, 2],
            a[0, 2] * a[1, 0] - a[0, 0] * a[1, 2],
            -a[1, 1] * a[2, 0] + a[1, 0] * a[2, 1],
            a[0, 1] * a[2, 0] - a[0, 0] * a[2, 1],
            -a[0, 1] * a[1, 0] + a[0, 0] * a[1, 1],
        )
        return b / self.det()

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = key
            return self._cols[j][i]
        return self.column(key)

    def __setitem__(self, key, value) -> None:
        if isinstance(key, tuple):
            i, j = key
            self._cols[j][i] = float(value)
        else:
            self._cols[key] = list(_xyz(value))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return self._cols == other._cols

    def __repr__(self) -> str:
        rows = ", ".join(repr(tuple(row)) for row in zip(*self._cols))
        return f"Matrix3x3({rows})"

    def __neg__(self) -> "Matrix3x3":
        return Matrix3x3._from_columns([-v for v in col] for col in self._cols)

    def __add__(self, other: "Matrix3x3") -> "Matrix3x3":
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return Matrix3x3._from_columns(
            [a + b for a, b in zip(ca, cb)] for ca, cb in zip(self._cols, other._cols)
        )

    def __sub__(self, other: "Matrix3x3") -> "Matrix3x3":
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return Matrix3x3._from_columns(
            [a - b for a, b in zip(ca, cb)] for ca, cb in zip(self._cols, other._cols)
        )

    def _apply(self, vec: _Vec3) -> _Vec3:
        return tuple(  # type: ignore[return-value]
            sum(vec[k] * self._cols[k][i] for k in range(_N)) for i in range(_N)
        )

    def __mul__(self, other):
        """Scalar, matrix or vector product.

        A vector with ``x``, ``y`` and ``z`` attributes is returned as the
        same type; any other 3-sequence gives a tuple.
        """
        if isinstance(other, Matrix3x3):
            return Matrix3x3._from_columns(self._apply(tuple(col)) for col in other._cols)
        if isinstance(other, numbers.Real):
            return Matrix3x3._from_columns([v * other for v in col] for col in self._cols)
        try:
            vec = _xyz(other)
        except (TypeError, ValueError):
            return NotImplemented
        result = self._apply(vec)
        if all(hasattr(other, name) for name in ("x", "y", "z")):
            return type(other)(*result)
        return result

    def __rmul__(self, c):
        if not isinstance(c, numbers.Real):
            return NotImplemented
        return self * c

    def __truediv__(self, x: float) -> "Matrix3x3":
        if not isinstance(x, numbers.Real):
            return NotImplemented
        rx = 1.0 / x
        return self * rx

    def __str__(self) -> str:
        return "".join(
            "[ " + "".join(f"{_fmt(v)} " for v in row) + "]\n"
            for row in zip(*self._cols)
        )


def outer(u, v) -> Matrix3x3:
    """Outer product ``u v^T``."""
    uu = _xyz(u)
    vv = _xyz(v)
    return Matrix3x3._from_columns([ui * vj for ui in uu] for vj in vv)