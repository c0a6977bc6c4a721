"""4x4 matrices stored as four column vectors."""

from __future__ import annotations

import math
import numbers
from typing import Iterable, List, Sequence

from cgl.vector4d import Vector4D

_N = 4


def _fmt(value: float) -> str:
    return f"{value:g}"


def _det3(m: Sequence[Sequence[float]]) -> float:
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


def _minor(rows: Sequence[Sequence[float]], i: int, j: int) -> List[List[float]]:
    return [
        [v for c, v in enumerate(row) if c != j]
        for r, row in enumerate(rows)
        if r != i
    ]


class Matrix4x4:
    """A 4x4 matrix of floats, indexed as ``A[i, j]`` (row, column).

    ``A[j]`` and ``A.column(j)`` give the j-th column as a ``Vector4D``.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *args) -> None:
        """Build a zero matrix (no arguments), or a matrix from sixteen values
        in row-major order, given either as one sequence or as sixteen numbers."""
        if not args:
            self._cols: List[List[float]] = [[0.0] * _N for _ in range(_N)]
            return
        if len(args) == 1:
            data = [float(v) for v in args[0]]
        elif len(args) == _N * _N:
            data = [float(v) for v in args]
        else:
            raise TypeError(
                f"Matrix4x4 takes 0, 1 or 16 arguments, got {len(args)}"
            )
        if len(data) != _N * _N:
            raise ValueError(f"expected 16 values, got {len(data)}")
        self._cols = [[data[i * _N + j] for i in range(_N)] for j in range(_N)]

    @classmethod
    def _from_columns(cls, columns: Iterable[Sequence[float]]) -> "Matrix4x4":
        matrix = cls()
        matrix._cols = [[float(v) for v in col] for col in columns]
        return matrix

    def _rows(self) -> List[List[float]]:
        return [list(row) for row in zip(*self._cols)]

    @classmethod
    def identity(cls) -> "Matrix4x4":
        """A fresh 4x4 identity matrix."""
        return cls._from_columns(
            [1.0 if i == j else 0.0 for i in range(_N)] for j in range(_N)
        )

    def zero(self, val: float = 0.0) -> None:
        """Set every element to ``val``."""
        self._cols = [[float(val)] * _N for _ in range(_N)]

    def det(self) -> float:
        """Determinant."""
        rows = self._rows()
        return sum(
            (-1) ** j * rows[0][j] * _det3(_minor(rows, 0, j)) for j in range(_N)
        )

    def norm(self) -> float:
        """Frobenius norm."""
        return math.sqrt(sum(v * v for col in self._cols for v in col))

    def column(self, i: int) -> Vector4D:
        """The i-th column."""
        return Vector4D(*self._cols[i])

    def transpose(self) -> "Matrix4x4":
        """Transposed copy."""
        return Matrix4x4._from_columns(zip(*self._cols))

    def inv(self) -> "Matrix4x4":
        """Inverse; a singular matrix raises ``ZeroDivisionError``."""
        rows = self._rows()
        adjugate = Matrix4x4(
            [
                (-1) ** (i + j) * _det3(_minor(rows, j, i))
                for i in range(_N)
                for j in range(_N)
            ]
        )
        return adjugate / self.det()

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
            values = [float(value[k]) for k in range(_N)]
            self._cols[key] = values

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self._cols == other._cols

    def __repr__(self) -> str:
        rows = ", ".join(repr(tuple(row)) for row in zip(*self._cols))
        return f"Matrix4x4({rows})"

    def __neg__(self) -> "Matrix4x4":
        return Matrix4x4._from_columns([-v for v in col] for col in self._cols)

    def __add__(self, other: "Matrix4x4") -> "Matrix4x4":
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4._from_columns(
            [a + b for a, b in zip(ca, cb)] for ca, cb in zip(self._cols, other._cols)
        )

    def __sub__(self, other: "Matrix4x4") -> "Matrix4x4":
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4._from_columns(
            [a - b for a, b in zip(ca, cb)] for ca, cb in zip(self._cols, other._cols)
        )

    def __mul__(self, other):
        """Scalar, matrix or ``Vector4D`` product."""
        if isinstance(other, Matrix4x4):
            rows = self._rows()
            return Matrix4x4(
                [
                    sum(rows[i][k] * other._cols[j][k] for k in range(_N))
                    for i in range(_N)
                    for j in range(_N)
                ]
            )
        if isinstance(other, numbers.Real):
            return Matrix4x4._from_columns([other * v for v in col] for col in self._cols)
        if isinstance(other, Vector4D):
            return Vector4D(
                *(
                    sum(other[k] * self._cols[k][i] for k in range(_N))
                    for i in range(_N)
                )
            )
        return NotImplemented

    def __rmul__(self, c):
        if not isinstance(c, numbers.Real):
            return NotImplemented
        return self * c

    def __truediv__(self, x: float) -> "Matrix4x4":
        if not isinstance(x, numbers.Real):
            return NotImplemented
        rx = 1.0 / x
        return self * rx

    def __str__(self) -> str:
        return "".join(
            "[ " + "".join(f"{_fmt(v)} " for v in row) + "]\n"
            for row in zip(*self._cols)
        )


def outer(u: Vector4D, v: Vector4D) -> Matrix4x4:
    """Outer product ``u v^T``."""
    return Matrix4x4([u[i] * v[j] for i in range(_N) for j in range(_N)])