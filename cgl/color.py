"""RGB colours with channel values in [0, 1]."""

from __future__ import annotations

import numbers
import re
from dataclasses import dataclass
from typing import ClassVar, Sequence

_HEX_PREFIX = re.compile(r"\s*(?:0[xX])?([0-9a-fA-F]+)")
_UINT_MAX = 0xFFFFFFFF


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class Color:
    """A colour given by additive red, green and blue channel values."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    WHITE: ClassVar["Color"]
    BLACK: ClassVar["Color"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", float(self.r))
        object.__setattr__(self, "g", float(self.g))
        object.__setattr__(self, "b", float(self.b))

    @classmethod
    def from_bytes(cls, arr: Sequence[int]) -> "Color":
        """Build a colour from three 8-bit channel values."""
        inv = 1.0 / 255.0
        return cls(arr[0] * inv, arr[1] * inv, arr[2] * inv)

    @classmethod
    def from_hex(cls, s: str) -> "Color":
        """Build a colour from a hexadecimal ``rrggbb`` string.

        A leading ``#`` is ignored, parsing stops at the first character
        that is not a hex digit, and values beyond 32 bits saturate.
        """
        if s.startswith("#"):
            s = s[1:]
        match = _HEX_PREFIX.match(s)
        if match is None:
            raise ValueError(f"not a hexadecimal colour: {s!r}")
        rgb = min(int(match.group(1), 16), _UINT_MAX)
        return cls(
            ((rgb & 0xFF0000) >> 16) / 255.0,
            ((rgb & 0x00FF00) >> 8) / 255.0,
            (rgb & 0x0000FF) / 255.0,
        )

    def to_hex(self) -> str:
        """Return the channels as clamped 8-bit values in unpadded hex."""
        return "".join(
            f"{int(max(0.0, min(255.0, 255.0 * channel))):x}"
            for channel in (self.r, self.g, self.b)
        )

    def __getitem__(self, k: int) -> float:
        return (self.r, self.g, self.b)[k]

    def __add__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other):
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, numbers.Real):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, s):
        if isinstance(s, numbers.Real):
            return self * s
        return NotImplemented

    def __str__(self) -> str:
        return f"(r={_fmt(self.r)} g={_fmt(self.g)} b={_fmt(self.b)})"


Color.WHITE = Color(1, 1, 1)
Color.BLACK = Color(0, 0, 0)