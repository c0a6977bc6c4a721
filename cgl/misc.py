"""Numeric constants, input event codes and small numeric helpers."""

from __future__ import annotations

import math
import os
from enum import IntEnum, IntFlag
from typing import TypeVar, Union

PI = 3.14159265358979323
EPS_D = 0.00000000001
EPS_F = 0.00001
INF_D = math.inf
INF_F = math.inf

_T = TypeVar("_T")


class MouseButton(IntEnum):
    """Mouse buttons reported by mouse events."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Key(IntEnum):
    """Codes of the special keyboard keys."""

    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    PRINT_SCREEN = 283


class EventType(IntEnum):
    """Kinds of key and button events."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Modifier(IntFlag):
    """Modifier keys held during an event."""

    SHIFT = 0x0001
    CTRL = 0x0002
    ALT = 0x0004
    SUPER = 0x0008


def radians(deg: float) -> float:
    """Convert an angle from degrees to radians."""
    return deg * (PI / 180)


def degrees(rad: float) -> float:
    """Convert an angle from radians to degrees."""
    return rad * (180 / PI)


def clamp(x: _T, lo: _T, hi: _T) -> _T:
    """Clamp ``x`` into the closed range ``[lo, hi]``."""
    return min(max(x, lo), hi)


def resolve_path(filename: Union[str, "os.PathLike[str]"]) -> str:
    """Return the absolute path of ``filename``.

    On POSIX systems symbolic links are resolved and the file must exist;
    a missing file raises ``FileNotFoundError``.
    """
    name = os.fspath(filename)
    if os.name == "nt":
        return os.path.abspath(name)
    return os.path.realpath(name, strict=True)