"""Book-keeping for lines of on-screen text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator

from cgl.color import Color


@dataclass
class OSDLine:
    """One line of on-screen text anchored at its bottom-left corner."""

    id: int
    x: float
    y: float
    text: str = ""
    size: int = 16
    color: Color = field(default_factory=lambda: Color.WHITE)


class OSDText:
    """A collection of text lines in GL screen space.

    Horizontal and vertical coordinates both run over [-1, 1], left to right
    and bottom to top. Operations on an unknown line id have no effect.
    """

    def __init__(self, use_hdpi: bool = False) -> None:
        self.use_hdpi = use_hdpi
        self.sx = 0.0
        self.sy = 0.0
        self._lines: Dict[int, OSDLine] = {}
        self._next_id = 0

    def add_line(
        self,
        x: float,
        y: float,
        text: str = "",
        size: int = 16,
        color: Color = Color.WHITE,
    ) -> int:
        """Add a line and return its id; sizes are doubled on HDPI displays."""
        if self.use_hdpi:
            size *= 2
        line_id = self._next_id
        self._next_id += 1
        self._lines[line_id] = OSDLine(line_id, x, y, text, size, color)
        return line_id

    def del_line(self, line_id: int) -> None:
        """Remove a line."""
        self._lines.pop(line_id, None)

    def set_anchor(self, line_id: int, x: float, y: float) -> None:
        """Move a line's anchor."""
        line = self._lines.get(line_id)
        if line is not None:
            line.x = x
            line.y = y

    def set_text(self, line_id: int, text: str) -> None:
        """Replace a line's text."""
        line = self._lines.get(line_id)
        if line is not None:
            line.text = text

    def set_size(self, line_id: int, size: int) -> None:
        """Change a line's font size."""
        line = self._lines.get(line_id)
        if line is not None:
            line.size = size

    def set_color(self, line_id: int, color: Color) -> None:
        """Change a line's colour."""
        line = self._lines.get(line_id)
        if line is not None:
            line.color = color

    def clear(self) -> None:
        """Remove every line."""
        self._lines.clear()

    def resize(self, w: int, h: int) -> None:
        """Update the pixel-to-screen scale factors for a ``w`` by ``h`` context."""
        self.sx = 2.0 / w
        self.sy = 2.0 / h

    def line(self, line_id: int) -> OSDLine:
        """The line with the given id; an unknown id raises ``KeyError``."""
        return self._lines[line_id]

    def __iter__(self) -> Iterator[OSDLine]:
        return iter(list(self._lines.values()))

    def __len__(self) -> int:
        return len(self._lines)