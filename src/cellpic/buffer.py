from dataclasses import dataclass

from cellpic.geometry import Rect
from cellpic.style import Color, NamedColor, Style


@dataclass
class Cell:
    symbol: str = " "
    fg: Color = NamedColor.RESET
    bg: Color = NamedColor.RESET

    def set_symbol(self, symbol: str) -> "Cell":
        self.symbol = symbol
        return self

    def set_fg(self, colour: Color) -> "Cell":
        self.fg = colour
        return self

    def set_bg(self, colour: Color) -> "Cell":
        self.bg = colour
        return self

    def set_style(self, style: Style) -> "Cell":
        if style.fg is not None:
            self.fg = style.fg
        if style.bg is not None:
            self.bg = style.bg
        return self


class CellBuffer:
    """A mutable grid of cells covering ``area``, addressed in absolute cell coordinates."""

    def __init__(self, area: Rect):
        self.area = area
        self.cells = [Cell() for _ in range(area.area)]

    @classmethod
    def empty(cls, width: int, height: int) -> "CellBuffer":
        return cls(Rect(0, 0, width, height))

    def index_of(self, x: int, y: int) -> int:
        area = self.area
        if not (area.left <= x < area.right and area.top <= y < area.bottom):
            raise IndexError(f"Cell ({x}, {y}) outside buffer area {area}")
        return (y - area.top) * area.width + (x - area.left)

    def get(self, x: int, y: int) -> Cell:
        return self.cells[self.index_of(x, y)]

    def set_string(self, x: int, y: int, text: str, style: Style | None = None) -> None:
        """Write ``text`` starting at (x, y), clipped to the buffer's right edge."""
        for i, char in enumerate(text[: max(0, self.area.right - x)]):
            cell = self.get(x + i, y).set_symbol(char)
            if style is not None:
                cell.set_style(style)

    def set_style(self, rect: Rect, style: Style) -> None:
        rect = rect.intersection(self.area)
        for y in range(rect.top, rect.bottom):
            for x in range(rect.left, rect.right):
                self.get(x, y).set_style(style)

    def rows(self) -> list[list[Cell]]:
        w = self.area.width
        return [self.cells[i * w : (i + 1) * w] for i in range(self.area.height)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellBuffer):
            return NotImplemented
        return self.area == other.area and self.cells == other.cells

    def __repr__(self) -> str:
        lines = ["".join(cell.symbol for cell in row) for row in self.rows()]
        return f"CellBuffer({self.area!r}, {lines!r})"
