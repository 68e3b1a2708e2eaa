from dataclasses import dataclass, field
from enum import Enum, Flag

from cellpic.buffer import CellBuffer
from cellpic.charsets import DOUBLE_BORDER, PLAIN_BORDER, ROUNDED_BORDER, THICK_BORDER
from cellpic.geometry import Rect
from cellpic.style import Style


class Borders(Flag):
    NONE = 0
    TOP = 1
    RIGHT = 2
    BOTTOM = 4
    LEFT = 8
    ALL = 15


class BorderType(Enum):
    PLAIN = PLAIN_BORDER
    ROUNDED = ROUNDED_BORDER
    DOUBLE = DOUBLE_BORDER
    THICK = THICK_BORDER


@dataclass(frozen=True)
class Block:
    """A frame drawn around a widget, with an optional title on the top edge."""

    borders: Borders = Borders.ALL
    border_type: BorderType = BorderType.PLAIN
    title: str | None = None
    style: Style = field(default_factory=Style)
    border_style: Style = field(default_factory=Style)

    def inner(self, area: Rect) -> Rect:
        b = self.borders
        return area.shrink(
            left=1 if Borders.LEFT in b else 0,
            top=1 if Borders.TOP in b or self.title else 0,
            right=1 if Borders.RIGHT in b else 0,
            bottom=1 if Borders.BOTTOM in b else 0,
        )

    def render(self, area: Rect, buf: CellBuffer) -> None:
        area = area.intersection(buf.area)
        if area.is_empty():
            return
        buf.set_style(area, self.style)

        horizontal, vertical, top_left, top_right, bottom_left, bottom_right = self.border_type.value
        b = self.borders
        style = self.style.patch(self.border_style)
        last_x = area.right - 1
        last_y = area.bottom - 1

        if Borders.LEFT in b:
            for y in range(area.top, area.bottom):
                buf.get(area.left, y).set_symbol(vertical).set_style(style)
        if Borders.RIGHT in b:
            for y in range(area.top, area.bottom):
                buf.get(last_x, y).set_symbol(vertical).set_style(style)
        if Borders.TOP in b:
            for x in range(area.left, area.right):
                buf.get(x, area.top).set_symbol(horizontal).set_style(style)
        if Borders.BOTTOM in b:
            for x in range(area.left, area.right):
                buf.get(x, last_y).set_symbol(horizontal).set_style(style)

        # Corners
        if (Borders.TOP | Borders.LEFT) in b:
            buf.get(area.left, area.top).set_symbol(top_left)
        if (Borders.TOP | Borders.RIGHT) in b:
            buf.get(last_x, area.top).set_symbol(top_right)
        if (Borders.BOTTOM | Borders.LEFT) in b:
            buf.get(area.left, last_y).set_symbol(bottom_left)
        if (Borders.BOTTOM | Borders.RIGHT) in b:
            buf.get(last_x, last_y).set_symbol(bottom_right)

        if self.title:
            left = area.left + (1 if Borders.LEFT in b else 0)
            right = last_x if Borders.RIGHT in b else area.right
            if right > left:
                buf.set_string(left, area.top, self.title[: right - left], self.style)
