import pytest

from cellpic.buffer import Cell, CellBuffer
from cellpic.geometry import Rect
from cellpic.style import NamedColor, Rgb, Style


def test_new_buffer_is_blank():
    buf = CellBuffer.empty(3, 2)
    assert len(buf.cells) == 6
    assert all(cell == Cell(" ", NamedColor.RESET, NamedColor.RESET) for cell in buf.cells)


def test_cell_setters_chain():
    cell = Cell().set_symbol("x").set_fg(Rgb(1, 2, 3)).set_bg(NamedColor.RED)
    assert cell == Cell("x", Rgb(1, 2, 3), NamedColor.RED)


def test_get_uses_absolute_coordinates():
    buf = CellBuffer(Rect(10, 5, 2, 2))
    buf.get(11, 6).set_symbol("x")
    assert buf.cells[3].symbol == "x"


def test_get_outside_area_raises():
    buf = CellBuffer(Rect(10, 5, 2, 2))
    with pytest.raises(IndexError):
        buf.get(0, 0)


def test_set_style_clipped_to_buffer():
    buf = CellBuffer.empty(3, 1)
    buf.set_style(Rect(2, 0, 5, 5), Style(bg=NamedColor.GREEN))
    assert [cell.bg for cell in buf.cells] == [NamedColor.RESET, NamedColor.RESET, NamedColor.GREEN]


def test_set_string_clipped_to_right_edge():
    buf = CellBuffer.empty(4, 1)
    buf.set_string(2, 0, "hello")
    assert "".join(cell.symbol for cell in buf.cells) == "  he"
