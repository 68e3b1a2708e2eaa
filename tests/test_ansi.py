from cellpic.ansi import RESET, buffer_to_ansi, sgr
from cellpic.buffer import CellBuffer
from cellpic.style import NamedColor, Rgb


def test_sgr_truecolour():
    assert sgr(Rgb(1, 2, 3)) == "\033[38;2;1;2;3m"
    assert sgr(Rgb(1, 2, 3), background=True) == "\033[48;2;1;2;3m"


def test_sgr_named():
    assert sgr(NamedColor.RED) == "\033[31m"
    assert sgr(NamedColor.RED, background=True) == "\033[41m"
    assert sgr(NamedColor.LIGHT_BLUE, background=True) == "\033[104m"
    assert sgr(NamedColor.RESET) == "\033[39m"


def test_buffer_to_ansi_one_line_per_row():
    buf = CellBuffer.empty(2, 3)
    lines = buffer_to_ansi(buf).split("\n")
    assert len(lines) == 3
    assert all(line.endswith(RESET) for line in lines)
    assert lines[0] == "\033[39m\033[49m \033[39m\033[49m \033[0m"


def test_buffer_to_ansi_cell_colours():
    buf = CellBuffer.empty(1, 1)
    buf.get(0, 0).set_symbol("▀").set_fg(Rgb(255, 0, 0)).set_bg(Rgb(0, 0, 255))
    assert buffer_to_ansi(buf) == "\033[38;2;255;0;0m\033[48;2;0;0;255m▀\033[0m"
