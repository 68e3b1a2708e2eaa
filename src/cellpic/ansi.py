from cellpic.buffer import CellBuffer
from cellpic.style import Color, NamedColor, Rgb

RESET = "\033[0m"

# Foreground SGR codes; background codes are these plus 10
_NAMED_SGR = {
    NamedColor.RESET: 39,
    NamedColor.BLACK: 30,
    NamedColor.RED: 31,
    NamedColor.GREEN: 32,
    NamedColor.YELLOW: 33,
    NamedColor.BLUE: 34,
    NamedColor.MAGENTA: 35,
    NamedColor.CYAN: 36,
    NamedColor.GRAY: 37,
    NamedColor.DARK_GRAY: 90,
    NamedColor.LIGHT_RED: 91,
    NamedColor.LIGHT_GREEN: 92,
    NamedColor.LIGHT_YELLOW: 93,
    NamedColor.LIGHT_BLUE: 94,
    NamedColor.LIGHT_MAGENTA: 95,
    NamedColor.LIGHT_CYAN: 96,
    NamedColor.WHITE: 97,
}


def sgr(colour: Color, background: bool = False) -> str:
    """Escape sequence selecting ``colour`` as the foreground (or background)."""
    if isinstance(colour, Rgb):
        return f"\033[{48 if background else 38};2;{colour.r};{colour.g};{colour.b}m"
    return f"\033[{_NAMED_SGR[colour] + (10 if background else 0)}m"


def buffer_to_ansi(buf: CellBuffer) -> str:
    """Render every cell of ``buf`` with colour escapes, one line per row."""
    out = []
    for row in buf.rows():
        parts = [f"{sgr(cell.fg)}{sgr(cell.bg, background=True)}{cell.symbol}" for cell in row]
        parts.append(RESET)
        out.append("".join(parts))
    return "\n".join(out)
