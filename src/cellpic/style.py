import re
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class NamedColor(Enum):
    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    LIGHT_RED = "light_red"
    LIGHT_GREEN = "light_green"
    LIGHT_YELLOW = "light_yellow"
    LIGHT_BLUE = "light_blue"
    LIGHT_MAGENTA = "light_magenta"
    LIGHT_CYAN = "light_cyan"
    WHITE = "white"


class Rgb(NamedTuple):
    r: int
    g: int
    b: int


Color = NamedColor | Rgb

_HEX_COLOUR = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


@dataclass(frozen=True)
class Style:
    """Foreground/background colours applied to cells. ``None`` leaves a colour as it is."""

    fg: Color | None = None
    bg: Color | None = None

    def patch(self, other: "Style") -> "Style":
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
        )


def parse_color(value: str) -> Color:
    """Parse a colour name (``"light_red"``, ``"dark-gray"``) or a hex triplet (``"#ff8800"``)."""
    text = value.strip()
    match = _HEX_COLOUR.fullmatch(text)
    if match:
        return Rgb(*(int(part, 16) for part in match.groups()))
    try:
        return NamedColor(text.lower().replace("-", "_"))
    except ValueError:
        raise ValueError(f"Unknown colour: {value!r}") from None


def backdrop_rgb(colour: Color | None) -> tuple[float, float, float]:
    """Normalized (0-1) RGB of a background colour used as the compositing backdrop.

    Only black, white and explicit RGB colours are resolved; everything else
    composites against black.
    """
    if isinstance(colour, Rgb):
        return (colour.r / 255.0, colour.g / 255.0, colour.b / 255.0)
    if colour is NamedColor.WHITE:
        return (1.0, 1.0, 1.0)
    return (0.0, 0.0, 0.0)
