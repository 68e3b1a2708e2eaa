from dataclasses import dataclass
from enum import Enum


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class Rect:
    """A rectangle in cell coordinates."""

    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width < 1 or self.height < 1

    def shrink(self, left: int = 0, top: int = 0, right: int = 0, bottom: int = 0) -> "Rect":
        """Return the rectangle inset by the given margins, never below zero size."""
        width = max(0, self.width - left - right)
        height = max(0, self.height - top - bottom)
        return Rect(self.x + min(left, self.width), self.y + min(top, self.height), width, height)

    def intersection(self, other: "Rect") -> "Rect":
        x0 = max(self.left, other.left)
        y0 = max(self.top, other.top)
        x1 = min(self.right, other.right)
        y1 = min(self.bottom, other.bottom)
        return Rect(x0, y0, max(0, x1 - x0), max(0, y1 - y0))
