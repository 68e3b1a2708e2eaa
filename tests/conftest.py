from PIL import Image

from cellpic.buffer import CellBuffer

WHITE = (255, 255, 255, 255)
TRANSPARENT = (0, 0, 0, 0)


def solid(width, height, rgba=WHITE):
    """An RGBA image filled with a single colour."""
    return Image.new("RGBA", (width, height), rgba)


def make_buffer(width, height):
    return CellBuffer.empty(width, height)


def symbols(buf):
    """Buffer contents as one string per row."""
    return ["".join(cell.symbol for cell in row) for row in buf.rows()]
