from PIL import Image

from cellpic.geometry import Alignment, Rect


def canvas_size(area: Rect) -> tuple[int, int]:
    """Pixel size of the canvas behind ``area``: each cell holds two pixel rows."""
    return area.width, 2 * area.height


def needs_scaling(image_size: tuple[int, int], area: Rect) -> bool:
    width, height = image_size
    canvas_width, canvas_height = canvas_size(area)
    return width > canvas_width or height > canvas_height


def fit_image(image: Image.Image, area: Rect) -> Image.Image:
    """Down-scale ``image`` to exactly fill the canvas if it overflows either edge.

    Images that already fit are returned unchanged; nothing is ever enlarged.
    """
    if not needs_scaling(image.size, area):
        return image
    return image.resize(canvas_size(area), Image.Resampling.NEAREST)


def _clamp(value: int, upper: int) -> int:
    return max(0, min(upper, value))


def compute_offsets(image_size: tuple[int, int], area: Rect, alignment: Alignment) -> tuple[int, int]:
    """Canvas pixel offset (ox, oy) of the image's top-left corner.

    Horizontal placement follows ``alignment``; vertical placement is always centred.
    """
    width, height = image_size
    canvas_width, canvas_height = canvas_size(area)

    if alignment is Alignment.LEFT:
        ox = 0
    elif alignment is Alignment.RIGHT:
        ox = canvas_width - width
    else:
        ox = (canvas_width - width) // 2
    oy = (canvas_height - height) // 2

    return _clamp(ox, canvas_width - 1), _clamp(oy, canvas_height - 1)
