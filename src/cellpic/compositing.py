from enum import Enum

import numpy as np
from PIL import Image

from cellpic.buffer import CellBuffer
from cellpic.charsets import BLOCK_UPPER_HALF, DENSITY_RAMP
from cellpic.geometry import Alignment, Rect
from cellpic.layout import canvas_size, compute_offsets
from cellpic.style import Rgb

LUMA_WEIGHTS = np.array([0.3, 0.59, 0.11], dtype=np.float32)
LUMA_LEVELS = 5


class ColorMode(Enum):
    LUMA = "luma"  # one density glyph per cell, no colour
    RGB = "rgb"  # upper half block, fg = even canvas row, bg = odd canvas row


def composite(pixels: np.ndarray, backdrop: tuple[float, float, float]) -> np.ndarray:
    """Blend RGBA pixels (h, w, 4) over a normalized backdrop colour.

    Returns an array of shape (h, w, 3) with channels in the 0-1 range. Computed in float32.
    """
    pixels = np.asarray(pixels, dtype=np.float32)
    one = np.float32(1.0)
    max_channel = np.float32(255.0)
    alpha = pixels[:, :, 3:4] / max_channel
    return pixels[:, :, :3] * alpha / max_channel + np.asarray(backdrop, dtype=np.float32) * (one - alpha)


def luma_levels(rgb: np.ndarray) -> np.ndarray:
    """Quantize composited colours (h, w, 3) into density levels (h, w)."""
    rgb = np.asarray(rgb, dtype=np.float32)
    wr, wg, wb = LUMA_WEIGHTS
    luma = rgb[:, :, 0] * wr + rgb[:, :, 1] * wg + rgb[:, :, 2] * wb
    return np.floor(np.float32(LUMA_LEVELS) * luma).astype(np.int64)


def to_rgb8(rgb: np.ndarray) -> np.ndarray:
    rgb = np.asarray(rgb, dtype=np.float32)
    return np.clip(np.floor(np.float32(255.0) * rgb), 0, 255).astype(np.uint8)


def draw_luma(rgb: np.ndarray, area: Rect, buf: CellBuffer, ox: int, oy: int) -> None:
    """Set density glyphs for the composited region whose top-left canvas pixel is (ox, oy).

    Level 0 cells are left untouched.
    """
    top_level = len(DENSITY_RAMP) - 1
    levels = luma_levels(rgb)
    for j, i in np.argwhere(levels > 0):
        level = min(int(levels[j, i]), top_level)
        cell = buf.get(area.left + ox + int(i), area.top + (oy + int(j)) // 2)
        cell.set_symbol(DENSITY_RAMP[level])


def draw_rgb(rgb: np.ndarray, area: Rect, buf: CellBuffer, ox: int, oy: int) -> None:
    """Paint two canvas rows per cell: even rows as foreground, odd rows as background."""
    colours = to_rgb8(rgb)
    height, width = colours.shape[:2]
    for j in range(height):
        y = oy + j
        row = area.top + y // 2
        for i in range(width):
            colour = Rgb(*(int(c) for c in colours[j, i]))
            cell = buf.get(area.left + ox + i, row)
            if y % 2 == 0:
                cell.set_symbol(BLOCK_UPPER_HALF).set_fg(colour)
            else:
                cell.set_bg(colour)


def draw_image(
    image: Image.Image,
    area: Rect,
    buf: CellBuffer,
    color_mode: ColorMode = ColorMode.LUMA,
    alignment: Alignment = Alignment.CENTER,
    backdrop: tuple[float, float, float] = (0.0, 0.0, 0.0),
) -> None:
    """Composite ``image`` onto the canvas of ``area`` and write the result into ``buf``.

    The image is not rescaled here; pixels falling past the canvas edges are skipped.
    """
    ox, oy = compute_offsets(image.size, area, alignment)
    canvas_width, canvas_height = canvas_size(area)
    visible_width = min(image.width, canvas_width - ox)
    visible_height = min(image.height, canvas_height - oy)
    if visible_width < 1 or visible_height < 1:
        return

    pixels = np.asarray(image.convert("RGBA"))[:visible_height, :visible_width]
    rgb = composite(pixels, backdrop)

    if color_mode is ColorMode.RGB:
        draw_rgb(rgb, area, buf, ox, oy)
    else:
        draw_luma(rgb, area, buf, ox, oy)
