import argparse
import logging
import sys
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from cellpic.ansi import buffer_to_ansi
from cellpic.block import Block
from cellpic.buffer import CellBuffer
from cellpic.compositing import ColorMode
from cellpic.geometry import Alignment
from cellpic.style import Color, Style, parse_color
from cellpic.terminal import get_terminal_size
from cellpic.widget import ImageWidget

logger = logging.getLogger(__name__)


def _parse_size(value: str) -> tuple[int, int]:
    cols, sep, rows = value.lower().partition("x")
    if not sep or not cols.isdigit() or not rows.isdigit():
        raise argparse.ArgumentTypeError(f"Expected COLSxROWS, got {value!r}")
    return int(cols), int(rows)


def _parse_colour(value: str) -> Color:
    try:
        return parse_color(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an image into terminal character cells")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-m",
        "--mode",
        default=ColorMode.LUMA.value,
        choices=[m.value for m in ColorMode],
        help="Colour mode: density glyphs or truecolor half blocks (default: luma)",
    )
    parser.add_argument(
        "-a",
        "--align",
        default=Alignment.CENTER.value,
        choices=[a.value for a in Alignment],
        help="Horizontal alignment of narrow images (default: center)",
    )
    parser.add_argument("--bg", type=_parse_colour, default=None, help="Background colour, a name or #rrggbb")
    parser.add_argument("--fg", type=_parse_colour, default=None, help="Foreground colour, a name or #rrggbb")
    parser.add_argument("-b", "--border", action="store_true", default=False, help="Draw a frame around the image")
    parser.add_argument("-t", "--title", default=None, help="Frame title (implies --border)")
    parser.add_argument(
        "-s", "--size", type=_parse_size, default=None, help="Output size as COLSxROWS (default: terminal size)"
    )
    parser.add_argument(
        "--fit",
        action="store_true",
        default=False,
        help="Resize the image to the output keeping its aspect ratio, instead of stretching oversized images",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    return parser


def _fit_loader(image: Image.Image):
    def load(width: int, height: int) -> Image.Image:
        logger.debug("Fitting %dx%d image into %dx%d canvas", image.width, image.height, width, height)
        return ImageOps.contain(image, (width, height), Image.Resampling.LANCZOS)

    return load


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.size is not None:
        cols, rows = args.size
    else:
        cols, rows = get_terminal_size()
        # Leave the last line for the shell prompt
        rows = max(1, rows - 1)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)
    try:
        with Image.open(image_path) as img:
            image = img.convert("RGBA")
    except (UnidentifiedImageError, OSError) as e:
        print(f"Cannot read image {image_path}: {e}", file=sys.stderr)
        sys.exit(1)

    block = Block(title=args.title) if args.border or args.title else None
    options = dict(
        color_mode=ColorMode(args.mode),
        alignment=Alignment(args.align),
        style=Style(fg=args.fg, bg=args.bg),
        block=block,
    )
    if args.fit:
        widget = ImageWidget.with_image_fn(_fit_loader(image), **options)
    else:
        widget = ImageWidget.with_image(image, **options)

    buf = CellBuffer.empty(cols, rows)
    logger.debug("Rendering %s into %dx%d cells", image_path, cols, rows)
    widget.render(buf.area, buf)
    print(buffer_to_ansi(buf))
