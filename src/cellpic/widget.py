import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from PIL import Image

from cellpic.block import Block
from cellpic.buffer import CellBuffer
from cellpic.compositing import ColorMode, draw_image
from cellpic.geometry import Alignment, Rect
from cellpic.layout import canvas_size, fit_image
from cellpic.style import Style, backdrop_rgb

logger = logging.getLogger(__name__)

ImageFn = Callable[[int, int], Image.Image]


@dataclass(frozen=True)
class FixedImage:
    """A pre-loaded image, down-scaled to the canvas when it does not fit."""

    image: Image.Image


@dataclass(frozen=True)
class GeneratorFunction:
    """A callable producing an image for a canvas of ``(width, height)`` pixels.

    It signals failure by raising; the image it returns is drawn as-is.
    """

    fn: ImageFn


ImageSource = FixedImage | GeneratorFunction


@dataclass
class ImageWidget:
    """Renders an image into a rectangle of a cell buffer.

    Attributes:
        source: where the image comes from, see ``FixedImage`` and ``GeneratorFunction``
        color_mode: ``LUMA`` draws density glyphs, ``RGB`` draws coloured half blocks
        alignment: horizontal placement of images narrower than the area
        style: base style filled over the area; its background is the compositing backdrop
        block: optional frame drawn around the image
    """

    source: ImageSource
    color_mode: ColorMode = ColorMode.LUMA
    alignment: Alignment = Alignment.CENTER
    style: Style = field(default_factory=Style)
    block: Block | None = None

    @classmethod
    def with_image(cls, image: Image.Image, **options) -> "ImageWidget":
        return cls(FixedImage(image), **options)

    @classmethod
    def with_image_fn(cls, fn: ImageFn, **options) -> "ImageWidget":
        return cls(GeneratorFunction(fn), **options)

    def render(self, area: Rect, buf: CellBuffer) -> None:
        area = area.intersection(buf.area)
        if self.block is not None:
            inner = self.block.inner(area)
            self.block.render(area, buf)
            area = inner

        if area.is_empty():
            return

        buf.set_style(area, self.style)

        image = self._resolve(area)
        if image is None:
            return
        draw_image(
            image,
            area,
            buf,
            color_mode=self.color_mode,
            alignment=self.alignment,
            backdrop=backdrop_rgb(self.style.bg),
        )

    def _resolve(self, area: Rect) -> Image.Image | None:
        source = self.source
        if isinstance(source, FixedImage):
            return fit_image(source.image, area)

        width, height = canvas_size(area)
        try:
            return source.fn(width, height)
        except Exception:
            logger.debug("Image generator failed for %dx%d canvas, skipping draw", width, height, exc_info=True)
            return None
