"""Raster image renderer."""

from __future__ import annotations

import logging
import math

from tanka_image.config import RenderConfig
from tanka_image.layout.types import LayoutResult
from tanka_image.renderers.base import Surface
from tanka_image.renderers.canvas import ImageCanvas

logger = logging.getLogger(__name__)

ROTATION_RADIANS: float = math.pi / 2


class ImageRenderer:
    """Paints a LayoutResult onto an ImageCanvas and encodes it."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()

    def new_canvas(self, result: LayoutResult) -> ImageCanvas:
        return ImageCanvas(
            result.width,
            result.height,
            font_family=self.config.font_family,
            font_path=self.config.font_path,
        )

    def paint(self, surface: Surface, result: LayoutResult) -> None:
        """Draw background, poem, and captions onto any Surface."""
        surface.fill_rect(0, 0, result.width, result.height, self.config.bg_rgb)
        surface.set_color(self.config.text_rgb)

        # Pixel font sizes are floored, as a canvas font string would be.
        surface.set_font(math.floor(result.font_size))
        for glyph in result.glyphs:
            surface.draw_text(glyph.char, glyph.x, glyph.y, rotation=ROTATION_RADIANS if glyph.rotated else 0.0)
        for line in result.lines:
            surface.draw_text(line.text, line.x, line.y)

        if result.captions:
            surface.set_font(math.floor(result.caption_font_size))
            for caption in result.captions:
                surface.draw_text(caption.text, caption.x, caption.y, alpha=result.caption_alpha)

    def render(self, result: LayoutResult) -> bytes:
        canvas = self.new_canvas(result)
        self.paint(canvas, result)
        data = canvas.to_bytes(self.config.image_format)
        logger.debug(
            "rendered %dx%d %s (%d bytes)",
            canvas.width,
            canvas.height,
            self.config.image_format.value,
            len(data),
        )
        return data
