"""ImageCanvas: Pillow-backed drawing surface."""

from __future__ import annotations

import io
import math

from PIL import Image, ImageDraw

from tanka_image.config import JPEG_QUALITY
from tanka_image.fonts import resolve_font
from tanka_image.types import FontFamily, ImageFormat

DEFAULT_FONT_SIZE = 16


class ImageCanvas:
    """An RGBA image onto which text and rectangles are painted.

    Text is anchored at its middle, matching a 2D canvas with
    ``textAlign = "center"`` and ``textBaseline = "middle"``.
    """

    def __init__(
        self,
        width: float,
        height: float,
        font_family: FontFamily = FontFamily.MINCHO,
        font_path: str | None = None,
    ) -> None:
        self.width = max(1, int(round(width)))
        self.height = max(1, int(round(height)))
        self.font_family = font_family
        self.font_path = font_path
        self.image = Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))
        self._draw = ImageDraw.Draw(self.image)
        self.color: tuple[int, int, int] = (0, 0, 0)
        self.font = resolve_font(font_family, DEFAULT_FONT_SIZE, font_path)

    def set_font(self, size: float) -> None:
        self.font = resolve_font(self.font_family, size, self.font_path)

    def set_color(self, rgb: tuple[int, int, int]) -> None:
        self.color = rgb

    def fill_rect(self, x: float, y: float, width: float, height: float, rgb: tuple[int, int, int]) -> None:
        left, top = int(round(x)), int(round(y))
        right, bottom = left + int(round(width)), top + int(round(height))
        if right <= left or bottom <= top:
            return
        # Pillow rectangles include the end coordinate.
        self._draw.rectangle((left, top, right - 1, bottom - 1), fill=(*rgb, 255))

    def draw_text(self, text: str, x: float, y: float, rotation: float = 0.0, alpha: float = 1.0) -> None:
        if not text:
            return
        a = max(0, min(255, int(round(alpha * 255))))
        if a == 0:
            return
        if rotation == 0.0 and a == 255:
            self._draw.text((x, y), text, font=self.font, fill=(*self.color, 255), anchor="mm")
            return

        # Paint onto a square transparent tile centred on the anchor, then
        # rotate around the tile centre and blend it into the image.
        left, top, right, bottom = self.font.getbbox(text, anchor="mm")
        half = int(math.ceil(max(abs(left), abs(top), abs(right), abs(bottom)) * math.sqrt(2))) + 2
        size = half * 2
        tile = Image.new("RGBA", (size, size), (0, 0, 0, 0))
        ImageDraw.Draw(tile).text((half, half), text, font=self.font, fill=(*self.color, a), anchor="mm")
        if rotation:
            # Pillow rotates counter-clockwise; canvas rotation is clockwise with y pointing down.
            tile = tile.rotate(-math.degrees(rotation), resample=Image.Resampling.BICUBIC)
        self._composite(tile, int(round(x)) - half, int(round(y)) - half)

    def _composite(self, tile: Image.Image, left: int, top: int) -> None:
        crop_x = max(0, -left)
        crop_y = max(0, -top)
        if crop_x >= tile.width or crop_y >= tile.height:
            return
        if left >= self.width or top >= self.height:
            return
        if crop_x or crop_y:
            tile = tile.crop((crop_x, crop_y, tile.width, tile.height))
        self.image.alpha_composite(tile, (left + crop_x, top + crop_y))

    def to_image(self) -> Image.Image:
        """Return the canvas flattened to RGB."""
        return self.image.convert("RGB")

    def to_bytes(self, image_format: ImageFormat = ImageFormat.PNG) -> bytes:
        buf = io.BytesIO()
        if image_format == ImageFormat.JPEG:
            self.to_image().save(buf, format="JPEG", quality=JPEG_QUALITY)
        else:
            self.to_image().save(buf, format="PNG")
        return buf.getvalue()
