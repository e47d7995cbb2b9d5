"""Centralized rendering configuration for tanka-image."""

from __future__ import annotations

import re
from dataclasses import dataclass

from PIL import ImageColor

from tanka_image.errors import InvalidConfiguration
from tanka_image.types import FontFamily, ImageFormat

DEFAULT_BG_COLOR = "#FFFFFF"
DEFAULT_TEXT_COLOR = "#000000"
JPEG_QUALITY = 90

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")


def parse_color(value: str) -> tuple[int, int, int]:
    """Parse ``#RGB`` or ``#RRGGBB`` into an RGB tuple."""
    if not isinstance(value, str) or not _HEX_COLOR_RE.match(value.strip()):
        raise InvalidConfiguration(f"invalid colour {value!r}; expected #RGB or #RRGGBB")
    return ImageColor.getrgb(value.strip())


@dataclass(frozen=True)
class ColorPreset:
    name: str
    label: str
    bg_color: str
    text_color: str


COLOR_PRESETS: dict[str, ColorPreset] = {
    p.name: p
    for p in (
        ColorPreset("white", "白地に黒", "#FFFFFF", "#000000"),
        ColorPreset("black", "黒地に白", "#000000", "#FFFFFF"),
        ColorPreset("beige", "ベージュ", "#F5F5DC", "#333333"),
        ColorPreset("midnight", "深夜", "#1A1A2E", "#EEE"),
        ColorPreset("sakura", "桜色", "#FFE4E1", "#8B4513"),
        ColorPreset("sky", "青空", "#E6F3FF", "#1A5490"),
    )
}


def get_preset(name: str) -> ColorPreset:
    """Look up a colour preset by name (case-insensitive)."""
    preset = COLOR_PRESETS.get(name.strip().lower())
    if preset is None:
        choices = ", ".join(COLOR_PRESETS)
        raise InvalidConfiguration(f"unknown colour preset '{name}'; use one of: {choices}")
    return preset


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for the raster rendering pipeline."""

    bg_color: str = DEFAULT_BG_COLOR
    text_color: str = DEFAULT_TEXT_COLOR
    font_family: FontFamily = FontFamily.MINCHO
    font_path: str | None = None
    image_format: ImageFormat = ImageFormat.PNG

    def __post_init__(self) -> None:
        parse_color(self.bg_color)
        parse_color(self.text_color)

    @classmethod
    def from_preset(cls, name: str, **kwargs) -> RenderConfig:
        preset = get_preset(name)
        return cls(bg_color=preset.bg_color, text_color=preset.text_color, **kwargs)

    @property
    def bg_rgb(self) -> tuple[int, int, int]:
        return parse_color(self.bg_color)

    @property
    def text_rgb(self) -> tuple[int, int, int]:
        return parse_color(self.text_color)
