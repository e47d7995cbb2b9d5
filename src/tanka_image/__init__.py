"""tanka-image: short Japanese poems to shareable images."""

from tanka_image.api import render_settings, render_tanka
from tanka_image.config import RenderConfig
from tanka_image.errors import InvalidConfiguration
from tanka_image.layout import GlyphPlacement, LayoutResult, StyleConfig, layout
from tanka_image.settings import TankaSettings
from tanka_image.types import Direction, FontFamily, ImageFormat

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "FontFamily",
    "GlyphPlacement",
    "ImageFormat",
    "InvalidConfiguration",
    "LayoutResult",
    "RenderConfig",
    "StyleConfig",
    "TankaSettings",
    "layout",
    "render_settings",
    "render_tanka",
]
