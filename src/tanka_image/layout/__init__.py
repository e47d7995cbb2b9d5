"""Layout engine public API."""

from __future__ import annotations

from tanka_image.layout.engine import (
    CAPTION_ALPHA,
    CAPTION_SIZE_RATIO,
    CHAR_SPACING_RATIO,
    LINE_HEIGHT_RATIO,
    LINE_SPACING_RATIO,
    ROTATE_CHARS,
    layout,
    layout_captions,
    layout_horizontal,
    layout_vertical,
    should_rotate,
    split_lines,
)
from tanka_image.layout.types import (
    CaptionPlacement,
    GlyphPlacement,
    LayoutResult,
    LinePlacement,
    StyleConfig,
    format_date,
)

__all__ = [
    "CAPTION_ALPHA",
    "CAPTION_SIZE_RATIO",
    "CHAR_SPACING_RATIO",
    "LINE_HEIGHT_RATIO",
    "LINE_SPACING_RATIO",
    "ROTATE_CHARS",
    "CaptionPlacement",
    "GlyphPlacement",
    "LayoutResult",
    "LinePlacement",
    "StyleConfig",
    "format_date",
    "layout",
    "layout_captions",
    "layout_horizontal",
    "layout_vertical",
    "should_rotate",
    "split_lines",
]
