"""Tanka layout engine.

Maps poem text and a StyleConfig to on-canvas placements:
  1. Line splitting (blank lines dropped)
  2. Vertical layout: columns right-to-left, glyphs top-to-bottom
  3. Horizontal layout: centred lines top-to-bottom
  4. Caption layout (author name, date)

The engine never touches a drawing surface; renderers consume LayoutResult.
"""

from __future__ import annotations

import logging
import math

from tanka_image.errors import InvalidConfiguration
from tanka_image.layout.types import CaptionPlacement, GlyphPlacement, LayoutResult, LinePlacement, StyleConfig
from tanka_image.types import Direction

logger = logging.getLogger(__name__)

# ─── Geometry constants ──────────────────────────────────────────────────────

LINE_SPACING_RATIO: float = 1.8
CHAR_SPACING_RATIO: float = 1.2
LINE_HEIGHT_RATIO: float = 1.6

CAPTION_SIZE_RATIO: float = 0.6
CAPTION_ALPHA: float = 0.7
CAPTION_BOTTOM_OFFSET: float = 80
CAPTION_LINE_ADVANCE: float = 30

# Long vowel mark and punctuation drawn rotated 90° in vertical writing.
ROTATE_CHARS: frozenset[str] = frozenset("ー、。！？：；（）「」『』")


# ─── Preprocessing ───────────────────────────────────────────────────────────


def split_lines(text: str) -> list[str]:
    """Split poem text on line breaks, dropping lines that are blank after trimming."""
    if not text:
        return []
    return [line.rstrip("\r") for line in text.split("\n") if line.strip()]


def should_rotate(char: str) -> bool:
    """Return True if ``char`` must be drawn rotated in vertical writing."""
    return char in ROTATE_CHARS


def _validate(style: StyleConfig) -> None:
    if not isinstance(style.direction, Direction):
        raise InvalidConfiguration(f"direction must be a Direction, got {style.direction!r}")
    for name in ("font_size", "width", "height"):
        value = getattr(style, name)
        # NaN fails every comparison, so test for the positive case.
        if isinstance(value, bool) or not (isinstance(value, (int, float)) and value > 0 and math.isfinite(value)):
            raise InvalidConfiguration(f"{name} must be a positive number, got {value!r}")


# ─── Vertical ────────────────────────────────────────────────────────────────


def layout_vertical(lines: list[str], style: StyleConfig) -> list[GlyphPlacement]:
    """Place each line as a column; columns run right-to-left, glyphs top-to-bottom."""
    line_spacing = style.font_size * LINE_SPACING_RATIO
    char_spacing = style.font_size * CHAR_SPACING_RATIO

    total_width = len(lines) * line_spacing
    x = (style.width + total_width) / 2 - line_spacing / 2

    glyphs: list[GlyphPlacement] = []
    for column, line in enumerate(lines):
        # str iteration is by code point, so surrogate pairs stay whole.
        chars = list(line)
        y = (style.height - len(chars) * char_spacing) / 2 + char_spacing / 2
        for ch in chars:
            glyphs.append(GlyphPlacement(char=ch, x=x, y=y, rotated=should_rotate(ch), column=column))
            y += char_spacing
        x -= line_spacing
    return glyphs


# ─── Horizontal ──────────────────────────────────────────────────────────────


def layout_horizontal(lines: list[str], style: StyleConfig) -> list[LinePlacement]:
    """Centre each line horizontally; the block of lines is centred vertically."""
    line_height = style.font_size * LINE_HEIGHT_RATIO
    total_height = len(lines) * line_height
    y = (style.height - total_height) / 2 + style.font_size
    x = style.width / 2

    placements: list[LinePlacement] = []
    for line in lines:
        placements.append(LinePlacement(text=line, x=x, y=y))
        y += line_height
    return placements


# ─── Captions ────────────────────────────────────────────────────────────────


def layout_captions(style: StyleConfig) -> list[CaptionPlacement]:
    """Place author name and date near the bottom edge, always horizontal."""
    texts: list[str] = []
    if style.caption_text:
        texts.append(style.caption_text)
    if style.show_date and style.date_text:
        texts.append(style.date_text)

    x = style.width / 2
    y = style.height - CAPTION_BOTTOM_OFFSET
    captions: list[CaptionPlacement] = []
    for text in texts:
        captions.append(CaptionPlacement(text=text, x=x, y=y))
        y += CAPTION_LINE_ADVANCE
    return captions


# ─── Public entry point ──────────────────────────────────────────────────────


def layout(text: str, style: StyleConfig) -> LayoutResult:
    """Compute glyph, line, and caption placements for a poem.

    Args:
        text: Poem text; newlines are verse breaks. May be empty.
        style: Direction, font size, canvas size, and caption options.

    Returns:
        A LayoutResult. Vertical layouts fill ``glyphs``; horizontal layouts
        fill ``lines``. ``captions`` is filled in either case.

    Raises:
        InvalidConfiguration: If font size, width, or height is not positive,
            or direction is not a Direction.
    """
    _validate(style)
    lines = split_lines(text)

    glyphs: list[GlyphPlacement] = []
    placed_lines: list[LinePlacement] = []
    if style.direction == Direction.VERTICAL:
        glyphs = layout_vertical(lines, style)
    else:
        placed_lines = layout_horizontal(lines, style)

    captions = layout_captions(style)
    logger.debug(
        "layout %s: %d lines, %d glyphs, %d captions",
        style.direction.value,
        len(lines),
        len(glyphs),
        len(captions),
    )
    return LayoutResult(
        direction=style.direction,
        width=style.width,
        height=style.height,
        font_size=style.font_size,
        glyphs=tuple(glyphs),
        lines=tuple(placed_lines),
        captions=tuple(captions),
        caption_font_size=style.font_size * CAPTION_SIZE_RATIO,
        caption_alpha=CAPTION_ALPHA,
    )
