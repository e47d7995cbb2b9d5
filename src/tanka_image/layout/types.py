"""Layout types shared between the layout engine and renderers."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, replace

from tanka_image.types import Direction

DEFAULT_FONT_SIZE = 32
DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 1600


def format_date(d: datetime.date) -> str:
    """Format a date the way the ja-JP locale does (``2024/1/5``)."""
    return f"{d.year}/{d.month}/{d.day}"


@dataclass(frozen=True)
class StyleConfig:
    """Everything the layout engine needs to place a poem on a canvas."""

    direction: Direction = Direction.VERTICAL
    font_size: float = DEFAULT_FONT_SIZE
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    caption_text: str | None = None
    show_date: bool = False
    date_text: str | None = None

    def __post_init__(self) -> None:
        # Resolve the date once, at construction, so layout() only reads fields.
        if self.show_date and self.date_text is None:
            object.__setattr__(self, "date_text", format_date(datetime.date.today()))

    def with_date(self, d: datetime.date) -> StyleConfig:
        """Return a copy that shows ``d`` as the date caption."""
        return replace(self, show_date=True, date_text=format_date(d))


@dataclass(frozen=True)
class GlyphPlacement:
    """A single character positioned for vertical writing."""

    char: str
    x: float
    y: float
    rotated: bool = False
    column: int = 0


@dataclass(frozen=True)
class LinePlacement:
    """A horizontal text run drawn centred at (x, y)."""

    text: str
    x: float
    y: float


@dataclass(frozen=True)
class CaptionPlacement:
    """A caption line (author name or date) drawn centred at (x, y)."""

    text: str
    x: float
    y: float


@dataclass(frozen=True)
class LayoutResult:
    """Self-contained layout output: everything a renderer needs."""

    direction: Direction
    width: float
    height: float
    font_size: float
    glyphs: tuple[GlyphPlacement, ...] = ()
    lines: tuple[LinePlacement, ...] = ()
    captions: tuple[CaptionPlacement, ...] = ()
    caption_font_size: float = 0.0
    caption_alpha: float = 1.0

    def columns(self) -> list[list[GlyphPlacement]]:
        """Group glyphs by column, rightmost column first."""
        out: list[list[GlyphPlacement]] = []
        for g in self.glyphs:
            while len(out) <= g.column:
                out.append([])
            out[g.column].append(g)
        return out

    def is_empty(self) -> bool:
        return not self.glyphs and not self.lines
