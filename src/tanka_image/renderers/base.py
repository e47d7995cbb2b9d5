"""Base renderer and drawing-surface protocols."""

from __future__ import annotations

from typing import Protocol

from tanka_image.layout.types import LayoutResult


class Surface(Protocol):
    """A 2D drawing surface that text is painted onto."""

    def set_font(self, size: float) -> None:
        """Select the font size (in pixels) for subsequent draw_text calls."""
        ...

    def set_color(self, rgb: tuple[int, int, int]) -> None:
        """Select the text colour for subsequent draw_text calls."""
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float, rgb: tuple[int, int, int]) -> None:
        """Fill an axis-aligned rectangle with an opaque colour."""
        ...

    def draw_text(self, text: str, x: float, y: float, rotation: float = 0.0, alpha: float = 1.0) -> None:
        """Draw ``text`` centred on (x, y), rotated clockwise by ``rotation`` radians."""
        ...


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, result: LayoutResult) -> bytes:
        """Render a laid-out poem to an encoded image."""
        ...
