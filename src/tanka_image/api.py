"""Library entry points: poem text in, encoded image out."""

from __future__ import annotations

import datetime

from tanka_image.config import RenderConfig
from tanka_image.layout.engine import layout
from tanka_image.layout.types import StyleConfig
from tanka_image.renderers.image import ImageRenderer
from tanka_image.settings import TankaSettings


def render_tanka(text: str, style: StyleConfig | None = None, config: RenderConfig | None = None) -> bytes:
    """Lay out a poem and render it to PNG or JPEG bytes.

    Args:
        text: Poem text; newlines are verse breaks.
        style: Layout options (direction, font size, canvas size, captions).
        config: Colours, font, and output format.

    Returns:
        The encoded image.

    Raises:
        InvalidConfiguration: If a size parameter is not positive or a font file is missing.
    """
    result = layout(text, style or StyleConfig())
    return ImageRenderer(config).render(result)


def render_settings(
    settings: TankaSettings, today: datetime.date | None = None, font_path: str | None = None
) -> bytes:
    """Render a stored tanka record."""
    return render_tanka(settings.content, settings.to_style(today), settings.to_render_config(font_path))
