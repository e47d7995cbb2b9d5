"""Font resolution for the mincho (serif) and gothic (sans-serif) families."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

from PIL import ImageFont

from tanka_image.errors import InvalidConfiguration
from tanka_image.types import FontFamily

logger = logging.getLogger(__name__)

FONT_ENV_VARS: dict[FontFamily, str] = {
    FontFamily.MINCHO: "TANKA_IMAGE_MINCHO_FONT",
    FontFamily.GOTHIC: "TANKA_IMAGE_GOTHIC_FONT",
}

# Common install locations of Noto Serif/Sans JP (and CJK) on Linux, macOS, Windows.
FONT_CANDIDATES: dict[FontFamily, tuple[str, ...]] = {
    FontFamily.MINCHO: (
        "/usr/share/fonts/opentype/noto/NotoSerifCJK-Regular.ttc",
        "/usr/share/fonts/noto-cjk/NotoSerifCJK-Regular.ttc",
        "/usr/share/fonts/google-noto-cjk/NotoSerifCJK-Regular.ttc",
        "/usr/share/fonts/truetype/noto/NotoSerifJP-Regular.otf",
        "/Library/Fonts/NotoSerifJP-Regular.otf",
        "/System/Library/Fonts/ヒラギノ明朝 ProN.ttc",
        "C:/Windows/Fonts/yumin.ttf",
        "C:/Windows/Fonts/msmincho.ttc",
    ),
    FontFamily.GOTHIC: (
        "/usr/share/fonts/opentype/noto/NotoSansCJK-Regular.ttc",
        "/usr/share/fonts/noto-cjk/NotoSansCJK-Regular.ttc",
        "/usr/share/fonts/google-noto-cjk/NotoSansCJK-Regular.ttc",
        "/usr/share/fonts/truetype/noto/NotoSansJP-Regular.otf",
        "/Library/Fonts/NotoSansJP-Regular.otf",
        "/System/Library/Fonts/ヒラギノ角ゴシック W3.ttc",
        "C:/Windows/Fonts/YuGothR.ttc",
        "C:/Windows/Fonts/msgothic.ttc",
    ),
}


def find_font_file(family: FontFamily, explicit: str | None = None) -> str | None:
    """Return the first existing font file for ``family``, or None."""
    if explicit:
        if not Path(explicit).is_file():
            raise InvalidConfiguration(f"font file not found: {explicit}")
        return explicit

    candidates: list[str] = []
    env_path = os.environ.get(FONT_ENV_VARS[family])
    if env_path:
        candidates.append(env_path)
    candidates.extend(FONT_CANDIDATES[family])

    for candidate in candidates:
        if Path(candidate).is_file():
            return candidate
    return None


@lru_cache(maxsize=32)
def _load(path: str | None, size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    if path is None:
        return ImageFont.load_default(size=size)
    return ImageFont.truetype(path, size=size)


def resolve_font(
    family: FontFamily, size: float, explicit: str | None = None
) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Load a font of ``family`` at ``size`` pixels (floored, at least 1)."""
    px = max(1, int(size))
    path = find_font_file(family, explicit)
    if path is None:
        logger.warning("no %s font file found; falling back to Pillow's default font", family.value)
    else:
        logger.debug("using %s font %s at %dpx", family.value, path, px)
    return _load(path, px)
