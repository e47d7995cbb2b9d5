"""Shared type definitions for tanka-image.

Enums used across settings, layout, and renderers.
"""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    VERTICAL = "vertical"  # 縦書き
    HORIZONTAL = "horizontal"  # 横書き

    @classmethod
    def default(cls) -> Direction:
        return cls.VERTICAL

    @classmethod
    def parse(cls, value: str | Direction) -> Direction:
        if isinstance(value, Direction):
            return value
        return cls(value.strip().lower())


class FontFamily(Enum):
    MINCHO = "mincho"  # serif
    GOTHIC = "gothic"  # sans-serif

    @classmethod
    def default(cls) -> FontFamily:
        return cls.MINCHO

    @classmethod
    def parse(cls, value: str | FontFamily) -> FontFamily:
        if isinstance(value, FontFamily):
            return value
        return cls(value.strip().lower())


class ImageFormat(Enum):
    PNG = "png"
    JPEG = "jpeg"

    @classmethod
    def parse(cls, value: str | ImageFormat) -> ImageFormat:
        if isinstance(value, ImageFormat):
            return value
        key = value.strip().lower()
        if key == "jpg":
            key = "jpeg"
        return cls(key)

    @property
    def extension(self) -> str:
        return "jpg" if self is ImageFormat.JPEG else "png"
