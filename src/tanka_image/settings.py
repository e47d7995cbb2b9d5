"""Tanka records: the stored poem plus its styling options.

A record uses the same keys the web editor stores (``content``,
``authorName``, ``showDate``, ``style``, ``fontFamily``, ``fontSize``,
``bgColor``, ``textColor``, ``width``, ``height``, ``createdAt``). ``TankaSettings`` parses
and validates such a record and splits it into the layout engine's
StyleConfig and the renderer's RenderConfig.
"""

from __future__ import annotations

import datetime
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tanka_image.config import DEFAULT_BG_COLOR, DEFAULT_TEXT_COLOR, RenderConfig, parse_color
from tanka_image.errors import InvalidConfiguration
from tanka_image.layout.types import DEFAULT_FONT_SIZE, DEFAULT_HEIGHT, DEFAULT_WIDTH, StyleConfig, format_date
from tanka_image.types import Direction, FontFamily, ImageFormat

logger = logging.getLogger(__name__)

RECOMMENDED_LENGTH = 31
MAX_CONTENT_LENGTH = 40
MIN_FONT_SIZE = 24
MAX_FONT_SIZE = 48

_KEY_ALIASES: dict[str, str] = {
    "authorName": "author_name",
    "showDate": "show_date",
    "fontFamily": "font_family",
    "fontSize": "font_size",
    "bgColor": "bg_color",
    "textColor": "text_color",
    "format": "image_format",
    "createdAt": "created_at",
}


def content_length(content: str) -> int:
    """Count code points, ignoring line breaks."""
    return sum(1 for ch in content if ch not in "\r\n")


def _positive_number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidConfiguration(f"{name} must be a number, got {value!r}")
    if not value > 0:
        raise InvalidConfiguration(f"{name} must be positive, got {value!r}")
    return value


def parse_created_at(value: Any) -> datetime.date:
    """Parse a record's creation time (ISO 8601 date or timestamp) to a date."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        # fromisoformat only accepts a trailing "Z" from Python 3.11.
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.datetime.fromisoformat(text).date()
        except ValueError:
            pass
    raise InvalidConfiguration(f"createdAt must be an ISO 8601 date or timestamp, got {value!r}")


def _parse_enum(enum_cls, name: str, value: Any):
    try:
        return enum_cls.parse(value)
    except (ValueError, AttributeError):
        choices = ", ".join(m.value for m in enum_cls)
        raise InvalidConfiguration(f"unknown {name} {value!r}; use one of: {choices}") from None


@dataclass
class TankaSettings:
    """A tanka record with defaults matching the web editor."""

    content: str = ""
    author_name: str | None = None
    show_date: bool = True
    style: Direction = Direction.VERTICAL
    font_family: FontFamily = FontFamily.MINCHO
    font_size: float = DEFAULT_FONT_SIZE
    bg_color: str = DEFAULT_BG_COLOR
    text_color: str = DEFAULT_TEXT_COLOR
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    image_format: ImageFormat = ImageFormat.PNG
    created_at: datetime.date | None = None

    def validate(self, strict: bool = False) -> None:
        """Check every field, raising InvalidConfiguration on the first problem.

        With ``strict`` the content length is capped and the font size must
        lie in the editor's range.
        """
        if not isinstance(self.content, str):
            raise InvalidConfiguration("content must be a string")
        length = content_length(self.content)
        if length > RECOMMENDED_LENGTH:
            logger.info("content is %d characters; about %d is typical for a tanka", length, RECOMMENDED_LENGTH)
        if strict and length > MAX_CONTENT_LENGTH:
            raise InvalidConfiguration(f"content is {length} characters; at most {MAX_CONTENT_LENGTH} are allowed")
        _positive_number("fontSize", self.font_size)
        _positive_number("width", self.width)
        _positive_number("height", self.height)
        if strict and not MIN_FONT_SIZE <= self.font_size <= MAX_FONT_SIZE:
            raise InvalidConfiguration(f"fontSize must be between {MIN_FONT_SIZE} and {MAX_FONT_SIZE}")
        parse_color(self.bg_color)
        parse_color(self.text_color)

    @classmethod
    def from_dict(cls, data: dict[str, Any], strict: bool = False) -> TankaSettings:
        """Build settings from a record using camelCase or snake_case keys.

        Missing or null values take the editor defaults. Unknown keys (such as
        ``id``) are ignored.
        """
        if not isinstance(data, dict):
            raise InvalidConfiguration("tanka record must be a JSON object")

        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name in cls.__dataclass_fields__ and value is not None:
                kwargs[name] = value

        if "style" in kwargs:
            kwargs["style"] = _parse_enum(Direction, "style", kwargs["style"])
        if "font_family" in kwargs:
            kwargs["font_family"] = _parse_enum(FontFamily, "fontFamily", kwargs["font_family"])
        if "image_format" in kwargs:
            kwargs["image_format"] = _parse_enum(ImageFormat, "format", kwargs["image_format"])
        if "show_date" in kwargs:
            if not isinstance(kwargs["show_date"], bool):
                raise InvalidConfiguration(f"showDate must be true or false, got {kwargs['show_date']!r}")
        if "created_at" in kwargs:
            kwargs["created_at"] = parse_created_at(kwargs["created_at"])
        if kwargs.get("author_name") == "":
            kwargs["author_name"] = None

        settings = cls(**kwargs)
        settings.validate(strict=strict)
        return settings

    @classmethod
    def from_json(cls, path: str | Path, strict: bool = False) -> TankaSettings:
        """Load settings from a JSON file."""
        text = Path(path).read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidConfiguration(f"invalid JSON in '{path}': {e}") from e
        return cls.from_dict(data, strict=strict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the editor's camelCase record shape."""
        return {
            "content": self.content,
            "authorName": self.author_name,
            "showDate": self.show_date,
            "style": self.style.value.upper(),
            "fontFamily": self.font_family.value,
            "fontSize": self.font_size,
            "bgColor": self.bg_color,
            "textColor": self.text_color,
            "width": self.width,
            "height": self.height,
            "format": self.image_format.value,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    def to_style(self, today: datetime.date | None = None) -> StyleConfig:
        """Return the StyleConfig for this record.

        The date caption uses ``today`` if given, else the record's
        ``created_at``, else the current local date.
        """
        date_text = None
        if self.show_date:
            date_text = format_date(today or self.created_at or datetime.date.today())
        return StyleConfig(
            direction=self.style,
            font_size=self.font_size,
            width=self.width,
            height=self.height,
            caption_text=self.author_name,
            show_date=self.show_date,
            date_text=date_text,
        )

    def to_render_config(self, font_path: str | None = None) -> RenderConfig:
        return RenderConfig(
            bg_color=self.bg_color,
            text_color=self.text_color,
            font_family=self.font_family,
            font_path=font_path,
            image_format=self.image_format,
        )
