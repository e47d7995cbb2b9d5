"""Tests for tanka records, colour parsing, presets, and font lookup."""

from __future__ import annotations

import datetime
import json

import pytest

from tanka_image.config import COLOR_PRESETS, RenderConfig, get_preset, parse_color
from tanka_image.errors import InvalidConfiguration
from tanka_image.fonts import find_font_file, resolve_font
from tanka_image.settings import MAX_CONTENT_LENGTH, TankaSettings, content_length
from tanka_image.types import Direction, FontFamily, ImageFormat


class TestDefaults:
    def test_editor_defaults(self):
        s = TankaSettings.from_dict({"content": "あ"})
        assert s.style == Direction.VERTICAL
        assert s.font_family == FontFamily.MINCHO
        assert s.font_size == 32
        assert s.bg_color == "#FFFFFF"
        assert s.text_color == "#000000"
        assert (s.width, s.height) == (1200, 1600)
        assert s.show_date is True
        assert s.author_name is None

    def test_nulls_take_defaults(self):
        s = TankaSettings.from_dict({"content": "あ", "authorName": None, "fontSize": None})
        assert s.author_name is None
        assert s.font_size == 32


class TestFromDict:
    def test_camel_case_record(self):
        record = {
            "id": "abc",
            "content": "しらとりの\nあをうみに",
            "authorName": "牧水",
            "showDate": False,
            "style": "HORIZONTAL",
            "fontFamily": "gothic",
            "fontSize": 40,
            "bgColor": "#1A1A2E",
            "textColor": "#EEE",
            "width": 1080,
            "height": 1080,
            "createdAt": "2024-01-05T00:00:00Z",
        }
        s = TankaSettings.from_dict(record)
        assert s.style == Direction.HORIZONTAL
        assert s.font_family == FontFamily.GOTHIC
        assert s.author_name == "牧水"
        assert s.show_date is False
        assert (s.width, s.height) == (1080, 1080)

    def test_snake_case_keys(self):
        s = TankaSettings.from_dict({"content": "あ", "font_size": 28, "style": "vertical"})
        assert s.font_size == 28
        assert s.style == Direction.VERTICAL

    def test_format_alias(self):
        assert TankaSettings.from_dict({"format": "jpg"}).image_format == ImageFormat.JPEG

    def test_empty_author_is_none(self):
        assert TankaSettings.from_dict({"authorName": ""}).author_name is None

    @pytest.mark.parametrize(
        "record",
        [
            {"style": "diagonal"},
            {"fontFamily": "comic"},
            {"format": "gif"},
            {"bgColor": "white"},
            {"textColor": "#12345"},
            {"fontSize": 0},
            {"fontSize": "32"},
            {"width": -1},
            {"height": True},
            {"showDate": "false"},
            {"showDate": 1},
            {"createdAt": "yesterday"},
            {"createdAt": 20240105},
        ],
    )
    def test_invalid_records(self, record):
        with pytest.raises(InvalidConfiguration):
            TankaSettings.from_dict(record)

    def test_not_a_dict(self):
        with pytest.raises(InvalidConfiguration):
            TankaSettings.from_dict(["content"])  # type: ignore[arg-type]

    def test_created_at_timestamp(self):
        s = TankaSettings.from_dict({"createdAt": "2024-01-05T00:00:00Z"})
        assert s.created_at == datetime.date(2024, 1, 5)

    def test_created_at_with_millis_and_offset(self):
        s = TankaSettings.from_dict({"createdAt": "2024-03-09T12:30:00.123+09:00"})
        assert s.created_at == datetime.date(2024, 3, 9)

    def test_created_at_plain_date(self):
        assert TankaSettings.from_dict({"created_at": "2023-12-31"}).created_at == datetime.date(2023, 12, 31)

    def test_round_trip_with_created_at(self):
        s = TankaSettings.from_dict({"content": "あ", "createdAt": "2024-01-05"})
        assert TankaSettings.from_dict(s.to_dict()) == s

    def test_round_trip_dict(self):
        s = TankaSettings.from_dict({"content": "あ", "style": "horizontal", "authorName": "x"})
        assert TankaSettings.from_dict(s.to_dict()) == s


class TestStrict:
    def test_long_content_allowed_by_default(self):
        TankaSettings.from_dict({"content": "あ" * (MAX_CONTENT_LENGTH + 5)})

    def test_long_content_rejected_when_strict(self):
        with pytest.raises(InvalidConfiguration):
            TankaSettings.from_dict({"content": "あ" * (MAX_CONTENT_LENGTH + 1)}, strict=True)

    def test_line_breaks_not_counted(self):
        content = "\n".join(["あ" * 10] * 4)
        assert content_length(content) == 40
        TankaSettings.from_dict({"content": content}, strict=True)

    @pytest.mark.parametrize("size", [23, 49])
    def test_font_size_range(self, size):
        TankaSettings.from_dict({"fontSize": size})
        with pytest.raises(InvalidConfiguration):
            TankaSettings.from_dict({"fontSize": size}, strict=True)


class TestFromJson:
    def test_load(self, tmp_path):
        path = tmp_path / "tanka.json"
        path.write_text(json.dumps({"content": "あ", "fontSize": 24}, ensure_ascii=False), encoding="utf-8")
        assert TankaSettings.from_json(path).font_size == 24

    def test_bad_json(self, tmp_path):
        path = tmp_path / "tanka.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(InvalidConfiguration):
            TankaSettings.from_json(path)


class TestConversion:
    def test_to_style_with_date(self):
        s = TankaSettings.from_dict({"content": "あ", "authorName": "作者"})
        style = s.to_style(today=datetime.date(2024, 1, 5))
        assert style.caption_text == "作者"
        assert style.show_date
        assert style.date_text == "2024/1/5"
        assert style.direction == Direction.VERTICAL

    def test_to_style_uses_record_date(self):
        s = TankaSettings.from_dict({"content": "あ", "createdAt": "2024-01-05T00:00:00Z"})
        assert s.to_style().date_text == "2024/1/5"

    def test_to_style_today_overrides_record_date(self):
        s = TankaSettings.from_dict({"createdAt": "2024-01-05"})
        assert s.to_style(today=datetime.date(2025, 2, 3)).date_text == "2025/2/3"

    def test_to_style_without_date(self):
        style = TankaSettings.from_dict({"showDate": False}).to_style()
        assert not style.show_date
        assert style.date_text is None

    def test_to_render_config(self):
        s = TankaSettings.from_dict({"bgColor": "#000000", "textColor": "#FFFFFF", "fontFamily": "gothic"})
        cfg = s.to_render_config()
        assert cfg.bg_rgb == (0, 0, 0)
        assert cfg.text_rgb == (255, 255, 255)
        assert cfg.font_family == FontFamily.GOTHIC


class TestColors:
    def test_parse_long(self):
        assert parse_color("#F5F5DC") == (245, 245, 220)

    def test_parse_short(self):
        assert parse_color("#EEE") == (238, 238, 238)

    @pytest.mark.parametrize("value", ["", "FFFFFF", "#GGGGGG", "#FFFF", "red"])
    def test_parse_invalid(self, value):
        with pytest.raises(InvalidConfiguration):
            parse_color(value)

    def test_render_config_validates(self):
        with pytest.raises(InvalidConfiguration):
            RenderConfig(bg_color="nope")

    def test_presets(self):
        assert set(COLOR_PRESETS) == {"white", "black", "beige", "midnight", "sakura", "sky"}
        for preset in COLOR_PRESETS.values():
            parse_color(preset.bg_color)
            parse_color(preset.text_color)

    def test_get_preset_case_insensitive(self):
        assert get_preset("Sakura").bg_color == "#FFE4E1"

    def test_unknown_preset(self):
        with pytest.raises(InvalidConfiguration):
            get_preset("neon")

    def test_from_preset(self):
        cfg = RenderConfig.from_preset("black", font_family=FontFamily.GOTHIC)
        assert cfg.bg_color == "#000000"
        assert cfg.font_family == FontFamily.GOTHIC


class TestFonts:
    def test_missing_explicit_font(self, tmp_path):
        with pytest.raises(InvalidConfiguration):
            find_font_file(FontFamily.MINCHO, str(tmp_path / "missing.ttf"))

    def test_env_var_checked(self, monkeypatch, tmp_path):
        font = tmp_path / "fake.ttf"
        font.write_bytes(b"")
        monkeypatch.setenv("TANKA_IMAGE_GOTHIC_FONT", str(font))
        assert find_font_file(FontFamily.GOTHIC) == str(font)

    def test_resolve_falls_back(self, monkeypatch):
        monkeypatch.delenv("TANKA_IMAGE_MINCHO_FONT", raising=False)
        monkeypatch.setattr("tanka_image.fonts.find_font_file", lambda family, explicit=None: None)
        font = resolve_font(FontFamily.MINCHO, 20.7)
        assert font is not None
