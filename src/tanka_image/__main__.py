"""CLI entry point for tanka-image."""

import logging
import sys
import time
from pathlib import Path

import click

from tanka_image.api import render_settings
from tanka_image.config import COLOR_PRESETS, get_preset
from tanka_image.errors import InvalidConfiguration
from tanka_image.settings import TankaSettings
from tanka_image.types import Direction, FontFamily, ImageFormat


def _format_from_extension(path: str) -> ImageFormat | None:
    suffix = Path(path).suffix.lower()
    if suffix in (".jpg", ".jpeg"):
        return ImageFormat.JPEG
    if suffix == ".png":
        return ImageFormat.PNG
    return None


def _default_output(image_format: ImageFormat) -> str:
    return f"tanka_{int(time.time() * 1000)}.{image_format.extension}"


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--settings", "settings_file", type=click.Path(exists=True), default=None, help="JSON tanka record")
@click.option(
    "--horizontal/--vertical",
    "-H/-V",
    "horizontal",
    default=None,
    help="Writing direction (横書き/縦書き; default vertical)",
)
@click.option("--font-size", "-s", "font_size", type=float, default=None, help="Font size in pixels")
@click.option("--width", "width", type=int, default=None, help="Image width in pixels")
@click.option("--height", "height", type=int, default=None, help="Image height in pixels")
@click.option("--author", "-a", "author", type=str, default=None, help="Author name caption")
@click.option("--date/--no-date", "show_date", default=None, help="Show the date caption (default: on)")
@click.option("--font", "font", type=click.Choice([f.value for f in FontFamily]), default=None, help="Font family")
@click.option("--font-file", "font_file", type=click.Path(exists=True), default=None, help="TrueType/OpenType font file")
@click.option("--bg", "bg", type=str, default=None, help="Background colour (#RRGGBB)")
@click.option("--fg", "fg", type=str, default=None, help="Text colour (#RRGGBB)")
@click.option("--preset", "preset", type=click.Choice(list(COLOR_PRESETS)), default=None, help="Colour preset")
@click.option("--format", "-f", "image_format", type=click.Choice(["png", "jpeg", "jpg"]), default=None)
@click.option("--output", "-o", "output", type=str, default=None, help="Output file (default tanka_<timestamp>.<ext>)")
@click.option("--strict", is_flag=True, help="Apply the editor's font size limits")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(
    input: str | None,
    settings_file: str | None,
    horizontal: bool | None,
    font_size: float | None,
    width: int | None,
    height: int | None,
    author: str | None,
    show_date: bool | None,
    font: str | None,
    font_file: str | None,
    bg: str | None,
    fg: str | None,
    preset: str | None,
    image_format: str | None,
    output: str | None,
    strict: bool,
    verbose: bool,
) -> None:
    """Render a tanka (Japanese short poem) to an image."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    record: dict = {}
    if settings_file:
        try:
            record = TankaSettings.from_json(settings_file).to_dict()
        except OSError as e:
            click.echo(f"error: cannot read '{settings_file}': {e}", err=True)
            sys.exit(1)
        except InvalidConfiguration as e:
            click.echo(f"error: {e}", err=True)
            sys.exit(1)

    if input:
        try:
            with open(input, encoding="utf-8") as f:
                record["content"] = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    elif "content" not in record:
        record["content"] = sys.stdin.read()

    if preset is not None:
        p = get_preset(preset)
        record["bgColor"] = p.bg_color
        record["textColor"] = p.text_color

    overrides = {
        "style": None if horizontal is None else (Direction.HORIZONTAL if horizontal else Direction.VERTICAL).value,
        "fontSize": font_size,
        "width": width,
        "height": height,
        "authorName": author,
        "showDate": show_date,
        "fontFamily": font,
        "bgColor": bg,
        "textColor": fg,
        "format": image_format,
    }
    record.update({k: v for k, v in overrides.items() if v is not None})
    if image_format is None and output:
        inferred = _format_from_extension(output)
        if inferred is not None:
            record["format"] = inferred.value

    try:
        settings = TankaSettings.from_dict(record, strict=strict)
        data = render_settings(settings, font_path=font_file)
    except InvalidConfiguration as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    path = output or _default_output(settings.image_format)
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        click.echo(f"error: cannot write '{path}': {e}", err=True)
        sys.exit(1)
    click.echo(path)


if __name__ == "__main__":
    main()
