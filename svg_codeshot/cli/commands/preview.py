"""Preview command - font specimen image."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from svg_codeshot.cli.commands.render import write_output
from svg_codeshot.config import parse_alpha, parse_color, parse_dimensions, parse_font_size
from svg_codeshot.exceptions import CodeshotError
from svg_codeshot.fonts import FontMetrics, declares_latin, scan_family, scan_languages
from svg_codeshot.inputs import read_input
from svg_codeshot.preview import DEFAULT_PREVIEW_TEXT, build_font_preview

console = Console()
logger = logging.getLogger(__name__)


def warn_latin_support(font_path: Path) -> None:
    langs = scan_languages(font_path)
    if langs is None:
        logger.warning("Could not detect script support for %s", font_path.name)
    elif not declares_latin(langs):
        console.print("[yellow]Warning:[/yellow] Font has not declared Latin-script support.")


@click.command()
@click.option(
    "-F",
    "--font",
    "font_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    envvar="CODESHOT_FONT",
    help="Font file (TTF/OTF/TTC)",
)
@click.option(
    "-O",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("preview.svg"),
    envvar="CODESHOT_OUT_FILE",
    help="Output file: .svg, or .png/.jpg/.webp to rasterize",
)
@click.option("-I", "--input", "input_value", help="Sample text or file (\\n separated)")
@click.option("--size", default="1000x1000", envvar="CODESHOT_SIZE", help="Image size WIDTHxHEIGHT")
@click.option("--font-size", default="8%", envvar="CODESHOT_FONT_SIZE", help="Font size in px, or % of width")
@click.option("--bg-color", default="#FFFFFF", envvar="CODESHOT_BG_COLOR", help="Background color")
@click.option("--fg-color", default="#000000", envvar="CODESHOT_FG_COLOR", help="Text color")
@click.option("--bg-alpha", default="1.0", envvar="CODESHOT_BG_ALPHA", help="Background alpha")
@click.option("--fg-alpha", default="1.0", envvar="CODESHOT_FG_ALPHA", help="Text alpha")
def preview(
    font_path: Path,
    output: Path,
    input_value: str | None,
    size: str,
    font_size: str,
    bg_color: str,
    fg_color: str,
    bg_alpha: str,
    fg_alpha: str,
) -> None:
    """Generate a font preview."""
    try:
        canvas = parse_dimensions(size)
        pixel_size = parse_font_size(font_size).resolve(canvas.width)
        background = parse_color(bg_color)
        foreground = parse_color(fg_color)
        background = background.with_alpha(background.opacity * parse_alpha(bg_alpha))
        foreground = foreground.with_alpha(foreground.opacity * parse_alpha(fg_alpha))
        text = read_input(input_value).text if input_value else DEFAULT_PREVIEW_TEXT

        metrics = FontMetrics.from_path(font_path, pixel_size)
        family = metrics.family_name or scan_family(font_path) or "NA"
        logger.info("Detected font family: %s", family)

        document = build_font_preview(metrics, family, text, canvas, foreground, background)
        write_output(document, output)
    except CodeshotError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1) from e

    warn_latin_support(font_path)
    console.print(f"[green]Wrote[/green] {output} [dim]({canvas}, {family} at {pixel_size:g}px)[/dim]")
