"""Render command - source code to SVG or raster image."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from svg_codeshot.api import CodeRenderer
from svg_codeshot.config import Config, parse_dimensions, parse_pixel_size
from svg_codeshot.exceptions import CodeshotError
from svg_codeshot.highlight.theme import load_theme
from svg_codeshot.inputs import read_input
from svg_codeshot.layout import WidthMode
from svg_codeshot.model import CanvasDimensions
from svg_codeshot.svg.document import VectorDocument

console = Console()


def write_output(document: VectorDocument, output: Path) -> None:
    """Write SVG as-is, or rasterize when the suffix names an image format."""
    from svg_codeshot.raster import is_raster_path, write_raster

    svg = document.to_bytes()
    if is_raster_path(output):
        write_raster(svg, CanvasDimensions(document.width, document.height), output)
    else:
        output.write_bytes(svg)


@click.command()
@click.option("-I", "--input", "input_value", required=True, help="Text or file to render")
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
    default=Path("output.svg"),
    envvar="CODESHOT_OUT_FILE",
    help="Output file: .svg, or .png/.jpg/.webp to rasterize",
)
@click.option("-l", "--language", help="Syntax name or extension (default: from file name)")
@click.option("-t", "--theme", envvar="CODESHOT_THEME", help="Pygments style name")
@click.option("--foreground", help="Override the theme's default text color")
@click.option("--background", help="Override the theme's background color")
@click.option("--font-size", envvar="CODESHOT_FONT_SIZE", help="Font size in px")
@click.option("--font-family", help="Family written into the SVG (default: from the font)")
@click.option("--size", envvar="CODESHOT_SIZE", help="Explicit canvas WIDTHxHEIGHT")
@click.option(
    "--width-mode",
    type=click.Choice([m.value for m in WidthMode]),
    help="Measure lines exactly or from a reference glyph",
)
@click.option("--flow-runs", is_flag=True, help="Omit per-run x positions")
@click.pass_context
def render(
    ctx: click.Context,
    input_value: str,
    font_path: Path,
    output: Path,
    language: str | None,
    theme: str | None,
    foreground: str | None,
    background: str | None,
    font_size: str | None,
    font_family: str | None,
    size: str | None,
    width_mode: str | None,
    flow_runs: bool,
) -> None:
    """Render highlighted source code.

    The input is read from a file when it names one, otherwise it is used
    as literal text.
    """
    obj = ctx.obj or {}
    base = obj.get("config") or Config.load()

    try:
        config = base.merge(
            theme=theme,
            font_size=parse_pixel_size(font_size) if font_size else None,
            font_family=font_family,
            width_mode=WidthMode.parse(width_mode) if width_mode else None,
            size=parse_dimensions(size) if size else None,
            position_runs=False if flow_runs else None,
        )
        resolved_theme = load_theme(config.theme, foreground=foreground, background=background)
        document = read_input(input_value, language)
        renderer = CodeRenderer.from_config(font_path, config, resolved_theme)
        result = renderer.render(document, config.size)
        write_output(result.document, output)
    except CodeshotError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1) from e

    console.print(
        f"[green]Wrote[/green] {output} "
        f"[dim]({result.dimensions}, {result.line_count} lines, theme {resolved_theme.name})[/dim]"
    )
