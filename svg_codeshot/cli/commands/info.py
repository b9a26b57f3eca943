"""Info command - font facts relevant to layout."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from svg_codeshot.exceptions import CodeshotError
from svg_codeshot.fonts import (
    DEFAULT_REFERENCE_GLYPH,
    FontMetrics,
    declares_latin,
    scan_family,
    scan_languages,
)

console = Console()


@click.command()
@click.argument("font_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--font-size", type=float, default=16.0, help="Pixel size to scale metrics to")
def info(font_path: Path, font_size: float) -> None:
    """Show family, vertical metrics and script support of a font."""
    try:
        metrics = FontMetrics.from_path(font_path, font_size)
    except CodeshotError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1) from e

    langs = scan_languages(font_path)
    if langs is None:
        latin = "unknown"
    else:
        latin = "yes" if declares_latin(langs) else "no"

    table = Table(title=f"{font_path.name} at {font_size:g}px")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="yellow")
    table.add_row("Family (name table)", metrics.family_name or "-")
    table.add_row("Family (fontconfig)", scan_family(font_path) or "-")
    table.add_row("Ascent", f"{metrics.ascent:.2f}")
    table.add_row("Descent", f"{metrics.descent:.2f}")
    table.add_row("Line gap", f"{metrics.line_gap:.2f}")
    table.add_row("Line height", f"{metrics.line_height:.2f}")
    table.add_row(
        f"Advance '{DEFAULT_REFERENCE_GLYPH}'",
        f"{metrics.advance_width(DEFAULT_REFERENCE_GLYPH):.2f}",
    )
    table.add_row("Declares Latin", latin)

    console.print(table)
