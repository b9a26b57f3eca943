"""Themes command - list the Pygments styles usable as themes."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from svg_codeshot.exceptions import InvalidConfigError
from svg_codeshot.highlight.theme import Theme, available_themes

console = Console()


@click.command()
@click.option("--complete-only", is_flag=True, help="Hide themes without default colors")
def themes(complete_only: bool) -> None:
    """List available themes and their default colors."""
    table = Table(title="Available Themes")
    table.add_column("Name", style="cyan")
    table.add_column("Background", style="green")
    table.add_column("Foreground", style="yellow")
    table.add_column("Status", style="dim")

    count = 0
    for name in available_themes():
        try:
            theme = Theme.from_pygments(name)
        except InvalidConfigError as e:
            if complete_only:
                continue
            table.add_row(name, "-", "-", f"incomplete: {e.reason}")
        else:
            table.add_row(name, theme.background.hex, theme.foreground.hex, "ok")
        count += 1

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {count} themes")
