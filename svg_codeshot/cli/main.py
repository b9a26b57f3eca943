"""Command-line entry point for svg-codeshot."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from svg_codeshot import __version__
from svg_codeshot.cli.commands import info, preview, render, themes
from svg_codeshot.config import Config
from svg_codeshot.exceptions import InvalidConfigError

console = Console()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def setup_logging(level: str) -> None:
    """Route library logging through rich on stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(__version__, prog_name="svg-codeshot")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="CODESHOT_LOG_LEVEL",
    help="Logging verbosity",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="CODESHOT_CONFIG",
    help="YAML config file (default: ./codeshot.yaml if present)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, config_path: Path | None) -> None:
    """Render source code and font specimens to SVG."""
    ctx.ensure_object(dict)
    setup_logging(log_level)
    try:
        ctx.obj["config"] = Config.load(config_path)
    except InvalidConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1) from e
    ctx.obj["log_level"] = log_level.upper()


cli.add_command(render)
cli.add_command(preview)
cli.add_command(themes)
cli.add_command(info)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
