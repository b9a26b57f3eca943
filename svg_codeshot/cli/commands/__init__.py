"""CLI commands for svg-codeshot."""

from svg_codeshot.cli.commands.info import info
from svg_codeshot.cli.commands.preview import preview
from svg_codeshot.cli.commands.render import render
from svg_codeshot.cli.commands.themes import themes

__all__ = ["render", "preview", "themes", "info"]
