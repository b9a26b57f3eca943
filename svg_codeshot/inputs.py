"""Read the render input: a file path or literal text."""

from __future__ import annotations

import logging
from pathlib import Path

from svg_codeshot.model import SourceDocument

logger = logging.getLogger(__name__)


def syntax_from_path(path: Path) -> str | None:
    """Best-guess syntax token from a file name (its extension, or the name itself)."""
    suffix = path.suffix.lstrip(".")
    if suffix:
        return suffix.lower()
    # Makefile, Dockerfile and friends are matched by their full name
    return path.name or None


def read_input(value: str, language: str | None = None) -> SourceDocument:
    """Treat ``value`` as a file when one exists at that path, else as text.

    File bytes are decoded as UTF-8 with invalid sequences replaced.
    ``language`` overrides the syntax guessed from the file name.
    """
    path = Path(value)
    try:
        is_file = path.is_file()
    except (OSError, ValueError):
        # Literal text can be too long or contain bytes no path may hold
        is_file = False

    if is_file:
        text = path.read_bytes().decode("utf-8", errors="replace")
        syntax = language or syntax_from_path(path)
        logger.info("Read %d bytes from %s (syntax %s)", len(text), path, syntax)
        return SourceDocument(text, syntax)

    return SourceDocument(value, language)
