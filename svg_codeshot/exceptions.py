"""Exception hierarchy for svg-codeshot.

All errors raised by the library derive from :class:`CodeshotError`, so
callers can catch a single type. Unresolved syntaxes and empty documents are
not errors and never raise.
"""

from __future__ import annotations

from typing import Any


class CodeshotError(Exception):
    """Base class for all svg-codeshot errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{key}={value}" for key, value in sorted(self.details.items()))
        return f"{self.message} ({extra})"


class FontLoadError(CodeshotError):
    """Font bytes could not be parsed into usable metrics."""

    def __init__(self, source: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Font load failure: {source}", details)
        self.source = source


class InvalidConfigError(CodeshotError):
    """A theme, dimension, color or config value is incomplete or malformed."""

    def __init__(self, field: str, reason: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Invalid configuration for '{field}': {reason}", details)
        self.field = field
        self.reason = reason


class RasterizeError(CodeshotError):
    """The SVG document could not be turned into a raster image."""
