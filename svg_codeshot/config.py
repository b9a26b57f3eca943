"""Configuration loading and value parsing.

A config file is optional YAML::

    theme: nord
    font_size: 18
    width_mode: exact
    position_runs: true
    font_family: "JetBrains Mono"
    size: 1200x800

CLI options and environment variables override file values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from svg_codeshot.exceptions import InvalidConfigError
from svg_codeshot.highlight.theme import DEFAULT_THEME
from svg_codeshot.layout import WidthMode
from svg_codeshot.model import CanvasDimensions, Color

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("codeshot.yaml")
DEFAULT_FONT_SIZE = 16.0


def parse_dimensions(value: str) -> CanvasDimensions:
    """Parse ``WIDTHxHEIGHT`` (e.g. ``1000x1000``); both parts are required."""
    parts = str(value).strip().lower().split("x")
    if len(parts) != 2:
        raise InvalidConfigError("size", f"expected WIDTHxHEIGHT, got '{value}'")
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError as e:
        raise InvalidConfigError("size", f"expected WIDTHxHEIGHT, got '{value}'") from e
    if width <= 0 or height <= 0:
        raise InvalidConfigError("size", f"dimensions must be positive, got '{value}'")
    return CanvasDimensions(width, height)


def parse_color(value: str) -> Color:
    return Color.parse(value)


@dataclass(frozen=True)
class FontSize:
    """Font size in pixels, or as a fraction of the canvas width."""

    value: float
    relative: bool = False

    def resolve(self, canvas_width: int) -> float:
        return canvas_width * self.value if self.relative else self.value

    def __str__(self) -> str:
        return f"{self.value * 100:g}%" if self.relative else f"{self.value:g}"


def parse_font_size(value: str | float) -> FontSize:
    """Parse ``"16"`` (pixels) or ``"8%"`` (of the canvas width)."""
    text = str(value).strip()
    try:
        if text.endswith("%"):
            size = FontSize(float(text[:-1]) / 100.0, relative=True)
        else:
            size = FontSize(float(text))
    except ValueError as e:
        raise InvalidConfigError("font_size", f"bad font size '{value}'") from e
    if size.value <= 0:
        raise InvalidConfigError("font_size", f"font size must be positive, got '{value}'")
    return size


def parse_pixel_size(value: str | float) -> float:
    """Parse a font size that must be in pixels, as code renders need."""
    size = parse_font_size(value)
    if size.relative:
        raise InvalidConfigError("font_size", "code renders take a pixel size")
    return size.value


def parse_alpha(value: str | float) -> float:
    """Parse an opacity, clamped into [0, 1]."""
    try:
        alpha = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidConfigError("alpha", f"bad alpha '{value}'") from e
    return min(max(alpha, 0.0), 1.0)


@dataclass(frozen=True)
class Config:
    """Render settings shared by the CLI and the Python API."""

    theme: str = DEFAULT_THEME
    font_size: float = DEFAULT_FONT_SIZE
    width_mode: WidthMode = WidthMode.EXACT
    position_runs: bool = True
    font_family: str | None = None
    size: CanvasDimensions | None = None

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load settings from YAML; a missing file yields the defaults.

        Raises:
            InvalidConfigError: On unreadable YAML, unknown keys or bad values.
        """
        path = path or DEFAULT_CONFIG_PATH
        if not path.exists():
            return cls()

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise InvalidConfigError("config", f"cannot parse {path}: {e}") from e
        if not isinstance(data, dict):
            raise InvalidConfigError("config", f"{path} must contain a mapping")

        logger.debug("Loaded config from %s", path)
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidConfigError("config", f"unknown keys: {', '.join(unknown)}")

        values: dict[str, Any] = {}
        if "theme" in data:
            values["theme"] = str(data["theme"])
        if "font_size" in data:
            values["font_size"] = parse_pixel_size(data["font_size"])
        if "width_mode" in data:
            values["width_mode"] = WidthMode.parse(data["width_mode"])
        if "position_runs" in data:
            if not isinstance(data["position_runs"], bool):
                raise InvalidConfigError("position_runs", "expected true or false")
            values["position_runs"] = data["position_runs"]
        if data.get("font_family") is not None:
            values["font_family"] = str(data["font_family"])
        if data.get("size") is not None:
            values["size"] = parse_dimensions(data["size"])
        return cls(**values)

    def merge(self, **overrides: Any) -> Config:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
