"""Per-run offsets and canvas size from font metrics.

Widths are measured in one of two modes chosen once per render:

``WidthMode.EXACT``
    Sum of every character's advance width. The default.
``WidthMode.APPROXIMATE``
    A single reference glyph's advance times the character count. Cheaper,
    and only correct for monospaced fonts.

Canvas height reserves one extra line of bottom padding so descenders and
bold glyphs on the last line do not clip.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

from svg_codeshot.exceptions import InvalidConfigError
from svg_codeshot.fonts.metrics import DEFAULT_REFERENCE_GLYPH, FontMetrics
from svg_codeshot.model import CanvasDimensions, StyledLine, count_lines

logger = logging.getLogger(__name__)


class WidthMode(str, Enum):
    EXACT = "exact"
    APPROXIMATE = "approximate"

    @classmethod
    def parse(cls, value: str | WidthMode) -> WidthMode:
        try:
            return cls(value)
        except ValueError as e:
            choices = ", ".join(m.value for m in cls)
            raise InvalidConfigError("width_mode", f"expected one of {choices}, got '{value}'") from e


@dataclass(frozen=True)
class LineLayout:
    offsets: tuple[float, ...]
    width: float


@dataclass(frozen=True)
class Layout:
    lines: tuple[LineLayout, ...]
    dimensions: CanvasDimensions
    line_height: float
    line_count: int

    @property
    def max_line_width(self) -> float:
        return max((line.width for line in self.lines), default=0.0)


def validate_override(override: CanvasDimensions) -> CanvasDimensions:
    """Reject overrides the rasterizer could not allocate."""
    if not isinstance(override.width, int) or not isinstance(override.height, int):
        raise InvalidConfigError("size", f"dimensions must be integers, got {override}")
    if override.width <= 0 or override.height <= 0:
        raise InvalidConfigError("size", f"dimensions must be positive, got {override}")
    return override


class LayoutEngine:
    """Position runs on each line and size the canvas."""

    def __init__(
        self,
        metrics: FontMetrics,
        mode: WidthMode = WidthMode.EXACT,
        reference_glyph: str = DEFAULT_REFERENCE_GLYPH,
    ) -> None:
        self.metrics = metrics
        self.mode = WidthMode.parse(mode)
        self.reference_glyph = reference_glyph

    def measure(self, text: str) -> float:
        if self.mode is WidthMode.APPROXIMATE:
            return self.metrics.approximate_width(text, self.reference_glyph)
        return self.metrics.text_width(text)

    def layout_line(self, line: StyledLine) -> LineLayout:
        offsets = []
        x = 0.0
        for run in line.runs:
            offsets.append(x)
            x += self.measure(run.text)
        return LineLayout(tuple(offsets), x)

    def canvas_height(self, line_count: int) -> int:
        return math.ceil(self.metrics.line_height * (line_count + 1))

    def layout(self, lines: list[StyledLine], override: CanvasDimensions | None = None) -> Layout:
        line_layouts = tuple(self.layout_line(line) for line in lines)
        line_count = count_lines(lines)

        if override is not None:
            dimensions = validate_override(override)
        else:
            width = max((ll.width for ll in line_layouts), default=0.0)
            dimensions = CanvasDimensions(math.ceil(width), self.canvas_height(line_count))

        logger.debug(
            "Layout: %d lines, %s mode, canvas %s%s",
            line_count,
            self.mode.value,
            dimensions,
            " (override)" if override is not None else "",
        )
        return Layout(line_layouts, dimensions, self.metrics.line_height, line_count)
