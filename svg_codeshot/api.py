"""High-level rendering API.

Example:
    >>> from svg_codeshot import CodeRenderer, SourceDocument, load_theme
    >>> renderer = CodeRenderer.from_path("JetBrainsMono.ttf", load_theme("nord"))
    >>> result = renderer.render(SourceDocument("fn main() {}\\n", "rs"))
    >>> result.dimensions.width, result.dimensions.height
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from svg_codeshot.config import Config
from svg_codeshot.fonts.metrics import DEFAULT_REFERENCE_GLYPH, FontMetrics
from svg_codeshot.highlight.highlighter import Highlighter
from svg_codeshot.highlight.theme import Theme, load_theme
from svg_codeshot.layout import Layout, LayoutEngine, WidthMode
from svg_codeshot.model import CanvasDimensions, SourceDocument, StyledLine
from svg_codeshot.svg.assembler import SvgAssembler
from svg_codeshot.svg.document import VectorDocument

logger = logging.getLogger(__name__)

FALLBACK_FONT_FAMILY = "monospace"


@dataclass(frozen=True)
class RenderResult:
    """Everything a rasterizer or a test needs from one render."""

    document: VectorDocument
    lines: tuple[StyledLine, ...]
    layout: Layout

    @property
    def svg(self) -> str:
        return self.document.to_svg()

    @property
    def dimensions(self) -> CanvasDimensions:
        return self.layout.dimensions

    @property
    def line_count(self) -> int:
        return self.layout.line_count


class CodeRenderer:
    """Highlight, lay out and assemble source text into an SVG document.

    A renderer keeps no per-render state and may be shared between threads;
    every :meth:`render` call builds its own highlighter, layout and tree.
    """

    def __init__(
        self,
        metrics: FontMetrics,
        theme: Theme,
        width_mode: WidthMode = WidthMode.EXACT,
        position_runs: bool = True,
        font_family: str | None = None,
        reference_glyph: str = DEFAULT_REFERENCE_GLYPH,
    ) -> None:
        self.metrics = metrics
        self.theme = theme
        self.width_mode = WidthMode.parse(width_mode)
        self.position_runs = position_runs
        self.font_family = font_family or metrics.family_name or FALLBACK_FONT_FAMILY
        self.reference_glyph = reference_glyph

    @classmethod
    def from_path(cls, font_path: Path | str, theme: Theme, font_size: float = 16.0, **kwargs) -> CodeRenderer:
        return cls(FontMetrics.from_path(font_path, font_size), theme, **kwargs)

    @classmethod
    def from_config(cls, font_path: Path | str, config: Config, theme: Theme | None = None) -> CodeRenderer:
        return cls(
            FontMetrics.from_path(font_path, config.font_size),
            theme or load_theme(config.theme),
            width_mode=config.width_mode,
            position_runs=config.position_runs,
            font_family=config.font_family,
        )

    def render(self, document: SourceDocument, override: CanvasDimensions | None = None) -> RenderResult:
        """Run the full pipeline; raises on any failure, never returns partial output."""
        lines = Highlighter(self.theme).highlight(document)
        engine = LayoutEngine(self.metrics, self.width_mode, self.reference_glyph)
        layout = engine.layout(lines, override)
        assembler = SvgAssembler(self.theme, self.font_family, self.metrics.point_size, self.position_runs)
        vector = assembler.assemble(lines, layout)
        logger.info(
            "Rendered %d lines (%s) at %s with theme %s",
            layout.line_count,
            document.detected_syntax or "plain text",
            layout.dimensions,
            self.theme.name,
        )
        return RenderResult(vector, tuple(lines), layout)

    def render_text(self, text: str, syntax: str | None = None, override: CanvasDimensions | None = None) -> RenderResult:
        return self.render(SourceDocument(text, syntax), override)
