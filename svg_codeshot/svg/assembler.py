"""Build the SVG document tree from styled lines and their layout."""

from __future__ import annotations

import logging

from svg_codeshot.highlight.theme import Theme
from svg_codeshot.layout import Layout
from svg_codeshot.model import StyledLine, StyledRun
from svg_codeshot.svg.document import Background, Group, LineNode, RunNode, VectorDocument
from svg_codeshot.svg.escape import escape_text

logger = logging.getLogger(__name__)


class SvgAssembler:
    """Assemble a :class:`VectorDocument` for one render.

    Args:
        theme: Supplies the background and the group's default fill.
        font_family: Family written on the group.
        font_size: Pixel size written on the group; must match the size the
            layout was computed at.
        position_runs: Give every run an explicit ``x`` from the layout
            instead of letting the renderer flow runs one after another.
    """

    def __init__(self, theme: Theme, font_family: str, font_size: float, position_runs: bool = True) -> None:
        self.theme = theme
        self.font_family = font_family
        self.font_size = font_size
        self.position_runs = position_runs

    def run_node(self, run: StyledRun, x: float) -> RunNode:
        text = escape_text(run.text)
        position = x if self.position_runs else None
        if self.theme.is_default(run):
            return RunNode(text, x=position)
        # Bold or italic in the default color still inherits the group fill
        fill = None if run.foreground == self.theme.foreground else run.foreground.hex
        return RunNode(text, x=position, fill=fill, bold=run.bold, italic=run.italic)

    def assemble(self, lines: list[StyledLine], layout: Layout) -> VectorDocument:
        if len(lines) != len(layout.lines):
            raise ValueError(f"layout has {len(layout.lines)} lines, expected {len(lines)}")

        # Baselines in em so they track font-size however the rasterizer treats units
        em_multiplier = layout.line_height / self.font_size
        line_nodes = []
        for index, (line, line_layout) in enumerate(zip(lines, layout.lines)):
            runs = tuple(self.run_node(run, x) for run, x in zip(line.runs, line_layout.offsets))
            line_nodes.append(LineNode(y=(index + 1) * em_multiplier, children=runs))

        group = Group(
            font_family=self.font_family,
            font_size=self.font_size,
            fill=self.theme.foreground.hex,
            children=tuple(line_nodes),
        )
        document = VectorDocument(
            width=layout.dimensions.width,
            height=layout.dimensions.height,
            background=Background(self.theme.background.hex),
            group=group,
        )
        logger.debug("Assembled %d line nodes", len(line_nodes))
        return document
