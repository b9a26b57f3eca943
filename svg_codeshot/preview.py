"""Font specimen: sample text centered on a fixed-size canvas."""

from __future__ import annotations

import logging
import math

from svg_codeshot.fonts.metrics import FontMetrics
from svg_codeshot.model import CanvasDimensions, Color
from svg_codeshot.svg.document import Background, Group, LineNode, RunNode, VectorDocument
from svg_codeshot.svg.escape import escape_text

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_TEXT = """\
ABCDEFGHIJKLM
NOPQRSTUVWXYZ
abcdefghijklm
nopqrSTUVWXYZ
1234567890
!@$%(){}[]"""

DEFAULT_PREVIEW_SIZE = CanvasDimensions(1000, 1000)
DEFAULT_BACKGROUND = Color(0xFF, 0xFF, 0xFF)
DEFAULT_FOREGROUND = Color(0x00, 0x00, 0x00)


def build_font_preview(
    metrics: FontMetrics,
    font_family: str,
    text: str = DEFAULT_PREVIEW_TEXT,
    canvas: CanvasDimensions = DEFAULT_PREVIEW_SIZE,
    foreground: Color = DEFAULT_FOREGROUND,
    background: Color = DEFAULT_BACKGROUND,
) -> VectorDocument:
    """Center every line horizontally and the whole block vertically.

    Lines sit ``ceil(line_height)`` pixels apart; the first baseline is one
    ascent below the top of the centered block. Colors carry their alpha as
    ``fill-opacity``.
    """
    lines = text.splitlines()
    line_height = math.ceil(metrics.line_height)
    block_height = line_height * len(lines)
    start_y = round((canvas.height - block_height) / 2 + metrics.ascent)

    nodes = []
    for index, line in enumerate(lines):
        width = metrics.text_width(line)
        x = round((canvas.width - width) / 2)
        y = start_y + index * line_height
        logger.debug("Line %d @ (%d, %d)", index, x, y)
        runs = (RunNode(escape_text(line)),) if line else ()
        nodes.append(LineNode(y=y, children=runs, unit="px", x=x))

    group = Group(
        font_family=font_family,
        font_size=metrics.point_size,
        fill=foreground.hex,
        children=tuple(nodes),
        opacity=foreground.opacity,
    )
    return VectorDocument(
        width=canvas.width,
        height=canvas.height,
        background=Background(background.hex, background.opacity),
        group=group,
    )
