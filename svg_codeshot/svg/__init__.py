"""SVG output for svg-codeshot.

This subpackage provides:
- The immutable document tree and its deterministic serialization
- Text and attribute escaping
- Assembly of styled, laid-out lines into a document
"""

from svg_codeshot.svg.assembler import SvgAssembler
from svg_codeshot.svg.document import (
    Background,
    Group,
    LineNode,
    RunNode,
    VectorDocument,
    format_number,
)
from svg_codeshot.svg.escape import escape_attribute, escape_text

__all__ = [
    "SvgAssembler",
    "Background",
    "Group",
    "LineNode",
    "RunNode",
    "VectorDocument",
    "format_number",
    "escape_attribute",
    "escape_text",
]
