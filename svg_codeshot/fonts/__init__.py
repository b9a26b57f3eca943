"""Font handling for svg-codeshot.

This subpackage provides:
- Scaled glyph advance and vertical metrics (fontTools)
- fontconfig family and language-coverage lookups
"""

from svg_codeshot.fonts.fontconfig import (
    LATIN_CODES,
    declares_latin,
    scan_family,
    scan_languages,
    short_family,
)
from svg_codeshot.fonts.metrics import (
    DEFAULT_REFERENCE_GLYPH,
    FontMetrics,
    VerticalMetrics,
)

__all__ = [
    "FontMetrics",
    "VerticalMetrics",
    "DEFAULT_REFERENCE_GLYPH",
    "LATIN_CODES",
    "declares_latin",
    "scan_family",
    "scan_languages",
    "short_family",
]
