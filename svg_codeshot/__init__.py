"""svg-codeshot: Render syntax-highlighted source code to SVG.

This library provides:
- Pygments highlighting with cross-line lexer state and plain-text fallback
- Exact layout from font glyph advances (fontTools)
- Deterministic SVG output with minimal per-run attributes
- Font specimen previews and optional PNG rasterization

Example:
    >>> from svg_codeshot import CodeRenderer, load_theme
    >>> renderer = CodeRenderer.from_path("DejaVuSansMono.ttf", load_theme("monokai"))
    >>> svg = renderer.render_text("print('hi')\\n", "py").svg
"""

from svg_codeshot.api import CodeRenderer, RenderResult
from svg_codeshot.config import Config
from svg_codeshot.exceptions import (
    CodeshotError,
    FontLoadError,
    InvalidConfigError,
    RasterizeError,
)
from svg_codeshot.fonts import FontMetrics
from svg_codeshot.highlight import Highlighter, Theme, load_theme
from svg_codeshot.layout import Layout, LayoutEngine, WidthMode
from svg_codeshot.model import (
    CanvasDimensions,
    Color,
    SourceDocument,
    StyledLine,
    StyledRun,
)
from svg_codeshot.svg import SvgAssembler, VectorDocument

__version__ = "0.2.0"

__all__ = [
    # Main API
    "CodeRenderer",
    "RenderResult",
    "Config",
    # Pipeline stages
    "FontMetrics",
    "Highlighter",
    "Theme",
    "load_theme",
    "LayoutEngine",
    "Layout",
    "WidthMode",
    "SvgAssembler",
    "VectorDocument",
    # Data model
    "SourceDocument",
    "StyledRun",
    "StyledLine",
    "CanvasDimensions",
    "Color",
    # Exceptions
    "CodeshotError",
    "FontLoadError",
    "InvalidConfigError",
    "RasterizeError",
    # Metadata
    "__version__",
]
