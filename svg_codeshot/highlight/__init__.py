"""Syntax highlighting for svg-codeshot.

This subpackage provides:
- Theme construction from Pygments styles
- Lexer lookup by name or file extension with plain-text fallback
- Folding a token stream into styled lines
"""

from svg_codeshot.highlight.highlighter import (
    Highlighter,
    ScanState,
    advance,
    finish,
    resolve_lexer,
)
from svg_codeshot.highlight.theme import (
    DEFAULT_THEME,
    Theme,
    TokenStyle,
    available_themes,
    load_theme,
)

__all__ = [
    "Highlighter",
    "ScanState",
    "advance",
    "finish",
    "resolve_lexer",
    "DEFAULT_THEME",
    "Theme",
    "TokenStyle",
    "available_themes",
    "load_theme",
]
