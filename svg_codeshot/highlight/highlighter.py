"""Turn source text into styled lines with a Pygments lexer.

The lexer's scan state (open strings, block comments, heredocs) spans line
boundaries, so the document is lexed in a single pass and the token stream
is folded into lines afterwards. The fold state is an explicit
:class:`ScanState` value; feeding tokens one at a time through
:func:`advance` and finishing with :func:`finish` gives the same lines as
:meth:`Highlighter.highlight`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

from svg_codeshot.highlight.theme import Theme, TokenStyle
from svg_codeshot.model import SourceDocument, StyledLine, StyledRun

logger = logging.getLogger(__name__)

# Keep the input's line structure intact: no stripping, no added newline
LEXER_OPTIONS: dict[str, Any] = {"stripnl": False, "stripall": False, "ensurenl": False}


@lru_cache(maxsize=None)
def _lexer_class(syntax_id: str) -> type[Lexer] | None:
    token = syntax_id.strip()
    if not token:
        return None
    try:
        return type(get_lexer_by_name(token.lower()))
    except ClassNotFound:
        pass
    # "rs", ".rs" and "main.rs" all resolve through the filename patterns
    filename = token if "." in token.lstrip(".") else f"file.{token.lstrip('.')}"
    try:
        return type(get_lexer_for_filename(filename))
    except ClassNotFound:
        return None


def resolve_lexer(syntax_id: str | None) -> Lexer:
    """Return a fresh lexer for ``syntax_id``, falling back to plain text."""
    cls = _lexer_class(syntax_id) if syntax_id else None
    if cls is None:
        logger.debug("No syntax for %r, using plain text", syntax_id)
        cls = TextLexer
    return cls(**LEXER_OPTIONS)


def is_plain_text(lexer: Lexer) -> bool:
    return isinstance(lexer, TextLexer)


@dataclass(frozen=True)
class ScanState:
    """Lines completed so far plus the runs of the line still open."""

    lines: tuple[StyledLine, ...] = ()
    pending: tuple[StyledRun, ...] = ()
    seen_text: bool = False


def _append_run(pending: tuple[StyledRun, ...], text: str, style: TokenStyle) -> tuple[StyledRun, ...]:
    run = StyledRun(text, style.foreground, style.bold, style.italic)
    if pending and pending[-1].same_style(run):
        merged = StyledRun(pending[-1].text + text, run.foreground, run.bold, run.italic)
        return pending[:-1] + (merged,)
    return pending + (run,)


def advance(state: ScanState, style: TokenStyle, value: str) -> ScanState:
    """Fold one token into the scan state, closing a line at every newline."""
    if not value:
        return state
    lines = state.lines
    pending = state.pending
    pieces = value.split("\n")
    for piece in pieces[:-1]:
        if piece:
            pending = _append_run(pending, piece, style)
        lines = lines + (StyledLine(pending, terminated=True),)
        pending = ()
    if pieces[-1]:
        pending = _append_run(pending, pieces[-1], style)
    return ScanState(lines, pending, True)


def finish(state: ScanState) -> list[StyledLine]:
    """Close the open line. Empty input produces no lines at all."""
    if not state.seen_text:
        return []
    return list(state.lines) + [StyledLine(state.pending, terminated=False)]


class Highlighter:
    """Map source text and a syntax token to styled lines under one theme.

    Token styles are memoized per instance; build one highlighter per render.
    """

    def __init__(self, theme: Theme) -> None:
        self.theme = theme
        self._styles: dict[Any, TokenStyle] = {}

    def style_for(self, token_type: Any) -> TokenStyle:
        style = self._styles.get(token_type)
        if style is None:
            style = self._styles[token_type] = self.theme.style_for(token_type)
        return style

    def tokens(self, text: str, lexer: Lexer) -> Iterable[tuple[TokenStyle, str]]:
        if is_plain_text(lexer):
            # Plain text is one unstyled run per line regardless of theme
            yield self.theme.default_style(), text.replace("\r\n", "\n").replace("\r", "\n")
            return
        for token_type, value in lexer.get_tokens(text):
            yield self.style_for(token_type), value

    def highlight(self, document: SourceDocument) -> list[StyledLine]:
        lexer = resolve_lexer(document.detected_syntax)
        return self.highlight_text(document.text, lexer)

    def highlight_text(self, text: str, lexer: Lexer) -> list[StyledLine]:
        state = ScanState()
        for style, value in self.tokens(text, lexer):
            state = advance(state, style, value)
        lines = finish(state)
        logger.debug("Highlighted %d lines with %s", len(lines), lexer.name)
        return lines
