"""Markup escaping for SVG text content and attribute values."""

from __future__ import annotations

# Whitespace other than newline becomes character references so that no
# consumer collapses or normalizes it; the markup characters become entities.
TEXT_ESCAPES: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    " ": "&#32;",
    "\t": "&#9;",
    "\r": "&#13;",
}

ATTRIBUTE_ESCAPES: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
}

# C0 controls other than tab/newline/CR are not allowed in XML 1.0 at all
_INVALID_XML = {chr(c): "\ufffd" for c in range(0x20) if chr(c) not in "\t\n\r"}

_TEXT_TABLE = str.maketrans({**_INVALID_XML, **TEXT_ESCAPES})
_ATTRIBUTE_TABLE = str.maketrans({**_INVALID_XML, **ATTRIBUTE_ESCAPES})


def escape_text(text: str) -> str:
    """Escape run text in a single pass, so ``&`` produced here is never re-escaped."""
    return text.translate(_TEXT_TABLE)


def escape_attribute(value: str) -> str:
    return value.translate(_ATTRIBUTE_TABLE)
