"""Color themes built from Pygments styles."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pygments.style import Style
from pygments.styles import get_all_styles, get_style_by_name
from pygments.token import Token
from pygments.util import ClassNotFound

from svg_codeshot.exceptions import InvalidConfigError
from svg_codeshot.model import Color, StyledRun

logger = logging.getLogger(__name__)

DEFAULT_THEME = "monokai"


@dataclass(frozen=True)
class TokenStyle:
    foreground: Color
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True)
class Theme:
    """Background, default foreground and a per-token style table.

    Both default colors are required; use :meth:`from_pygments` to build one
    from a Pygments style.
    """

    name: str
    background: Color
    foreground: Color
    style: type[Style] | None = None

    @classmethod
    def from_pygments(
        cls,
        style: str | type[Style],
        foreground: Color | str | None = None,
        background: Color | str | None = None,
    ) -> Theme:
        """Build a theme from a Pygments style name or class.

        The default foreground is the style's ``Token.Text`` color (which
        inherits the root ``Token`` color). Explicit colors override the
        style's.

        Raises:
            InvalidConfigError: If the style is unknown or lacks a background
                or foreground color.
        """
        if isinstance(style, str):
            name = style
            style = load_style(style)
        else:
            name = style.name if getattr(style, "name", "unnamed") != "unnamed" else style.__name__

        bg = _coerce(background) or _coerce(style.background_color, strict=False)
        if bg is None:
            raise InvalidConfigError("theme", f"theme '{name}' declares no background color")

        fg = _coerce(foreground) or _coerce(style.style_for_token(Token.Text)["color"], strict=False)
        if fg is None:
            raise InvalidConfigError("theme", f"theme '{name}' declares no foreground color")

        return cls(name=name, background=bg, foreground=fg, style=style)

    def style_for(self, token_type: Any) -> TokenStyle:
        """Resolve a token type, inheriting from the nearest styled parent.

        Lexers emit subtypes (``Name.Quoted``, ``Name.Operator``) that a style
        table need not list; Pygments raises ``KeyError`` for those.
        """
        if self.style is None:
            return TokenStyle(self.foreground)
        while token_type not in self.style:
            token_type = token_type.parent
        value = self.style.style_for_token(token_type)
        color = _coerce(value["color"], strict=False) or self.foreground
        return TokenStyle(color, bool(value["bold"]), bool(value["italic"]))

    def default_style(self) -> TokenStyle:
        return TokenStyle(self.foreground)

    def is_default(self, run: StyledRun) -> bool:
        """True when ``run`` matches the group default and may omit attributes."""
        return run.foreground == self.foreground and not run.bold and not run.italic


def _coerce(value: Color | str | None, strict: bool = True) -> Color | None:
    """Turn a color-ish value into a Color.

    With ``strict=False`` values Pygments may carry that are not hex colors
    (``"ansired"``, ``"inherit"``) yield None instead of raising.
    """
    if value is None or isinstance(value, Color):
        return value
    if not value:
        return None
    try:
        return Color.parse(value)
    except InvalidConfigError:
        if strict:
            raise
        logger.debug("Ignoring non-hex style color %r", value)
        return None


def load_style(name: str) -> type[Style]:
    """Look up a Pygments style class by name.

    Raises:
        InvalidConfigError: If no style has that name.
    """
    try:
        return get_style_by_name(name)
    except ClassNotFound as e:
        raise InvalidConfigError("theme", f"unknown theme '{name}'") from e


def load_theme(name: str = DEFAULT_THEME, foreground: str | None = None, background: str | None = None) -> Theme:
    return Theme.from_pygments(name, foreground=foreground, background=background)


def available_themes() -> list[str]:
    return sorted(get_all_styles())
