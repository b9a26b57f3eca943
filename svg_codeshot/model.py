"""Value types shared by the highlighter, layout engine and assembler."""

from __future__ import annotations

import re
from dataclasses import dataclass

from svg_codeshot.exceptions import InvalidConfigError

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})([0-9a-fA-F]{2})?$")


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA color."""

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def parse(cls, value: str) -> Color:
        """Parse ``#RRGGBB``, ``#RRGGBBAA`` or a bare ``RRGGBB`` string.

        Raises:
            InvalidConfigError: If the value is not a hex color.
        """
        match = _HEX_RE.match(value.strip()) if value else None
        if match is None:
            raise InvalidConfigError(
                "color",
                f"invalid color `{value}`, expected `#RRGGBB` or `#RRGGBBAA`",
            )
        rgb, alpha = match.groups()
        return cls(
            int(rgb[0:2], 16),
            int(rgb[2:4], 16),
            int(rgb[4:6], 16),
            int(alpha, 16) if alpha else 255,
        )

    @property
    def hex(self) -> str:
        """Return ``#RRGGBB`` in uppercase; alpha is carried separately."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    @property
    def opacity(self) -> float:
        return self.a / 255.0

    def with_alpha(self, alpha: float) -> Color:
        return Color(self.r, self.g, self.b, round(min(max(alpha, 0.0), 1.0) * 255))


@dataclass(frozen=True)
class SourceDocument:
    """Raw text plus the best-guess syntax token for it."""

    text: str
    detected_syntax: str | None = None


@dataclass(frozen=True)
class StyledRun:
    """A contiguous span of one line sharing a single style."""

    text: str
    foreground: Color
    bold: bool = False
    italic: bool = False

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("StyledRun text must be non-empty")
        if "\n" in self.text:
            raise ValueError("StyledRun must not span a line boundary")

    def same_style(self, other: StyledRun) -> bool:
        return (
            self.foreground == other.foreground
            and self.bold == other.bold
            and self.italic == other.italic
        )


@dataclass(frozen=True)
class StyledLine:
    """Runs of one source line in visual left-to-right order.

    ``terminated`` is True when the source line ended with a newline. The
    empty remainder after a final newline is an unterminated zero-run line.
    """

    runs: tuple[StyledRun, ...] = ()
    terminated: bool = False

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)

    @property
    def is_empty(self) -> bool:
        return not self.runs


@dataclass(frozen=True)
class CanvasDimensions:
    """Pixel size of the output canvas."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise InvalidConfigError(
                "size", f"dimensions must be non-negative, got {self.width}x{self.height}"
            )

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


def count_lines(lines: list[StyledLine] | tuple[StyledLine, ...]) -> int:
    """Count source lines the way a line iterator keeping endings does.

    A trailing newline terminates the last line instead of opening a new
    one, so ``"a\\n"`` is one line and ``""`` is zero.
    """
    return sum(1 for line in lines if line.terminated or line.runs)
