"""Immutable SVG document tree and its deterministic serialization.

The tree mirrors the emitted markup one to one::

    <svg>
      <rect/>                 Background
      <g>                     Group (document-wide font and fill)
        <text>                LineNode, one per source line
          <tspan>...</tspan>  RunNode, one per styled run
        </text>
      </g>
    </svg>

RunNode text is stored already escaped and written verbatim. Attributes are
written in a fixed order and numbers with a fixed format, so equal trees
always serialize to equal bytes.
"""

from __future__ import annotations

from dataclasses import dataclass

from svg_codeshot.svg.escape import escape_attribute

SVG_NS = "http://www.w3.org/2000/svg"


def format_number(value: float) -> str:
    """Two decimals with trailing zeros dropped: ``12.50`` -> ``12.5``."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


@dataclass(frozen=True)
class Background:
    fill: str
    opacity: float = 1.0


@dataclass(frozen=True)
class RunNode:
    """One styled span. ``fill``/``bold``/``italic`` are overrides only."""

    text: str
    x: float | None = None
    fill: str | None = None
    bold: bool = False
    italic: bool = False

    def attributes(self) -> list[tuple[str, str]]:
        attrs = []
        if self.x is not None:
            attrs.append(("x", f"{format_number(self.x)}px"))
        if self.fill is not None:
            attrs.append(("fill", self.fill))
        if self.bold:
            attrs.append(("font-weight", "bold"))
        if self.italic:
            attrs.append(("font-style", "italic"))
        return attrs


@dataclass(frozen=True)
class LineNode:
    """One line of text; ``y`` is the baseline in ``unit``."""

    y: float
    children: tuple[RunNode, ...] = ()
    unit: str = "em"
    x: float = 0.0

    def attributes(self) -> list[tuple[str, str]]:
        return [
            ("x", f"{format_number(self.x)}px"),
            ("y", f"{format_number(self.y)}{self.unit}"),
            ("xml:space", "preserve"),
        ]


@dataclass(frozen=True)
class Group:
    font_family: str
    font_size: float
    fill: str
    children: tuple[LineNode, ...] = ()
    opacity: float = 1.0

    def attributes(self) -> list[tuple[str, str]]:
        attrs = [
            ("font-family", escape_attribute(self.font_family)),
            ("font-size", format_number(self.font_size)),
            ("fill", self.fill),
        ]
        if self.opacity < 1.0:
            attrs.append(("fill-opacity", format_number(self.opacity)))
        return attrs


@dataclass(frozen=True)
class VectorDocument:
    width: int
    height: int
    background: Background
    group: Group

    def to_svg(self) -> str:
        out = [
            '<?xml version="1.0" encoding="UTF-8"?>\n',
            f'<svg xmlns="{SVG_NS}" width="{self.width}px" height="{self.height}px" '
            f'viewBox="0 0 {self.width} {self.height}">\n',
        ]

        bg = self.background
        opacity = f' fill-opacity="{format_number(bg.opacity)}"' if bg.opacity < 1.0 else ""
        out.append(f'<rect width="100%" height="100%" fill="{bg.fill}"{opacity}/>\n')

        out.append(f"<g{_attrs(self.group.attributes())}>\n")
        for line in self.group.children:
            out.append(f"<text{_attrs(line.attributes())}>")
            for run in line.children:
                out.append(f"<tspan{_attrs(run.attributes())}>{run.text}</tspan>")
            out.append("</text>\n")
        out.append("</g>\n</svg>\n")
        return "".join(out)

    def to_bytes(self) -> bytes:
        return self.to_svg().encode("utf-8")

    @property
    def line_count(self) -> int:
        return len(self.group.children)


def _attrs(pairs: list[tuple[str, str]]) -> str:
    return "".join(f' {name}="{value}"' for name, value in pairs)
