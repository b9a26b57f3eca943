"""Glyph advance and vertical metrics for one loaded font.

Metrics are read once from the font tables with fontTools and scaled to a
fixed pixel size. The same (font bytes, size) pair always yields the same
numbers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path

from fontTools.ttLib import TTFont

from svg_codeshot.exceptions import FontLoadError

logger = logging.getLogger(__name__)

# Used when a line width is estimated from character count alone
DEFAULT_REFERENCE_GLYPH = "M"


@dataclass(frozen=True)
class VerticalMetrics:
    """Scaled hhea metrics; descent is negative below the baseline."""

    ascent: float
    descent: float
    line_gap: float

    @property
    def line_height(self) -> float:
        return self.ascent - self.descent + self.line_gap


def _name(ttfont: TTFont, ids: list[int]) -> str | None:
    """Return the first name-table record matching one of ``ids``."""
    if "name" not in ttfont:
        return None
    for nid in ids:
        for rec in ttfont["name"].names:
            if rec.nameID == nid:
                try:
                    value = str(rec.toUnicode()).strip()
                except UnicodeDecodeError:
                    value = rec.string.decode("latin-1", errors="ignore").strip()
                if value:
                    return value
    return None


def _open(data: bytes, font_number: int, source: str) -> TTFont:
    try:
        return TTFont(BytesIO(data), fontNumber=font_number, lazy=False)
    except Exception as e:
        raise FontLoadError(source, details={"error": str(e)}) from e


class FontMetrics:
    """Advance widths and vertical metrics of a font at one pixel size."""

    def __init__(self, ttfont: TTFont, point_size: float, source: str = "<memory>") -> None:
        if point_size <= 0:
            raise FontLoadError(source, details={"error": f"point size must be positive, got {point_size}"})

        try:
            units_per_em = ttfont["head"].unitsPerEm
            hhea = ttfont["hhea"]
            self._advances = {name: adv for name, (adv, _lsb) in ttfont["hmtx"].metrics.items()}
            self._cmap = ttfont.getBestCmap() or {}
            self._notdef = ttfont.getGlyphOrder()[0]
        except Exception as e:
            raise FontLoadError(source, details={"error": str(e)}) from e

        if not units_per_em:
            raise FontLoadError(source, details={"error": "unitsPerEm is zero"})

        self.point_size = float(point_size)
        self.source = source
        self.scale = self.point_size / units_per_em
        self._units_per_em = units_per_em
        self._vertical = VerticalMetrics(
            ascent=self._scaled(hhea.ascent),
            descent=self._scaled(hhea.descent),
            line_gap=self._scaled(hhea.lineGap),
        )
        self.family_name = _name(ttfont, [16, 1])

    @classmethod
    def from_bytes(cls, data: bytes, point_size: float, font_number: int = 0) -> FontMetrics:
        """Parse font bytes (TTF, OTF or a TTC face).

        Raises:
            FontLoadError: If the bytes are not a usable font.
        """
        return cls(_open(data, font_number, "<memory>"), point_size)

    @classmethod
    def from_path(cls, path: Path | str, point_size: float, font_number: int = 0) -> FontMetrics:
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FontLoadError(str(path), details={"error": str(e)}) from e
        ttfont = _open(data, font_number, str(path))
        logger.debug("Loaded font %s at %.2fpx", path.name, point_size)
        return cls(ttfont, point_size, source=str(path))

    def _scaled(self, units: float) -> float:
        return units * self.point_size / self._units_per_em

    @property
    def ascent(self) -> float:
        return self._vertical.ascent

    @property
    def descent(self) -> float:
        return self._vertical.descent

    @property
    def line_gap(self) -> float:
        return self._vertical.line_gap

    @property
    def line_height(self) -> float:
        return self._vertical.line_height

    def vertical_metrics(self) -> VerticalMetrics:
        return self._vertical

    def has_glyph(self, char: str) -> bool:
        return ord(char) in self._cmap

    def advance_width(self, char: str) -> float:
        """Scaled advance of ``char``; unmapped characters use ``.notdef``."""
        glyph = self._cmap.get(ord(char), self._notdef)
        return self._scaled(self._advances.get(glyph, self._advances.get(self._notdef, 0)))

    def text_width(self, text: str) -> float:
        """Exact width: sum of every character's advance."""
        return sum(self.advance_width(ch) for ch in text)

    def approximate_width(self, text: str, reference: str = DEFAULT_REFERENCE_GLYPH) -> float:
        """Estimated width: one reference glyph's advance times character count."""
        return self.advance_width(reference) * len(text)
