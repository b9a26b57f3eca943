"""Pytest configuration and shared fixtures for svg-codeshot tests."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from pygments.style import Style
from pygments.token import Comment, Keyword, String, Token

from svg_codeshot.fonts import FontMetrics
from svg_codeshot.highlight import Theme

# Synthetic font: every printable ASCII glyph is 500 units wide except these
UNITS_PER_EM = 1000
ASCENT = 800
DESCENT = -200
LINE_GAP = 100
NOTDEF_ADVANCE = 600
ADVANCES = {" ": 250, "i": 250, "W": 1000}

# At 20px every metric above scales to an exact float
POINT_SIZE = 20.0
LINE_HEIGHT = 22.0

FAMILY = "Test Sans"


def _box_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((450, 700))
    pen.lineTo((450, 0))
    pen.closePath()
    return pen.glyph()


def build_test_font(family: str = FAMILY) -> bytes:
    """Build a small TrueType font with known metrics in memory."""
    chars = [chr(c) for c in range(0x20, 0x7F)]
    names = {c: f"uni{ord(c):04X}" for c in chars}
    glyph_order = [".notdef"] + [names[c] for c in chars]

    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord(c): names[c] for c in chars})
    fb.setupGlyf({name: _box_glyph() for name in glyph_order})

    advances = {".notdef": NOTDEF_ADVANCE}
    advances.update({names[c]: ADVANCES.get(c, 500) for c in chars})
    fb.setupHorizontalMetrics({name: (adv, 50) for name, adv in advances.items()})
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT, lineGap=LINE_GAP)
    fb.setupNameTable({"familyName": family, "styleName": "Regular"})
    fb.setupOS2(
        sTypoAscender=ASCENT,
        sTypoDescender=DESCENT,
        sTypoLineGap=LINE_GAP,
        usWinAscent=ASCENT,
        usWinDescent=-DESCENT,
    )
    fb.setupPost()

    buffer = BytesIO()
    fb.save(buffer)
    return buffer.getvalue()


class OceanStyle(Style):
    """Pygments style with the base16 ocean palette."""

    name = "ocean"
    background_color = "#2B303B"
    styles = {
        Token: "#C0C5CE",
        Keyword: "bold #BF616A",
        Comment: "italic #65737E",
        String: "#A3BE8C",
    }


@pytest.fixture(scope="session")
def font_bytes() -> bytes:
    """Return the bytes of the synthetic test font."""
    return build_test_font()


@pytest.fixture
def font_file(tmp_path: Path, font_bytes: bytes) -> Path:
    """Write the synthetic font to a temporary .ttf file."""
    path = tmp_path / "TestSans.ttf"
    path.write_bytes(font_bytes)
    return path


@pytest.fixture
def metrics(font_bytes: bytes) -> FontMetrics:
    """Metrics of the synthetic font at 20px."""
    return FontMetrics.from_bytes(font_bytes, POINT_SIZE)


@pytest.fixture
def ocean_theme() -> Theme:
    """Theme with foreground #C0C5CE on #2B303B."""
    return Theme.from_pygments(OceanStyle)


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
