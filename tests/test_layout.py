"""Unit tests for svg_codeshot.layout."""

import pytest

from svg_codeshot.exceptions import InvalidConfigError
from svg_codeshot.fonts import FontMetrics
from svg_codeshot.layout import LayoutEngine, WidthMode
from svg_codeshot.model import CanvasDimensions, Color, StyledLine, StyledRun

FG = Color.parse("#C0C5CE")
RED = Color.parse("#BF616A")


def line(*texts: str, terminated: bool = True) -> StyledLine:
    """Build a line whose runs alternate between two colors."""
    colors = [RED, FG]
    runs = tuple(StyledRun(text, colors[i % 2]) for i, text in enumerate(texts))
    return StyledLine(runs, terminated)


class TestWidthMode:
    """Tests for width mode parsing."""

    def test_parse_accepts_values_and_members(self) -> None:
        assert WidthMode.parse("exact") is WidthMode.EXACT
        assert WidthMode.parse(WidthMode.APPROXIMATE) is WidthMode.APPROXIMATE

    def test_parse_rejects_unknown_mode(self) -> None:
        with pytest.raises(InvalidConfigError) as exc_info:
            WidthMode.parse("bogus")
        assert exc_info.value.field == "width_mode"


class TestLineLayout:
    """Tests for per-run offsets."""

    def test_offsets_are_cumulative_advances(self, metrics: FontMetrics) -> None:
        """Each run starts where the previous one ended."""
        result = LayoutEngine(metrics).layout_line(line("fn", " main", "()"))
        assert result.offsets == (0.0, 20.0, 60.0)
        assert result.width == 80.0

    def test_empty_line_has_no_offsets(self, metrics: FontMetrics) -> None:
        result = LayoutEngine(metrics).layout_line(StyledLine())
        assert result.offsets == ()
        assert result.width == 0.0

    def test_whitespace_only_line_has_width(self, metrics: FontMetrics) -> None:
        """Spaces advance the pen like any other glyph."""
        result = LayoutEngine(metrics).layout_line(line("   "))
        assert result.width == 15.0

    def test_approximate_mode_uses_reference_glyph(self, metrics: FontMetrics) -> None:
        """Wide and narrow glyphs measure the same in approximate mode."""
        exact = LayoutEngine(metrics, WidthMode.EXACT).measure("Wi")
        approximate = LayoutEngine(metrics, WidthMode.APPROXIMATE).measure("Wi")
        assert exact == 25.0
        assert approximate == 20.0

    def test_approximate_mode_with_custom_reference(self, metrics: FontMetrics) -> None:
        engine = LayoutEngine(metrics, "approximate", reference_glyph="W")
        assert engine.measure("abc") == 60.0


class TestCanvasSize:
    """Tests for canvas dimensions."""

    def test_width_is_ceiling_of_widest_line(self, metrics: FontMetrics) -> None:
        """Width comes from the widest line, rounded up."""
        lines = [line("ab"), line("Wi", " ", "W", terminated=False)]
        layout = LayoutEngine(metrics).layout(lines)
        assert layout.max_line_width == 50.0
        assert layout.dimensions.width == 50

    def test_fractional_width_rounds_up(self, font_bytes: bytes) -> None:
        """13px: 'i' advances 3.25px, so three of them need 10 pixels."""
        metrics = FontMetrics.from_bytes(font_bytes, 13)
        layout = LayoutEngine(metrics).layout([line("iii", terminated=False)])
        assert layout.max_line_width == 9.75
        assert layout.dimensions.width == 10

    def test_height_reserves_one_extra_line(self, metrics: FontMetrics) -> None:
        """Three lines at 22px line height plus padding give 88."""
        lines = [line("a"), line("b"), line("c", terminated=False)]
        layout = LayoutEngine(metrics).layout(lines)
        assert layout.line_count == 3
        assert layout.dimensions.height == 88

    def test_trailing_newline_does_not_count_as_line(self, metrics: FontMetrics) -> None:
        """'fn main() {}\\n' is one line: width 105, height 44."""
        lines = [line("fn main() {}"), StyledLine()]
        layout = LayoutEngine(metrics).layout(lines)
        assert layout.line_count == 1
        assert layout.dimensions == CanvasDimensions(105, 44)

    def test_blank_lines_count(self, metrics: FontMetrics) -> None:
        """Terminated blank lines take vertical space."""
        lines = [line("a"), StyledLine(terminated=True), line("b", terminated=False)]
        layout = LayoutEngine(metrics).layout(lines)
        assert layout.line_count == 3
        assert layout.dimensions.height == 88

    def test_empty_document_is_one_padding_line_high(self, metrics: FontMetrics) -> None:
        """Zero lines: zero width, padding height only."""
        layout = LayoutEngine(metrics).layout([])
        assert layout.lines == ()
        assert layout.dimensions == CanvasDimensions(0, 22)

    def test_width_grows_with_content(self, metrics: FontMetrics) -> None:
        """Appending text never shrinks the canvas."""
        engine = LayoutEngine(metrics)
        widths = [
            engine.layout([line("x" * n, terminated=False)]).dimensions.width
            for n in range(1, 6)
        ]
        assert widths == sorted(widths)
        assert len(set(widths)) == len(widths)


class TestOverride:
    """Tests for explicit canvas sizes."""

    def test_override_is_used_verbatim(self, metrics: FontMetrics) -> None:
        """An explicit size wins over the computed one."""
        override = CanvasDimensions(300, 200)
        layout = LayoutEngine(metrics).layout([line("ab")], override)
        assert layout.dimensions == override

    def test_override_still_positions_runs(self, metrics: FontMetrics) -> None:
        layout = LayoutEngine(metrics).layout([line("ab", "cd")], CanvasDimensions(5, 5))
        assert layout.lines[0].offsets == (0.0, 20.0)

    @pytest.mark.parametrize(
        "override",
        [CanvasDimensions(0, 100), CanvasDimensions(100, 0), CanvasDimensions(10.5, 10)],
    )
    def test_invalid_override_is_rejected(self, metrics: FontMetrics, override: CanvasDimensions) -> None:
        """Zero or fractional sizes are configuration errors."""
        with pytest.raises(InvalidConfigError) as exc_info:
            LayoutEngine(metrics).layout([line("a")], override)
        assert exc_info.value.field == "size"

    def test_negative_dimensions_cannot_be_built(self) -> None:
        with pytest.raises(InvalidConfigError):
            CanvasDimensions(-1, 10)
