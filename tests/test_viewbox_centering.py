"""Tests for viewBox resolution and the centering/padding assessment."""

import pytest

from conftest import make_svg
from svg_analyze.centering import assess, suggest_viewbox
from svg_analyze.config import Config
from svg_analyze.exceptions import NoContentError, ViewBoxError
from svg_analyze.geometry import BoundingBox, ViewBox
from svg_analyze.svg import parse_svg_string
from svg_analyze.viewbox import parse_viewbox, resolve_viewbox

SQUARE = ViewBox(0, 0, 100, 100)


def box(min_x: float, min_y: float, max_x: float, max_y: float) -> BoundingBox:
    return BoundingBox(min_x, min_y, max_x, max_y)


class TestParseViewBox:
    """Tests for parse_viewbox."""

    def test_four_numbers(self) -> None:
        assert parse_viewbox("0 0 100 100") == ViewBox(0, 0, 100, 100)

    def test_commas_and_extra_whitespace(self) -> None:
        assert parse_viewbox("  -5,10  200.5\t50 ") == ViewBox(-5, 10, 200.5, 50)

    def test_three_fields_fails(self) -> None:
        with pytest.raises(ViewBoxError, match="invalid viewBox format"):
            parse_viewbox("0 0 100")

    def test_non_numeric_field_fails(self) -> None:
        with pytest.raises(ViewBoxError):
            parse_viewbox("0 0 wide 100")


class TestResolveViewBox:
    """Tests for resolving the frame from root attributes."""

    def test_viewbox_attribute_wins(self) -> None:
        root = parse_svg_string(make_svg("", viewbox="10 20 30 40", width="500", height="500"))
        assert resolve_viewbox(root) == ViewBox(10, 20, 30, 40)

    def test_width_height_fallback(self) -> None:
        root = parse_svg_string(make_svg("", viewbox=None, width="64px", height="32"))
        assert resolve_viewbox(root) == ViewBox(0, 0, 64, 32)

    def test_no_frame_fails(self) -> None:
        root = parse_svg_string(make_svg("", viewbox=None))
        with pytest.raises(ViewBoxError, match="no viewBox or width/height"):
            resolve_viewbox(root)

    def test_percentage_size_is_not_a_frame(self) -> None:
        root = parse_svg_string(make_svg("", viewbox=None, width="100%", height="100%"))
        with pytest.raises(ViewBoxError):
            resolve_viewbox(root)

    def test_zero_size_viewbox_fails(self) -> None:
        root = parse_svg_string(make_svg("", viewbox="0 0 0 100"))
        with pytest.raises(ViewBoxError, match="non-positive"):
            resolve_viewbox(root)

    def test_malformed_viewbox_does_not_fall_back(self) -> None:
        """A present but malformed viewBox fails even if width/height exist."""
        root = parse_svg_string(make_svg("", viewbox="0 0 100", width="100", height="100"))
        with pytest.raises(ViewBoxError):
            resolve_viewbox(root)


class TestAssess:
    """Tests for offsets, padding and issue classification."""

    def test_small_centered_content_reports_excessive_padding(self) -> None:
        report = assess(box(45, 45, 55, 55), SQUARE)
        assert report.center_offset_x == 0
        assert report.center_offset_y == 0
        assert report.padding_left == 45
        assert report.padding_right == 45
        assert report.padding_top == 45
        assert report.padding_bottom == 45
        assert report.assessment == "excessive padding (max 45.0%)"
        assert "shifted" not in report.assessment
        assert report.has_issues

    def test_left_half_content(self) -> None:
        report = assess(box(0, 0, 50, 100), SQUARE)
        assert report.center_offset_x == -25
        assert report.center_offset_y == 0
        assert report.assessment == (
            "content shifted LEFT by 25.0%; "
            "excessive padding (max 50.0%); "
            "uneven horizontal padding (L:0.0% R:50.0%)"
        )

    def test_issue_order_is_fixed(self) -> None:
        """Horizontal, vertical, excessive, uneven-H, uneven-V."""
        report = assess(box(60, 70, 90, 95), SQUARE)
        assert report.issues == (
            "content shifted RIGHT by 25.0%",
            "content shifted DOWN by 32.5%",
            "excessive padding (max 70.0%)",
            "uneven horizontal padding (L:60.0% R:10.0%)",
            "uneven vertical padding (T:70.0% B:5.0%)",
        )

    def test_shifted_up(self) -> None:
        report = assess(box(0, 0, 100, 40), SQUARE)
        assert report.issues[0] == "content shifted UP by 30.0%"

    def test_well_padded_content_is_ok(self) -> None:
        report = assess(box(5, 5, 95, 95), SQUARE)
        assert report.assessment == "OK"
        assert not report.has_issues

    def test_thresholds_are_exclusive(self) -> None:
        """An offset of exactly 5% and a padding gap of exactly 10 pass."""
        report = assess(box(10, 5, 100, 95), SQUARE)
        assert report.center_offset_x == 5
        assert report.assessment == "OK"

    def test_non_origin_viewbox(self) -> None:
        report = assess(box(-45, 105, 45, 195), ViewBox(-50, 100, 100, 100))
        assert report.padding_left == pytest.approx(5)
        assert report.padding_bottom == pytest.approx(5)
        assert report.assessment == "OK"

    def test_custom_thresholds(self) -> None:
        config = Config(max_padding=50.0)
        assert assess(box(45, 45, 55, 55), SQUARE, config).assessment == "OK"

    def test_empty_content_fails(self) -> None:
        with pytest.raises(NoContentError, match="no parseable content"):
            assess(BoundingBox(), SQUARE)

    def test_unusable_viewbox_fails(self) -> None:
        with pytest.raises(ViewBoxError):
            assess(box(0, 0, 1, 1), ViewBox(0, 0, 100, 0))


class TestSuggestViewBox:
    """Tests for the corrected viewBox."""

    def test_wide_content_is_not_squared(self) -> None:
        content = box(10, 30, 90, 70)
        suggested = suggest_viewbox(content)
        assert suggested.width == pytest.approx(88.9, abs=0.05)
        assert suggested.height == pytest.approx(44.4, abs=0.05)
        assert str(suggested) == "5.6 27.8 88.9 44.4"

        report = assess(content, suggested)
        for padding in (
            report.padding_left,
            report.padding_right,
            report.padding_top,
            report.padding_bottom,
        ):
            assert padding == pytest.approx(5.0)

    def test_near_square_content_is_squared(self) -> None:
        content = box(0, 0, 100, 95)
        suggested = suggest_viewbox(content)
        assert suggested.width == suggested.height
        assert suggested.width == pytest.approx(100 / 0.9)
        # Content stays centered in the enlarged dimension.
        assert suggested.center_x == pytest.approx(content.center_x)
        assert suggested.center_y == pytest.approx(content.center_y)

    def test_degenerate_content_does_not_divide_by_zero(self) -> None:
        suggested = suggest_viewbox(box(0, 50, 100, 50))
        assert suggested.height == 0
        assert suggested.width == pytest.approx(100 / 0.9)

    def test_report_carries_suggestion(self) -> None:
        report = assess(box(45, 45, 55, 55), SQUARE)
        assert str(report.suggested_viewbox) == "44.4 44.4 11.1 11.1"
