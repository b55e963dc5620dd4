"""
Tests for slicing.geometry

Test Coverage:
- strip_height(): floor(W * sqrt(2))
- dpi_for_width(): W / 8.267718
- vertical_offset_mm(): top anchoring of short strips
- expected_page_count(): ceil(H / S)
- Unit conversions and zero-size rejection
"""
import math

import pytest
from reportlab.lib.pagesizes import A4

from long2pdf.slicing import geometry
from long2pdf.slicing.geometry import (
    ImageGeometryError,
    dpi_for_width,
    expected_page_count,
    mm_to_pt,
    px_to_pt,
    strip_height,
    validate_dimensions,
    vertical_offset_mm,
)


class TestStripHeight:
    """Tests for strip height derivation."""

    def test_strip_height_when_width_1000_then_1414(self):
        assert strip_height(1000) == 1414

    @pytest.mark.parametrize("width", [1, 2, 7, 100, 799, 1654, 4096])
    def test_strip_height_matches_floor_of_width_times_sqrt2(self, width):
        assert strip_height(width) == math.floor(width * math.sqrt(2))

    def test_strip_height_when_width_1_then_at_least_one_row(self):
        assert strip_height(1) == 1

    def test_strip_height_when_width_zero_then_raises(self):
        with pytest.raises(ImageGeometryError):
            strip_height(0)


class TestDpi:
    """Tests for resolution derivation."""

    def test_dpi_for_width_is_width_over_a4_inches(self):
        assert dpi_for_width(1000) == 1000 / 8.267718

    def test_dpi_spans_full_page_width(self):
        """W pixels at the derived DPI cover the A4 width."""
        # Arrange
        width = 1234

        # Act
        width_pt = px_to_pt(width, dpi_for_width(width))

        # Assert
        assert width_pt == pytest.approx(A4[0], abs=0.01)

    def test_dpi_for_width_when_zero_then_raises(self):
        with pytest.raises(ImageGeometryError):
            dpi_for_width(0)


class TestVerticalOffset:
    """Tests for top-anchored placement."""

    def test_vertical_offset_when_full_strip_then_zero(self):
        assert vertical_offset_mm(1414, 1414) == 0.0

    def test_vertical_offset_when_short_strip_then_positive(self):
        # Arrange
        nominal, actual = 1414, 172

        # Act
        offset = vertical_offset_mm(nominal, actual)

        # Assert
        assert offset > 0
        assert offset == pytest.approx(297.0 - (297.0 / nominal) * actual)

    def test_vertical_offset_keeps_strip_top_at_page_top(self):
        """offset + rendered height == page height for any strip."""
        nominal = 1414
        for actual in (1, 172, 707, 1413, 1414):
            rendered_mm = geometry.A4_HEIGHT_MM / nominal * actual
            assert vertical_offset_mm(nominal, actual) + rendered_mm == pytest.approx(297.0)

    def test_vertical_offset_when_nominal_zero_then_raises(self):
        with pytest.raises(ImageGeometryError):
            vertical_offset_mm(0, 0)


class TestPageCount:
    """Tests for expected page count."""

    @pytest.mark.parametrize(
        "height, nominal, expected",
        [
            (1414, 1414, 1),
            (1415, 1414, 2),
            (3000, 1414, 3),
            (2828, 1414, 2),
            (1, 1414, 1),
        ],
    )
    def test_expected_page_count_is_ceil(self, height, nominal, expected):
        assert expected_page_count(height, nominal) == expected


class TestConversions:
    """Tests for unit conversions and validation."""

    def test_mm_to_pt_matches_reportlab_a4(self):
        assert mm_to_pt(210.0) == pytest.approx(A4[0])
        assert mm_to_pt(297.0) == pytest.approx(A4[1])

    def test_px_to_pt_at_72_dpi_is_identity(self):
        assert px_to_pt(100, 72) == 100.0

    @pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (0, 0), (-1, 5)])
    def test_validate_dimensions_when_empty_then_raises(self, width, height):
        with pytest.raises(ImageGeometryError, match="at least 1x1"):
            validate_dimensions(width, height)

    def test_image_geometry_error_is_value_error(self):
        assert issubclass(ImageGeometryError, ValueError)
