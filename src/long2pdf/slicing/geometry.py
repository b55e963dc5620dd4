"""
Module: slicing.geometry

Purpose:
    Page geometry for slicing a long image onto A4 pages.
    All formulas that map source pixels onto the physical page live here.

Key Functions:
    - strip_height(): Pixel rows per page for a given source width
    - dpi_for_width(): Resolution that spans the source width across A4
    - vertical_offset_mm(): Bottom offset that top-anchors a strip
    - expected_page_count(): Number of strips for a source height
    - validate_dimensions(): Reject zero-sized images

Dependencies:
    - math (std)

Used By:
    - slicing.models: PageGeometry
    - slicing.paginator: Pagination loop
"""

from __future__ import annotations

import math

# A4 page, portrait
A4_WIDTH_MM = 210.0
A4_HEIGHT_MM = 297.0
A4_WIDTH_INCH = 8.267718

MM_PER_INCH = 25.4
POINTS_PER_INCH = 72.0

PAGE_ASPECT_RATIO = math.sqrt(2)


class ImageGeometryError(ValueError):
    """Source image dimensions cannot be paginated."""
    pass


def validate_dimensions(width: int, height: int) -> None:
    """
    Check that an image has at least one pixel in each direction.

    Args:
        width: Source width in pixels
        height: Source height in pixels

    Raises:
        ImageGeometryError: If either dimension is < 1
    """
    if width < 1 or height < 1:
        raise ImageGeometryError(
            f"Image must be at least 1x1 pixels, got {width}x{height}"
        )


def strip_height(width: int) -> int:
    """
    Pixel height of one page strip.

    A strip rendered across the full page width must be sqrt(2) times
    taller than wide to fill the A4 page without distortion.

    Args:
        width: Source width in pixels (>= 1)

    Returns:
        floor(width * sqrt(2))

    Example:
        >>> strip_height(1000)
        1414
    """
    validate_dimensions(width, 1)
    return math.floor(width * PAGE_ASPECT_RATIO)


def dpi_for_width(width: int) -> float:
    """
    Resolution at which `width` pixels span the A4 page width.

    Example:
        >>> round(dpi_for_width(1654), 2)
        200.06
    """
    validate_dimensions(width, 1)
    return width / A4_WIDTH_INCH


def vertical_offset_mm(nominal_height: int, actual_height: int) -> float:
    """
    Distance from the page bottom edge to the bottom of a placed strip.

    A full strip fills the page (offset 0). A shorter final strip keeps
    its native scale and sits flush against the page top.

    Args:
        nominal_height: Full strip height in pixels (S)
        actual_height: Rows actually present in this strip

    Returns:
        PH - (PH / S) * actual_height, in millimetres
    """
    if nominal_height < 1:
        raise ImageGeometryError(f"strip height must be positive: {nominal_height}")
    # Same as PH - (PH / S) * h, but exactly 0.0 for a full strip
    return A4_HEIGHT_MM * (nominal_height - actual_height) / nominal_height


def expected_page_count(height: int, nominal_height: int) -> int:
    """Number of strips needed to cover `height` rows (ceil(H / S))."""
    if nominal_height < 1:
        raise ImageGeometryError(f"strip height must be positive: {nominal_height}")
    return -(-height // nominal_height)


def mm_to_pt(value_mm: float) -> float:
    """Convert millimetres to PDF points (1/72 inch)."""
    return value_mm * POINTS_PER_INCH / MM_PER_INCH


def px_to_pt(px: float, dpi: float) -> float:
    """
    Convert pixels to PDF points.

    PDF points are 1/72 inch.
    """
    return px * POINTS_PER_INCH / dpi
