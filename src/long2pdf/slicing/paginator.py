"""
Module: slicing.paginator

Purpose:
    Cut the source image into A4-shaped strips, one per page.

Key Functions:
    - slice_pages(): Main pagination function
    - iter_strip_bounds(): Row ranges covered by each strip

Algorithm:
    1. S = floor(W * sqrt(2)), DPI = W / 8.267718 (computed once)
    2. Starting at row 0, crop rows [cursor, cursor + S) clamped to H
    3. Offset each strip so it sits flush against the page top
    4. Advance cursor by S until it reaches H

Dependencies:
    - PIL: Image type
    - slicing.geometry: Formulas
    - slicing.cropper: Strip cropping

Used By:
    - controller: Conversion pipeline
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from PIL import Image

from . import geometry
from .cropper import crop_strip
from .models import PageGeometry, PageStrip, SliceResult, StripBounds

logger = logging.getLogger(__name__)


def iter_strip_bounds(height: int, strip_height: int) -> Iterator[StripBounds]:
    """
    Yield the row range of every strip, top to bottom.

    The cursor always advances by the nominal strip height; only the
    final range may be shorter.

    Example:
        >>> [(b.top, b.bottom) for b in iter_strip_bounds(3000, 1414)]
        [(0, 1414), (1414, 2828), (2828, 3000)]
    """
    if strip_height < 1:
        raise geometry.ImageGeometryError(f"strip height must be positive: {strip_height}")

    cursor = 0
    while cursor < height:
        yield StripBounds(top=cursor, bottom=min(cursor + strip_height, height))
        cursor += strip_height


def slice_pages(
    source: Image.Image,
    page_geometry: Optional[PageGeometry] = None,
) -> SliceResult:
    """
    Slice a decoded image into page strips.

    Args:
        source: Decoded RGB image
        page_geometry: Precomputed geometry (default: derived from width)

    Returns:
        SliceResult with one PageStrip per page, in source order

    Raises:
        ImageGeometryError: If the image has zero width or height

    Example:
        >>> result = slice_pages(Image.new("RGB", (1000, 3000)))
        >>> [p.height for p in result.pages]
        [1414, 1414, 172]
    """
    width, height = source.size
    geometry.validate_dimensions(width, height)

    if page_geometry is None:
        page_geometry = PageGeometry.for_width(width)
    elif page_geometry.source_width != width:
        raise ValueError(
            f"Geometry computed for width {page_geometry.source_width}, "
            f"image is {width}px wide"
        )

    logger.debug(
        f"Strip height {page_geometry.strip_height}px, "
        f"{page_geometry.dpi:.2f} DPI for {width}x{height} source"
    )

    pages: List[PageStrip] = []
    for index, bounds in enumerate(iter_strip_bounds(height, page_geometry.strip_height)):
        strip = crop_strip(source, bounds)
        offset = geometry.vertical_offset_mm(page_geometry.strip_height, strip.height)

        pages.append(PageStrip(
            index=index,
            bounds=bounds,
            image=strip,
            dpi=page_geometry.dpi,
            vertical_offset_mm=offset,
        ))
        logger.debug(
            f"Page {index + 1}: rows {bounds.top}-{bounds.bottom}, "
            f"offset {offset:.2f}mm"
        )

    logger.info(f"Sliced {width}x{height} image onto {len(pages)} pages")

    return SliceResult(
        pages=tuple(pages),
        geometry=page_geometry,
        source_size=(width, height),
    )
