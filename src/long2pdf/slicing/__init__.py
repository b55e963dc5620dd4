"""
Module: slicing

Purpose:
    Page slicing for long images.
    Converts one tall image into A4-shaped strips with placement data.

Key Functions:
    - slice_pages(): Main entry point for slicing
    - iter_strip_bounds(): Row ranges for each page

Key Classes:
    - PageGeometry: Strip height and DPI for a run
    - PageStrip: Single page strip
    - SliceResult: Ordered pages

Dependencies:
    - PIL: Image manipulation

Used By:
    - long2pdf.controller: Conversion pipeline
"""

from .geometry import ImageGeometryError
from .models import StripBounds, PageGeometry, PageStrip, SliceResult
from .paginator import slice_pages, iter_strip_bounds

__all__ = [
    # Errors
    "ImageGeometryError",
    # Models
    "StripBounds",
    "PageGeometry",
    "PageStrip",
    "SliceResult",
    # Functions
    "slice_pages",
    "iter_strip_bounds",
]
