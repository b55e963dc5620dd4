"""
Module: slicing.models

Purpose:
    Data models for page slicing.
    Immutable dataclasses representing row ranges, page geometry,
    emitted page strips, and the ordered result of a run.

Key Classes:
    - StripBounds: Half-open row range [top, bottom) of the source
    - PageGeometry: Per-run constants (strip height, DPI, page size)
    - PageStrip: One output page (cropped image + placement)
    - SliceResult: Ordered pages of a run

Dependencies:
    - PIL: Image type
    - dataclasses (std)

Used By:
    - slicing.paginator: Creates PageStrips
    - output.renderer: Draws PageStrips
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from PIL import Image

from . import geometry


@dataclass(frozen=True, slots=True)
class StripBounds:
    """
    Row range of the source image covered by one strip.

    The range is [top, bottom): top inclusive, bottom exclusive.
    Strips always span the full source width.

    Invariants:
        - top >= 0
        - bottom > top

    Example:
        >>> bounds = StripBounds(top=1414, bottom=2828)
        >>> bounds.height
        1414
    """

    top: int
    bottom: int

    def __post_init__(self) -> None:
        """Validate bounds on construction."""
        if self.top < 0:
            raise ValueError(f"top must be >= 0: {self.top}")
        if self.bottom <= self.top:
            raise ValueError(f"bottom must be > top: {self.bottom} <= {self.top}")

    @property
    def height(self) -> int:
        """Number of rows in the range."""
        return self.bottom - self.top

    def overlaps(self, other: StripBounds) -> bool:
        """Check if two ranges share at least one row."""
        return self.top < other.bottom and other.top < self.bottom


@dataclass(frozen=True)
class PageGeometry:
    """
    Derived page constants for a single run (immutable).

    Attributes:
        source_width: Width of the source image in pixels
        strip_height: Nominal strip height in pixels (S)
        dpi: Resolution applied to every page
        page_width_mm: Physical page width
        page_height_mm: Physical page height

    Example:
        >>> geo = PageGeometry.for_width(1000)
        >>> geo.strip_height
        1414
    """

    source_width: int
    strip_height: int
    dpi: float
    page_width_mm: float = geometry.A4_WIDTH_MM
    page_height_mm: float = geometry.A4_HEIGHT_MM

    def __post_init__(self) -> None:
        if self.source_width < 1:
            raise geometry.ImageGeometryError(
                f"source_width must be positive: {self.source_width}"
            )
        if self.strip_height < 1:
            raise geometry.ImageGeometryError(
                f"strip_height must be positive: {self.strip_height}"
            )
        if self.dpi <= 0:
            raise geometry.ImageGeometryError(f"dpi must be positive: {self.dpi}")

    @classmethod
    def for_width(cls, width: int) -> PageGeometry:
        """Compute strip height and DPI once for a source width."""
        return cls(
            source_width=width,
            strip_height=geometry.strip_height(width),
            dpi=geometry.dpi_for_width(width),
        )

    @property
    def page_width_pt(self) -> float:
        return geometry.mm_to_pt(self.page_width_mm)

    @property
    def page_height_pt(self) -> float:
        return geometry.mm_to_pt(self.page_height_mm)

    def strip_count(self, height: int) -> int:
        """Pages needed for a source of `height` rows."""
        return geometry.expected_page_count(height, self.strip_height)


@dataclass(frozen=True)
class PageStrip:
    """
    One output page (immutable).

    Attributes:
        index: Page number (0-indexed)
        bounds: Source rows copied into this page
        image: Independent RGB copy of those rows
        dpi: Resolution used to scale the image onto the page
        vertical_offset_mm: Distance from page bottom to image bottom
    """

    index: int
    bounds: StripBounds
    image: Image.Image
    dpi: float
    vertical_offset_mm: float

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def is_full(self) -> bool:
        """True when the strip fills the page (offset is zero)."""
        return self.vertical_offset_mm == 0

    @property
    def vertical_offset_pt(self) -> float:
        return geometry.mm_to_pt(self.vertical_offset_mm)


@dataclass(frozen=True)
class SliceResult:
    """
    Ordered pages produced from one source image.

    Attributes:
        pages: Tuple of PageStrips in source order
        geometry: Page geometry shared by every page
        source_size: (width, height) of the source image

    Example:
        >>> result.page_count
        3
    """

    pages: tuple[PageStrip, ...]
    geometry: PageGeometry
    source_size: Tuple[int, int]

    @property
    def page_count(self) -> int:
        """Number of pages in the document."""
        return len(self.pages)

    @property
    def covered_rows(self) -> int:
        """Total source rows placed across all pages."""
        return sum(page.bounds.height for page in self.pages)
