"""
Module: controller

Purpose:
    Orchestrate the complete conversion pipeline.
    Decode → Slice → Render → Write

Key Functions:
    - convert(): Main entry point for converting one image

Key Classes:
    - ConvertResult: Conversion summary
    - ConversionError: Exception for conversion failures

Dependencies:
    - long2pdf.loading: Image decoding
    - long2pdf.slicing: Page slicing
    - long2pdf.output: PDF rendering

Used By:
    - long2pdf.cli: Command-line entry point
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from .config import ConvertConfig
from .loading import load_image, DecodeError
from .slicing import slice_pages, ImageGeometryError
from .output import render_to_pdf, WriteError

logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """Error during conversion pipeline."""
    pass


@dataclass(frozen=True)
class ConvertResult:
    """
    Conversion summary (immutable).

    Attributes:
        output_path: Path of the written PDF
        page_count: Number of pages generated
        source_size: (width, height) of the decoded image
        strip_height: Pixel rows per full page
        dpi: Resolution applied to every page
        bytes_written: Size of the PDF
        elapsed_seconds: Wall time for the run
    """
    output_path: Path
    page_count: int
    source_size: Tuple[int, int]
    strip_height: int
    dpi: float
    bytes_written: int
    elapsed_seconds: float


def convert(config: ConvertConfig) -> ConvertResult:
    """
    Convert a long image into an A4 PDF.

    Pipeline:
    1. Decode the input image to RGB
    2. Slice it into page strips
    3. Render strips to PDF and write the file

    The output file is only opened after the input has been decoded
    and sliced.

    Args:
        config: Conversion configuration

    Returns:
        ConvertResult with page count and geometry

    Raises:
        ConversionError: If any step fails

    Example:
        >>> result = convert(ConvertConfig(Path("in.png"), Path("out.pdf"), "Title"))
        >>> print(f"Generated {result.page_count} pages")
    """
    start_time = time.perf_counter()
    logger.info(f"Converting {config.input_path} -> {config.output_path}")

    # 1. Decode
    try:
        source = load_image(config.input_path)
    except DecodeError as e:
        raise ConversionError(f"Failed to load image: {e}") from e

    # 2. Slice
    try:
        result = slice_pages(source)
    except ImageGeometryError as e:
        raise ConversionError(f"Cannot paginate image: {e}") from e

    # 3. Render and write
    try:
        bytes_written = render_to_pdf(
            result,
            config.output_path,
            config.doc_title,
            invariant=config.invariant,
        )
    except WriteError as e:
        raise ConversionError(f"Failed to write PDF: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Conversion completed in {elapsed:.2f}s")

    return ConvertResult(
        output_path=config.output_path,
        page_count=result.page_count,
        source_size=result.source_size,
        strip_height=result.geometry.strip_height,
        dpi=result.geometry.dpi,
        bytes_written=bytes_written,
        elapsed_seconds=elapsed,
    )
