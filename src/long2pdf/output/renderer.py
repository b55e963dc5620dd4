"""
Module: output.renderer

Purpose:
    Render a SliceResult to PDF using ReportLab.
    Each PageStrip becomes one A4 page with its image anchored to the
    top-left corner and scaled by the strip's DPI.

Key Functions:
    - render_to_pdf(): Render and write to disk
    - render_to_bytes(): Render to an in-memory PDF
    - write_document(): Write serialized bytes to disk

Key Classes:
    - WriteError: Exception for serialization or write failures

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling
    - slicing.models: SliceResult, PageStrip

Used By:
    - long2pdf.controller: Conversion pipeline
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from long2pdf.slicing.geometry import px_to_pt
from long2pdf.slicing.models import PageStrip, SliceResult

logger = logging.getLogger(__name__)

# Constants
A4_WIDTH_PT, A4_HEIGHT_PT = A4
DOCUMENT_SUBJECT = "Long image split into A4 pages"


class WriteError(Exception):
    """Error serializing or writing the output document."""
    pass


def _get_creator() -> str:
    """Creator string with current version number."""
    try:
        from long2pdf import __version__
        version = __version__
    except ImportError:
        version = "unknown"
    return f"long2pdf v{version}"


def render_to_pdf(
    result: SliceResult,
    output_path: Path,
    title: str,
    *,
    invariant: bool = False,
) -> int:
    """
    Render pages to a PDF file.

    Args:
        result: Pages from the slicer
        output_path: Path to write PDF (parent must exist)
        title: Document title stored in the PDF metadata
        invariant: Produce reproducible bytes (fixed date and ID)

    Returns:
        Number of bytes written

    Raises:
        WriteError: If the PDF cannot be built or written

    Example:
        >>> render_to_pdf(result, Path("out.pdf"), "Screenshot")
    """
    data = render_to_bytes(result, title, invariant=invariant)
    write_document(data, output_path)
    logger.info(f"Rendered {result.page_count} pages to {output_path}")
    return len(data)


def render_to_bytes(
    result: SliceResult,
    title: str,
    *,
    invariant: bool = False,
) -> bytes:
    """
    Serialize pages to PDF bytes.

    One A4 page per strip, created in order. Nothing touches the
    filesystem.

    Raises:
        WriteError: If ReportLab fails to build the document
    """
    if result.page_count == 0:
        logger.warning("No pages to render, creating empty PDF")

    buf = io.BytesIO()
    try:
        c = canvas.Canvas(buf, pagesize=A4, invariant=int(invariant))
        c.setTitle(title)
        c.setSubject(DOCUMENT_SUBJECT)
        c.setCreator(_get_creator())

        for page in result.pages:
            _draw_page(c, page)
            c.showPage()

        c.save()
    except Exception as e:
        raise WriteError(f"Failed to build PDF: {e}") from e

    return buf.getvalue()


def write_document(data: bytes, output_path: Path) -> None:
    """
    Write serialized document bytes to disk.

    Raises:
        WriteError: If the destination cannot be created or written
    """
    output_path = Path(output_path)
    try:
        with open(output_path, "wb") as fh:
            fh.write(data)
    except OSError as e:
        raise WriteError(f"Failed to write {output_path}: {e}") from e

    logger.debug(f"Wrote {len(data)} bytes to {output_path}")


def _draw_page(c: canvas.Canvas, page: PageStrip) -> None:
    """
    Draw one strip on the current canvas page.

    The image's left edge is the page's left edge; its bottom sits
    vertical_offset above the page bottom so the top is flush.

    Args:
        c: ReportLab canvas
        page: Strip to draw
    """
    width_pt = px_to_pt(page.width, page.dpi)
    height_pt = px_to_pt(page.height, page.dpi)
    y_pt = page.vertical_offset_pt

    c.drawImage(
        _pil_to_reader(page.image),
        0,
        y_pt,
        width=width_pt,
        height=height_pt,
    )
    logger.debug(
        f"Drew page {page.index + 1}: {width_pt:.1f}x{height_pt:.1f}pt at y={y_pt:.1f}pt"
    )


def _pil_to_reader(img: Image.Image) -> ImageReader:
    """
    Convert PIL image to ReportLab ImageReader.

    PNG keeps the pixel data lossless.
    """
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return ImageReader(buf)
