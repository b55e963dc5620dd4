"""
Module: output

Purpose:
    PDF rendering for sliced pages using ReportLab.

Key Functions:
    - render_to_pdf(): Render pages and write the PDF
    - render_to_bytes(): Render pages to in-memory PDF bytes
    - write_document(): Write PDF bytes to disk
"""

from .renderer import render_to_pdf, render_to_bytes, write_document, WriteError

__all__ = [
    "render_to_pdf",
    "render_to_bytes",
    "write_document",
    "WriteError",
]
