"""
Module: cli

Purpose:
    Command-line entry point: convert a long image to an A4-page PDF.

Usage:
    long2pdf -i long.png -o long.pdf -d "Document title"

Exit codes:
    0 on success, 1 on conversion failure, 2 on bad arguments.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import ConvertConfig
from .controller import convert, ConversionError

logger = logging.getLogger("long2pdf")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="long2pdf",
        description="Convert long image to A4-page PDF",
    )
    parser.add_argument("--input", "-i", type=Path, required=True,
                        help="the path of the input image")
    parser.add_argument("--output", "-o", type=Path, required=True,
                        help="the path of the output PDF")
    parser.add_argument("--doc-title", "-d", required=True,
                        help="the title of the PDF document")
    parser.add_argument("--invariant", action="store_true",
                        help="write reproducible PDF bytes (fixed date and ID)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="log per-page details")
    parser.add_argument("--version", "-V", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    config = ConvertConfig(
        input_path=args.input,
        output_path=args.output,
        doc_title=args.doc_title,
        invariant=args.invariant,
    )

    try:
        result = convert(config)
    except ConversionError as e:
        logger.error(f"error: {e}")
        return 1

    logger.debug(
        f"{result.page_count} pages, {result.bytes_written} bytes, "
        f"{result.elapsed_seconds:.2f}s"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
