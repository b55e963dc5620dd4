"""
Module: config

Purpose:
    Configuration dataclass for a single conversion run. Immutable
    configuration with validation on construction.

Key Classes:
    - ConvertConfig: Input, output and title for one run

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - long2pdf.controller: Conversion pipeline
    - long2pdf.cli: Argument handling
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ConvertConfig:
    """
    Configuration for converting one image (immutable).

    Page size (A4) and color model (RGB8) are fixed and not part of
    the configuration.

    Attributes:
        input_path: Source image file
        output_path: Destination PDF file
        doc_title: Title stored in the PDF metadata
        invariant: Produce byte-for-byte reproducible PDFs

    Example:
        >>> config = ConvertConfig(
        ...     input_path=Path("long.png"),
        ...     output_path=Path("long.pdf"),
        ...     doc_title="Long screenshot",
        ... )
    """

    input_path: Path
    output_path: Path
    doc_title: str
    invariant: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        # Accept plain strings from callers; Path("") normalizes to "."
        object.__setattr__(self, "input_path", Path(self.input_path))
        object.__setattr__(self, "output_path", Path(self.output_path))

        if self.input_path == Path("."):
            raise ValueError("input_path must not be empty")
        if self.output_path == Path("."):
            raise ValueError("output_path must not be empty")
        if self.doc_title is None:
            raise ValueError("doc_title must be a string")
