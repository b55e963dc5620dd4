"""Top-level package for long2pdf.

Slices a long image into A4-shaped strips and writes them as a PDF.

Provides subpackages:
- long2pdf.loading – image decoding
- long2pdf.slicing – page geometry and strip slicing
- long2pdf.output – PDF rendering
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text().splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import version as pkg_version, PackageNotFoundError
    try:
        return pkg_version("long2pdf")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
