"""
Module: loading.decoder

Purpose:
    Decode the source image file into an 8-bit RGB Pillow image.
    Any other color model is converted to RGB before slicing.

Key Functions:
    - load_image(): Open, fully decode and convert to RGB

Key Classes:
    - DecodeError: Exception for unreadable or undecodable input

Dependencies:
    - PIL: Image decoding

Used By:
    - long2pdf.controller: Conversion pipeline
"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

RGB_MODE = "RGB"


class DecodeError(Exception):
    """Error opening or decoding the source image."""
    pass


def load_image(path: Path) -> Image.Image:
    """
    Decode an image file to 8-bit RGB.

    The file handle is closed before returning; the returned image
    holds its own pixel data.

    Args:
        path: Path to the source image

    Returns:
        Decoded image in mode "RGB"

    Raises:
        DecodeError: If the file is missing, unreadable, or not an image
    """
    path = Path(path)
    if not path.is_file():
        raise DecodeError(f"Input image not found: {path}")

    try:
        with Image.open(path) as img:
            img.load()
            original_mode = img.mode
            rgb = _to_rgb(img)
    except UnidentifiedImageError as e:
        raise DecodeError(f"Unrecognized image format: {path}") from e
    except Image.DecompressionBombError as e:
        raise DecodeError(f"Image too large to decode safely: {path}: {e}") from e
    except (OSError, SyntaxError) as e:
        # Pillow reports corrupt PNG chunks as SyntaxError
        raise DecodeError(f"Failed to read image {path}: {e}") from e

    logger.info(f"Decoded {path.name}: {rgb.width}x{rgb.height} ({original_mode})")
    return rgb


def _to_rgb(img: Image.Image) -> Image.Image:
    """
    Convert to 8-bit RGB, always returning a detached copy.

    Alpha is discarded; transparent areas keep their underlying color.
    """
    if img.mode == RGB_MODE:
        return img.copy()

    if "A" in img.getbands() or "transparency" in img.info:
        logger.warning(f"Dropping alpha channel from {img.mode} image")

    if img.mode.startswith("I;16"):
        # 16-bit grayscale: scale down to 8 bits before expanding to RGB
        img = img.convert("I").point(lambda v: v * (1 / 256)).convert("L")

    return img.convert(RGB_MODE)
