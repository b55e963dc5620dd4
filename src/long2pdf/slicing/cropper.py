"""
Module: slicing.cropper

Purpose:
    Crop full-width strips out of the source image.

Key Functions:
    - crop_strip(): Crop one row range into an independent image

Dependencies:
    - PIL: Image manipulation
    - slicing.models: StripBounds

Used By:
    - slicing.paginator: Pagination loop
"""

from __future__ import annotations

from PIL import Image

from .models import StripBounds


def crop_strip(source: Image.Image, bounds: StripBounds) -> Image.Image:
    """
    Crop a full-width strip from the source image.

    Args:
        source: Decoded source image
        bounds: Rows to copy; bottom is clamped by the caller

    Returns:
        Cropped image (new copy, not a view)

    Raises:
        ValueError: If bounds extend past the image

    Example:
        >>> strip = crop_strip(source, StripBounds(0, 1414))
        >>> strip.size
        (1000, 1414)
    """
    if bounds.bottom > source.height:
        raise ValueError(
            f"Bounds bottom {bounds.bottom} exceeds image height {source.height}"
        )

    box = (0, bounds.top, source.width, bounds.bottom)
    # crop() is lazy on some Pillow versions; copy() detaches from the source
    return source.crop(box).copy()
