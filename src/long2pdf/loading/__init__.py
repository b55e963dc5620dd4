"""
Module: loading

Purpose:
    Source image decoding.

Key Functions:
    - load_image(): Decode an image file to 8-bit RGB

Key Classes:
    - DecodeError: Input could not be opened or decoded
"""

from .decoder import load_image, DecodeError

__all__ = [
    "load_image",
    "DecodeError",
]
