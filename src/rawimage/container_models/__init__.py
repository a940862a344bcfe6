"""
Data container models for the image preparation pipeline.

This module provides the Pydantic-based `RawImage` model, which holds the pixel
data of a single image together with the shape metadata required by every
downstream stage, and the `ImageSource` protocol describing that shape metadata
for any image representation.

Notes
-----
The shape of a `RawImage` is fixed at construction. Its pixel content is mutated
in place by the mutations in :mod:`rawimage.mutations`.
"""

from .image import RawImage
from .pixel_view import PixelView
from .protocols import ImageSource


__all__ = ["ImageSource", "PixelView", "RawImage"]
