"""In-memory astronomical image buffer with masking and FITS persistence."""

from .container_models import ImageSource, PixelView, RawImage
from .exceptions import ImageShapeMismatchError, PixelOutOfRangeError


__all__ = [
    "ImageShapeMismatchError",
    "ImageSource",
    "PixelOutOfRangeError",
    "PixelView",
    "RawImage",
]
