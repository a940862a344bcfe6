"""
Image Mutations Module
======================

This package contains all available `ImageMutation` implementations.

Each mutation represents a single, well-defined in-place change of the pixel
content of a `RawImage`. Mutations are designed to be composable and can be
chained together in a pipeline (e.g. `returns.pipeline.flow`).
"""

from .base import ImageMutation
from .mask import MaskFlags
from .pixels import SetAllPixels, SetPixel


__all__ = ["ImageMutation", "MaskFlags", "SetAllPixels", "SetPixel"]
