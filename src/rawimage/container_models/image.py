"""Image buffer architecture.

This module defines the in-memory representation of a single astronomical
image as it is prepared for the moving-object-detection pipeline.

Architecture
------------
::

    +------------------------------------------------+
    |                   RawImage                     |
    |------------------------------------------------|
    | data             : PixelData (float32, H x W)  |
    | width            : int (columns)               |
    | height           : int (rows)                  |
    | dimensions       : Pair(width, height)         |
    | pixels_per_image : int                         |
    +------------------------------------------------+
    | from_pixels(width, height, pixels) -> cls      |
    | from_file(path) -> IOResult[cls]               |
    | get_pixels() -> FloatArray1D (copy)            |
    | get_data_ref() -> PixelView                    |
    | apply_mask(flags, mask)                        |
    | set_all_pix(value)                             |
    | set_pixel(x, y, value)                         |
    | save_to_file(path) -> IOResult[Path]           |
    +------------------------------------------------+

- Pixels are stored row-major, the flat index of ``(x, y)`` is ``y * width + x``.
- The shape is fixed at construction; only pixel content is mutated in place.
- Masked pixels hold ``np.nan`` instead of being removed from the buffer.
- Compared by data equality (NaN-aware).
"""

from __future__ import annotations
from collections.abc import Sequence
import operator
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict
from returns.io import IOResult

from rawimage.container_models.base import (
    BinaryMask,
    Dimensions,
    FloatArray1D,
    Pair,
    PixelData,
)
from rawimage.container_models.pixel_view import PixelView
from rawimage.exceptions import ImageShapeMismatchError, PixelOutOfRangeError
from rawimage.mutations import MaskFlags, SetAllPixels, SetPixel


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(
            f"Image size should be positive, got width={width}, height={height}"
        )


class RawImage(BaseModel):
    data: PixelData

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        extra="forbid",
        regex_engine="rust-regex",
    )

    @classmethod
    def from_pixels(
        cls, width: int, height: int, pixels: Sequence[float] | NDArray
    ) -> RawImage:
        """
        Build an image from a flat, row-major pixel sequence.

        The pixels are copied into storage owned by the new image.

        :param width: Number of columns, must be positive.
        :param height: Number of rows, must be positive.
        :param pixels: Exactly `width * height` values in row-major order.
        :returns: A new `RawImage`.
        :raises ValueError: If `width` or `height` is not positive.
        :raises ImageShapeMismatchError: If the number of pixels is not `width * height`.
        """
        _check_size(width, height)
        flat = np.asarray(pixels, dtype=np.float32).reshape(-1)
        if flat.size != width * height:
            raise ImageShapeMismatchError(
                f"Expected {width * height} pixels for a {width}x{height} image, "
                f"but got {flat.size}"
            )
        return cls(data=flat.reshape(height, width))

    @classmethod
    def blank(cls, width: int, height: int, value: float = 0.0) -> RawImage:
        """Build a `width` x `height` image with every pixel set to `value`."""
        _check_size(width, height)
        return cls(data=np.full((height, width), value))

    @classmethod
    def from_file(cls, path: Path) -> IOResult[RawImage, Exception]:
        """
        Load an image from a FITS file.

        :param path: The path to the FITS file.
        :returns: `IOSuccess(RawImage)` or `IOFailure(error)`.
        """
        from rawimage.parsers import load_fits

        return load_fits(path)

    @property
    def width(self) -> int:
        """Return the width (number of columns) of the image."""
        return self.data.shape[1]

    @property
    def height(self) -> int:
        """Return the height (number of rows) of the image."""
        return self.data.shape[0]

    @property
    def dimensions(self) -> Dimensions:
        """Return the shape as `(width, height)`, the FITS `NAXIS1`, `NAXIS2` order."""
        return Pair(self.width, self.height)

    @property
    def pixels_per_image(self) -> int:
        return self.width * self.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RawImage):
            return NotImplemented
        return np.array_equal(self.data, other.data, equal_nan=True)

    @property
    def valid_mask(self) -> BinaryMask:
        """Mask of the pixels holding data."""
        valid_mask = ~np.isnan(self.data)
        valid_mask.setflags(write=False)
        return valid_mask

    def get_pixels(self) -> FloatArray1D:
        """Return a row-major copy of all pixels."""
        return self.data.flatten()

    def get_data_ref(self) -> PixelView:
        """Return a non-owning view onto the pixel storage."""
        return PixelView.of(self)

    def check_bounds(self, x: int, y: int) -> Pair[int]:
        """
        Check that `(x, y)` addresses a pixel of this image.

        :returns: The coordinates as plain ints, safe to use as array indices.
        :raises TypeError: If `x` or `y` is not an integer.
        :raises PixelOutOfRangeError: If `x` or `y` falls outside the image.
        """
        x, y = operator.index(x), operator.index(y)
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise PixelOutOfRangeError(
                f"Pixel ({x}, {y}) is outside the image of size "
                f"{self.width}x{self.height}"
            )
        return Pair(x, y)

    def get_pixel(self, x: int, y: int) -> float:
        x, y = self.check_bounds(x, y)
        return float(self.data[y, x])

    def pixel_has_data(self, x: int, y: int) -> bool:
        x, y = self.check_bounds(x, y)
        return bool(self.valid_mask[y, x])

    def compute_bounds(self) -> Pair[float]:
        """
        Compute the minimum and maximum over the pixels holding data.

        :returns: `Pair(min, max)`.
        :raises ValueError: If no pixel holds data.
        """
        valid = self.data[self.valid_mask]
        if valid.size == 0:
            raise ValueError("Image has no valid pixels to compute bounds from")
        return Pair(float(valid.min()), float(valid.max()))

    def apply_mask(self, flags: int, mask: RawImage) -> RawImage:
        """
        Invalidate every pixel whose mask value shares a bit with `flags`.

        :param flags: Bitmask of the mask categories to apply.
        :param mask: Image of the same shape holding integer bitmasks.
        :returns: This image, masked in place.
        :raises ImageShapeMismatchError: If the mask shape differs from the image shape.
        :raises ValueError: If `flags` is negative or does not fit in an int64.
        """
        return MaskFlags(flags=flags, mask=mask).apply_on_image(self)

    def set_all_pix(self, value: float) -> RawImage:
        return SetAllPixels(value=value).apply_on_image(self)

    def set_pixel(self, x: int, y: int, value: float) -> RawImage:
        return SetPixel(x=x, y=y, value=value).apply_on_image(self)

    def save_to_file(self, output_path: Path) -> IOResult[Path, Exception]:
        """
        Save the image to a FITS file.

        The image itself is never modified, also not when writing fails.
        :param output_path: The path where the file should be written.
        :returns: `IOSuccess(path)` or `IOFailure(error)`.
        """
        from rawimage.parsers import save_fits

        return save_fits(self, output_path)

