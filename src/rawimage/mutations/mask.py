from __future__ import annotations
import operator
from typing import TYPE_CHECKING, Final

import numpy as np
from loguru import logger
from numpy.typing import NDArray

from rawimage.exceptions import ImageShapeMismatchError
from rawimage.mutations.base import ImageMutation

if TYPE_CHECKING:
    from rawimage.container_models import RawImage
    from rawimage.container_models.base import BinaryMask

INT64_LIMIT: Final[float] = 2.0**63
FLAGS_LIMIT: Final[int] = 2**63


def mask_bits(mask: NDArray[np.floating]) -> NDArray[np.int64]:
    """
    Interpret floating-point mask pixels as integer bit patterns.

    Values are truncated toward zero. Non-finite values and values outside the
    int64 range carry no flags.
    :param mask: Mask pixel values.
    :returns: Integer bit patterns with the same shape as `mask`.
    """
    representable = np.isfinite(mask) & (np.abs(mask) < INT64_LIMIT)
    return np.trunc(np.where(representable, mask, 0.0)).astype(np.int64)


class MaskFlags(ImageMutation):
    """
    Image mutation that invalidates pixels flagged in a bitmask image.

    A pixel is set to `np.nan` when the mask value at the same position shares
    at least one bit with `flags`, i.e. `(mask & flags) != 0`. Other pixels
    remain unchanged and the shape of the image is never changed.
    """

    def __init__(self, flags: int, mask: RawImage) -> None:
        """
        Initialize the MaskFlags mutation.

        :param flags: Bitmask selecting which mask categories invalidate a pixel.
        :param mask: Image of the same shape whose pixels hold integer bitmasks.
        :raises TypeError: If `flags` is not an integer.
        :raises ValueError: If `flags` does not fit in a non-negative int64.
        """
        flags = operator.index(flags)
        if not 0 <= flags < FLAGS_LIMIT:
            raise ValueError(
                f"Mask flags should be non-negative and below 2**63, got {flags}"
            )
        self.flags = flags
        self.mask = mask

    def flagged(self) -> BinaryMask:
        """Return which pixels of the mask share a bit with `flags`."""
        return (mask_bits(self.mask.data) & self.flags) != 0

    def apply_on_image(self, image: RawImage) -> RawImage:
        """
        Apply the mask flags to the image.

        :param image: Input image to which the mask is applied.
        :return: The masked image.
        :raises ImageShapeMismatchError: If the mask shape does not match the image shape.
        """
        if self.mask.dimensions != image.dimensions:
            raise ImageShapeMismatchError(
                f"Mask shape: {tuple(self.mask.dimensions)} does not match "
                f"image shape: {tuple(image.dimensions)}"
            )
        logger.info("Applying mask flags to image")
        image.data[self.flagged()] = np.nan
        return image
