from __future__ import annotations
import operator
from typing import TYPE_CHECKING

from loguru import logger

from rawimage.mutations.base import ImageMutation

if TYPE_CHECKING:
    from rawimage.container_models import RawImage


class SetAllPixels(ImageMutation):
    """Image mutation that overwrites every pixel with a single value."""

    def __init__(self, value: float) -> None:
        self.value = value

    def apply_on_image(self, image: RawImage) -> RawImage:
        logger.info(f"Setting all {image.pixels_per_image} pixels to {self.value}")
        image.data.fill(self.value)
        return image


class SetPixel(ImageMutation):
    """
    Image mutation that writes a single pixel.

    Coordinates outside of the image are rejected rather than clamped or
    wrapped around.
    """

    def __init__(self, x: int, y: int, value: float) -> None:
        """:raises TypeError: If `x` or `y` is not an integer."""
        self.x = operator.index(x)
        self.y = operator.index(y)
        self.value = value

    def apply_on_image(self, image: RawImage) -> RawImage:
        """
        Write `value` at `(x, y)`.

        :raises PixelOutOfRangeError: If `(x, y)` falls outside of the image.
        """
        x, y = image.check_bounds(self.x, self.y)
        logger.debug(f"Setting pixel ({x}, {y}) to {self.value}")
        image.data[y, x] = self.value
        return image
