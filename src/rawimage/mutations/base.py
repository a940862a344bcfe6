"""
Image Mutations Architecture
============================

This module defines how in-place pixel modifications are structured and applied.

- :class:`~rawimage.container_models.image.RawImage` holds the pixel data.
- :class:`ImageMutation` is an abstract interface for modifying a RawImage.
- Concrete mutations live in the ``mutations`` folder, grouped per concern.

High-level Design
-----------------

                        +---------------------------------+
                        |             RawImage            |
                        |---------------------------------|
                        | data : PixelData                |
                        +---------------+-----------------+
                                        |
                                        v
                    +-------------------+----------------------+
                    |              <<abstract>>                |
                    |              ImageMutation               |
                    |------------------------------------------|
                    | + apply_on_image(RawImage) -> RawImage   |
                    | + skip_predicate: bool                   |
                    +--------------------+---------------------+
                                         ^
                                         |
              +--------------------------+------------------------+
              |                          |                        |
    +---------+---------+     +----------+--------+     +---------+-------+
    |     MaskFlags     |     |    SetAllPixels   |     |     SetPixel    |
    |-------------------|     |-------------------|     |-----------------|
    | flags : int       |     | value : float     |     | x : int         |
    | mask  : RawImage  |     |                   |     | y : int         |
    |                   |     |                   |     | value : float   |
    +-------------------+     +-------------------+     +-----------------+


Example
-------

    from returns.pipeline import flow
    from returns.pointfree import bind
    from rawimage import RawImage
    from rawimage.mutations import MaskFlags, SetPixel

    image = RawImage.blank(width=10, height=10, value=1.0)
    mask = RawImage.blank(width=10, height=10)

    result = flow(
        image,
        SetPixel(x=3, y=4, value=100.0),
        bind(MaskFlags(flags=0b01, mask=mask)),
    )
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from returns.result import safe

if TYPE_CHECKING:
    from rawimage.container_models import RawImage


class ImageMutation(ABC):
    """
    Represents a single in-place mutation applied to a :class:`RawImage`.

    The shape of the image is never changed by a mutation, only its pixel
    content. After one `ImageMutation`, the resulting `RawImage` is valid
    input for another mutation, which enables chaining in pipelines.

    All parameters required for the mutation should be provided via
    the constructor.
    """

    @property
    def skip_predicate(self) -> bool:
        """
        Determines whether this mutation should be skipped.

        :return bool:
            - `True`  → skip `apply_on_image`
            - `False` → apply the mutation
        """
        return False

    @safe
    def __call__(self, image: RawImage) -> RawImage:
        """
        Callable interface used by pipelines (e.g. `flow(...)` from
        the `returns` library).

        If `skip_predicate` is `True`, the input `RawImage` is returned
        unchanged. Otherwise, `apply_on_image` is executed.

        :param image:
            The `RawImage` to be modified.
        :return Result[RawImage, Exception]:
            `Success` with the same image object passed as input, or `Failure`
            with the raised exception.
        """
        if self.skip_predicate:
            return image
        return self.apply_on_image(image)

    @abstractmethod
    def apply_on_image(self, image: RawImage) -> RawImage:
        """
        Applies the mutation to the given `RawImage` in place.

        :param image:
            The input `RawImage` to be modified.
        :return RawImage:
            The same, modified `RawImage`.
        """
