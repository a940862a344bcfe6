from typing import Protocol, runtime_checkable

from .base import Dimensions


@runtime_checkable
class ImageSource(Protocol):
    """Shape metadata shared by every image representation in the pipeline."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    @property
    def dimensions(self) -> Dimensions: ...

    @property
    def pixels_per_image(self) -> int: ...
