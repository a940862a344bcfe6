class ImageShapeMismatchError(ValueError):
    """Raised when pixel data or a mask does not match the shape of an image."""

    def __init__(self, message: str):
        super().__init__(message)


class PixelOutOfRangeError(IndexError):
    """Raised when a pixel is addressed outside of the image."""

    def __init__(self, message: str):
        super().__init__(message)
