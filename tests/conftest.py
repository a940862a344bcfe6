import logging

import numpy as np
import pytest
from loguru import logger

from rawimage import RawImage
from rawimage.settings import get_settings


class PropagateHandler(logging.Handler):
    """Handler that propagates loguru records to standard logging."""

    def emit(self, record: logging.LogRecord) -> None:
        logging.getLogger(record.name).handle(record)


@pytest.fixture
def caplog(caplog):
    """Fixture to enable caplog to capture loguru logs."""
    handler_id = logger.add(PropagateHandler(), format="{message}")
    yield caplog
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make sure every test reads the settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def pixels() -> np.ndarray:
    """Row-major pixels of a 4x3 image, the value of (x, y) is `10 * y + x`."""
    return np.array(
        [0, 1, 2, 3, 10, 11, 12, 13, 20, 21, 22, 23],
        dtype=np.float32,
    )


@pytest.fixture
def raw_image(pixels: np.ndarray) -> RawImage:
    """Build a 4x3 `RawImage`."""
    return RawImage.from_pixels(width=4, height=3, pixels=pixels)


@pytest.fixture
def representative_image() -> RawImage:
    """Build an image with zeros, negative values, extreme magnitudes and NaN."""
    finfo = np.finfo(np.float32)
    return RawImage.from_pixels(
        width=3,
        height=3,
        pixels=[
            0.0,
            -0.0,
            -1.5,
            finfo.max,
            -finfo.max,
            finfo.tiny,
            finfo.smallest_subnormal,
            1234.5678,
            np.nan,
        ],
    )
