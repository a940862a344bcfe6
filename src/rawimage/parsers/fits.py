from __future__ import annotations
from pathlib import Path

import numpy as np
from astropy.io import fits
from returns.io import impure_safe

from rawimage.container_models.image import RawImage
from rawimage.settings import get_settings
from rawimage.utils.logger import log_railway_function

# FITS stores big-endian IEEE 754 single precision (BITPIX = -32)
FITS_FLOAT32 = np.dtype(">f4")


def to_hdu_list(image: RawImage) -> fits.HDUList:
    """
    Convert a `RawImage` to a single primary HDU.

    The pixels are copied into a big-endian buffer, so writing never touches the
    storage of `image`. `NAXIS1` holds the width and `NAXIS2` the height.
    """
    hdu = fits.PrimaryHDU(data=np.array(image.data, dtype=FITS_FLOAT32))
    return fits.HDUList([hdu])


def _first_image_data(hdu_list: fits.HDUList) -> np.ndarray:
    """Return the data of the first HDU carrying a 2D image."""
    for hdu in hdu_list:
        if hdu.is_image and hdu.data is not None and hdu.data.ndim == 2:
            return hdu.data
    raise ValueError("No HDU with two-dimensional image data found")


@log_railway_function(
    "Failed to write FITS file {output_path}",
    "Successfully written FITS file {output_path}",
)
@impure_safe
def save_fits(image: RawImage, output_path: Path) -> Path:
    """
    Save a `RawImage` to a FITS file.

    :param image: The image to save, it is not modified.
    :param output_path: Where to save the file.
    :returns: `IOSuccess(path)` on success, `IOFailure(Exception)` on error.
    """
    settings = get_settings()
    to_hdu_list(image).writeto(
        output_path,
        overwrite=settings.overwrite,
        checksum=settings.checksum,
        output_verify=settings.output_verify,
    )
    return output_path


@log_railway_function(
    "Failed to load FITS file {fits_file}",
    "Successfully loaded FITS file {fits_file}",
)
@impure_safe
def load_fits(fits_file: Path) -> RawImage:
    """
    Load the first two-dimensional image of a FITS file.

    :param fits_file: The path to the FITS file.
    :returns: `IOSuccess(RawImage)` on success, `IOFailure(Exception)` on error.
    """
    with fits.open(fits_file, memmap=False) as hdu_list:
        return RawImage(data=_first_image_data(hdu_list))
