"""
File parsing and serialization of images.

Images are persisted in the FITS format through `astropy.io.fits`. Each file
holds a single primary HDU with 32-bit floating-point pixels (`BITPIX = -32`)
of shape `NAXIS1 = width`, `NAXIS2 = height`. Pixel values, including the NaN
sentinel of masked pixels, round-trip bit for bit.

Railway Integration
-------------------
The load and save functions return `IOResult` containers and are decorated with
logging functionality, so failures are propagated to the caller instead of being
raised or retried.
"""

from .fits import load_fits, save_fits, to_hdu_list

__all__ = (
    "load_fits",
    "save_fits",
    "to_hdu_list",
)
