from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np
from numpy.typing import DTypeLike, NDArray

if TYPE_CHECKING:
    from .image import RawImage


@dataclass(frozen=True, slots=True)
class PixelView:
    """
    Non-owning, flat (row-major) window onto the pixel storage of a `RawImage`.

    The view shares memory with its owner: writes through the view are visible
    through every accessor of the owner and vice versa. The view keeps a
    reference to the owner, so the storage it points to stays alive for as long
    as the view does. Concurrent use of the view and the owner's mutators must
    be synchronised by the caller.
    """

    owner: RawImage
    buffer: NDArray[np.float32]

    @classmethod
    def of(cls, owner: RawImage) -> PixelView:
        buffer = owner.data.reshape(-1)
        if not np.shares_memory(buffer, owner.data):
            raise ValueError("Pixel storage is not contiguous, cannot create a view")
        return cls(owner=owner, buffer=buffer)

    def __len__(self) -> int:
        return self.buffer.size

    def __getitem__(self, index: Any) -> Any:
        return self.buffer[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self.buffer[index] = value

    def __array__(self, dtype: DTypeLike = None, copy: bool | None = None) -> NDArray:
        if copy:
            return np.array(self.buffer, dtype=dtype, copy=True)
        if dtype is None or np.dtype(dtype) == self.buffer.dtype:
            return self.buffer
        if copy is False:
            raise ValueError(
                f"Unable to view {self.buffer.dtype} pixels as {np.dtype(dtype)} "
                "without a copy"
            )
        return self.buffer.astype(dtype)
