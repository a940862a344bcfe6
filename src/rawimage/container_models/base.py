from collections.abc import Sequence
from functools import partial
from typing import Annotated, NamedTuple

from numpy import array, bool_, float32, floating, number
from numpy.typing import DTypeLike, NDArray
from pydantic import AfterValidator, BeforeValidator, PlainSerializer


class Pair[T](NamedTuple):
    x: T
    y: T


def serialize_ndarray[T: number](array_: NDArray[T]) -> list[T]:
    """Serialize numpy array to a Python list for JSON serialization."""
    return array_.tolist()


def coerce_to_array[T: number](
    dtype: DTypeLike, value: Sequence[T] | NDArray[T]
) -> NDArray[T]:
    """
    Coerce input to an owned, C-contiguous numpy array of `dtype`.

    The input is always copied, so the resulting array never aliases storage
    held by the caller.
    """
    try:
        return array(value, dtype=dtype, order="C", copy=True)
    except OverflowError as ofe:
        raise ValueError("Array's value(s) out of range") from ofe


def validate_shape(n_dims: int, value: NDArray) -> NDArray:
    if (array_dims := len(value.shape)) != n_dims:
        raise ValueError(
            f"Array shape mismatch, expected {n_dims} dimension(s), but got {array_dims}"
        )
    return value


def validate_not_empty(value: NDArray) -> NDArray:
    if 0 in value.shape:
        raise ValueError(f"Array must not be empty, got shape {value.shape}")
    return value


type Float32Array = Annotated[
    NDArray[float32],
    BeforeValidator(partial(coerce_to_array, float32)),
    PlainSerializer(serialize_ndarray),
]

type FloatArray1D = NDArray[floating]
type Float32Array2D = Annotated[
    Float32Array,
    AfterValidator(partial(validate_shape, 2)),
    AfterValidator(validate_not_empty),
]
type BinaryMask = NDArray[bool_]

# Semantic context
type PixelData = Float32Array2D  # Shape: (height, width)
type Dimensions = Pair[int]  # (width, height)
