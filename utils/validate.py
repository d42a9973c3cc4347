"""Validation helpers for array generation and reduction."""

from __future__ import annotations

from numbers import Integral
from typing import Iterable, Union

import numpy as np
import pandas as pd

# dtype kinds accepted as integer input.  Booleans (kind ``b``) are excluded so
# that ``[True, False]`` is not silently summed as ``1``.
INTEGER_KINDS = {"i", "u"}


def assert_valid_count(count) -> int:
    """Return *count* as a plain ``int`` or raise for unusable values."""

    if isinstance(count, (bool, np.bool_)) or not isinstance(count, Integral):
        raise TypeError(
            f"Array count must be an integer, got {type(count).__name__}"
        )

    value = int(count)
    if value < 0:
        raise ValueError(f"Array count must be non-negative, got {value}")
    return value


def as_integer_array(values: Union[Iterable[int], np.ndarray, pd.Series]) -> np.ndarray:
    """Coerce *values* to a one-dimensional ``int64`` array."""

    if isinstance(values, pd.Series):
        arr = values.to_numpy()
    elif isinstance(values, np.ndarray):
        arr = values
    else:
        arr = np.asarray(list(values))

    if arr.size == 0:
        return np.empty(0, dtype=np.int64)

    if arr.dtype.kind not in INTEGER_KINDS:
        raise TypeError(
            f"Integer sequence required; got elements of dtype '{arr.dtype}'"
        )
    if arr.dtype.kind == "u" and arr.max() > np.iinfo(np.int64).max:
        raise OverflowError(
            f"Integer sequence contains values above the int64 range: {arr.max()}"
        )
    return arr.astype(np.int64, copy=False).ravel()


__all__ = [
    "assert_valid_count",
    "as_integer_array",
]
