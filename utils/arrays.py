import logging
from typing import Iterable, List, Union

import numpy as np
import pandas as pd

from utils.validate import as_integer_array, assert_valid_count

logger = logging.getLogger(__name__)

# Element ``i`` of a generated array is always ``ARRAY_STEP * i``.
ARRAY_STEP = 3


# ---------- generation ----------
def create_array_series(count: int) -> pd.Series:
    """Vectorized build of the ``0, 3, 6, ...`` progression as an int64 Series."""
    size = assert_valid_count(count)
    if size == 0:
        return pd.Series([], dtype="int64")

    values = np.arange(size, dtype=np.int64) * ARRAY_STEP
    return pd.Series(values, dtype="int64")


def create_array(count: int) -> List[int]:
    series = create_array_series(count)
    logger.debug("Generated array of %d elements", len(series))
    return series.tolist()


# ---------- reduction ----------
def compute_sum(values: Union[Iterable[int], np.ndarray, pd.Series]) -> int:
    """Sum an integer sequence using a signed 64-bit accumulator.

    Plain lists, numpy arrays and pandas Series are accepted.  An empty
    sequence sums to ``0``.  The result is returned as a Python ``int`` so
    callers never see numpy scalar types.
    """

    arr = as_integer_array(values)
    if arr.size == 0:
        return 0
    return int(arr.sum(dtype=np.int64))


__all__ = [
    "ARRAY_STEP",
    "create_array",
    "create_array_series",
    "compute_sum",
]
