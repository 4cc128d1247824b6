"""Conversion of 0/1 numeric flag arrays to boolean arrays."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from nputils.errors import LogicalValueError
from nputils.utils.validation import as_numeric_array

logger = logging.getLogger(__name__)


def to_logical(values: Any, debug_logger: Any = None) -> np.ndarray:
    """Convert a rank 1-3 array of exact 0/1 flags to a boolean array.

    Comparison is exact; 0.9999 is rejected like any other non-flag value.
    """

    arr = as_numeric_array(values, "values", ranks=(1, 2, 3))
    if arr.dtype.kind == "b":
        flags = arr.copy()
    else:
        bad = (arr != 0) & (arr != 1)
        n_bad = int(np.count_nonzero(bad))
        if n_bad:
            first_bad = tuple(int(i) for i in np.argwhere(bad)[0])
            logger.debug("Rejected logical conversion: %d bad element(s), first at %s", n_bad, first_bad)
            raise LogicalValueError(n_bad, first_bad)
        flags = arr == 1

    if debug_logger is not None:
        debug_logger.log(
            {"type": "to_logical", "shape": list(arr.shape), "dtype": str(arr.dtype)}
        )
    return flags
