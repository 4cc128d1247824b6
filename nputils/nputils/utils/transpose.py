"""Transpose helper."""

from __future__ import annotations

from typing import Any

import numpy as np

from nputils.utils.validation import as_numeric_array


def transpose_copy(matrix: Any, debug_logger: Any = None) -> np.ndarray:
    """Return a new (c, r) C-contiguous array holding the transpose of ``matrix``."""

    arr = as_numeric_array(matrix, "matrix", ranks=(2,))
    result = np.array(arr.T, order="C", copy=True)
    if debug_logger is not None:
        debug_logger.log(
            {"type": "transpose_copy", "shape": list(arr.shape), "dtype": str(arr.dtype)}
        )
    return result
