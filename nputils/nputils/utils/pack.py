"""Boolean-mask compaction of real vectors."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from nputils.errors import InvalidArgumentError
from nputils.utils.validation import as_real_vector

logger = logging.getLogger(__name__)


def masked_pack(arr: Any, mask: Any, debug_logger: Any = None) -> np.ndarray:
    """Return the elements of ``arr`` where ``mask`` is True, in original order.

    ``mask`` must be a boolean vector of the same length as ``arr``; integer
    masks are rejected rather than treated as index lists.
    """

    values = as_real_vector(arr, "arr")
    flags = np.asarray(mask)
    if flags.size == 0:
        flags = flags.astype(bool)
    if flags.ndim != 1 or flags.dtype.kind != "b":
        raise InvalidArgumentError(
            f"mask must be a 1D boolean array, got rank {flags.ndim} dtype {flags.dtype}",
            argument="mask",
        )
    if flags.shape[0] != values.shape[0]:
        logger.debug("Rejected mask of length %d for array of length %d", flags.shape[0], values.shape[0])
        raise InvalidArgumentError(
            f"mask length {flags.shape[0]} does not match arr length {values.shape[0]}",
            argument="mask",
        )
    result = values[flags]
    if debug_logger is not None:
        debug_logger.log(
            {"type": "masked_pack", "n": int(values.shape[0]), "n_selected": int(result.shape[0])}
        )
    return result
