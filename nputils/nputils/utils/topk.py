"""Utilities for top-k selection."""

from __future__ import annotations

import logging
import math
from typing import Any, List, Optional

import numpy as np

from nputils.data.structs import OffsetArray
from nputils.errors import ContractViolation, InvalidArgumentError
from nputils.utils.validation import as_real_vector, check_index

logger = logging.getLogger(__name__)


def _insertion_location(kept: List[float], filled: int, value: float) -> Optional[int]:
    """First slot whose kept value ``value`` strictly beats, or None.

    Slots at or past ``filled`` are empty and lose to any value.
    """

    for j in range(filled):
        if value > kept[j]:
            return j
    if filled < len(kept):
        return filled
    return None


def _resolve_lower_bound(data: Any, lower_bound: Optional[int]) -> int:
    if isinstance(data, OffsetArray):
        if lower_bound is not None and check_index(lower_bound, "lower_bound") != data.lower_bound:
            raise InvalidArgumentError(
                f"lower_bound={lower_bound} disagrees with OffsetArray.lower_bound={data.lower_bound}",
                argument="lower_bound",
            )
        return data.lower_bound
    if lower_bound is None:
        return 0
    return check_index(lower_bound, "lower_bound")


def topk_indices(
    data: Any,
    k: int,
    lower_bound: Optional[int] = None,
    largest: bool = True,
    out: Optional[np.ndarray] = None,
    debug_logger: Any = None,
) -> np.ndarray:
    """Return indices of the k largest values, largest first.

    Single pass over ``data`` keeping a sorted buffer of the best ``k`` values
    seen so far. A value only enters ahead of a kept value it strictly
    exceeds, so among equal values the lowest index wins. With
    ``largest=False`` the k smallest values are returned in ascending order
    under the same tie rule.

    Indices are reported in the caller's base: ``lower_bound`` if given, the
    array's own bound for an :class:`OffsetArray`, otherwise 0.

    Raises:
        ContractViolation: ``out`` is given and ``len(out) != k``.
        InvalidArgumentError: ``k`` is not an integer in ``[1, len(data)]``,
            ``data`` is not 1D real, or ``data`` contains NaN.
    """

    k = check_index(k, "k")
    if out is not None and len(out) != k:
        raise ContractViolation(f"output buffer has length {len(out)}, expected k={k}")

    lb = _resolve_lower_bound(data, lower_bound)
    values = data.data if isinstance(data, OffsetArray) else as_real_vector(data)
    n = int(values.shape[0])
    if k < 1:
        logger.debug("Rejected k=%d below 1", k)
        raise InvalidArgumentError(f"k={k} must be >= 1", argument="k", bound="lower")
    if k > n:
        logger.debug("Rejected k=%d above n=%d", k, n)
        raise InvalidArgumentError(f"k={k} must be <= len(data)={n}", argument="k", bound="upper")
    if np.isnan(values).any():
        raise InvalidArgumentError("data contains NaN", argument="data")

    keys = values.tolist() if largest else (-values).tolist()
    kept = [-math.inf] * k
    kept_idx = [lb - 1] * k
    filled = 0
    inserted = 0
    for offset, value in enumerate(keys):
        loc = _insertion_location(kept, filled, value)
        if loc is None:
            continue
        # shift down one slot, dropping the last
        kept[loc + 1 :] = kept[loc : k - 1]
        kept_idx[loc + 1 :] = kept_idx[loc : k - 1]
        kept[loc] = value
        kept_idx[loc] = lb + offset
        filled = min(filled + 1, k)
        inserted += 1

    if debug_logger is not None:
        debug_logger.log(
            {
                "type": "topk_select",
                "n": n,
                "k": k,
                "lower_bound": lb,
                "largest": bool(largest),
                "n_inserted": inserted,
            }
        )

    result = np.asarray(kept_idx, dtype=np.int64)
    if out is None:
        return result
    out[:] = result
    return out
