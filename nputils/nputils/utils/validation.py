"""Input coercion shared by the array helpers."""

from __future__ import annotations

import logging
from typing import Any, Iterable

import numpy as np

from nputils.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

# dtype kinds accepted as numeric input: bool, signed, unsigned, float.
NUMERIC_KINDS = "biuf"


def as_numeric_array(values: Any, name: str, ranks: Iterable[int]) -> np.ndarray:
    """Convert ``values`` to an ndarray and check its rank and element kind."""

    try:
        arr = np.asarray(values)
    except ValueError as exc:
        raise InvalidArgumentError(f"{name} is not a rectangular numeric array: {exc}", argument=name) from exc
    allowed = tuple(ranks)
    if arr.ndim not in allowed:
        logger.debug("Rejected %s with rank %d (allowed %s)", name, arr.ndim, allowed)
        raise InvalidArgumentError(
            f"{name} must have rank in {allowed}, got rank {arr.ndim}", argument=name
        )
    if arr.dtype.kind not in NUMERIC_KINDS:
        logger.debug("Rejected %s with dtype %s", name, arr.dtype)
        raise InvalidArgumentError(f"{name} must be numeric, got dtype {arr.dtype}", argument=name)
    return arr


def as_real_vector(values: Any, name: str = "data") -> np.ndarray:
    """Return ``values`` as a 1D float64 array."""

    arr = as_numeric_array(values, name, ranks=(1,))
    return arr.astype(np.float64, copy=False)


def check_index(value: Any, name: str) -> int:
    """Return ``value`` as a Python int, rejecting bools and non-integers."""

    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}", argument=name)
    return int(value)
