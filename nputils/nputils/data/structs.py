"""Core data structures for nputils."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from nputils.utils.validation import as_real_vector, check_index


@dataclass
class OffsetArray:
    """1D real array addressed from an arbitrary lower bound.

    ``OffsetArray([7.0, 8.0], lower_bound=1)[2]`` is ``8.0``; index ``lower_bound``
    is the first element and ``upper_bound`` the last.
    """

    data: np.ndarray
    lower_bound: int = 0

    def __post_init__(self) -> None:
        self.data = as_real_vector(self.data)
        self.lower_bound = check_index(self.lower_bound, "lower_bound")

    def __len__(self) -> int:
        return int(self.data.shape[0])

    @property
    def upper_bound(self) -> int:
        return self.lower_bound + len(self) - 1

    def indices(self) -> np.ndarray:
        """Valid indices, in order."""

        return np.arange(self.lower_bound, self.lower_bound + len(self), dtype=np.int64)

    def _offset(self, index: Any) -> int:
        idx = check_index(index, "index")
        if not self.lower_bound <= idx <= self.upper_bound:
            raise IndexError(f"index {idx} outside [{self.lower_bound}, {self.upper_bound}]")
        return idx - self.lower_bound

    def __getitem__(self, index: Any) -> float:
        return float(self.data[self._offset(index)])

    def take(self, indices: Sequence[int]) -> np.ndarray:
        """Gather values for a sequence of indices in this array's base."""

        offsets = [self._offset(idx) for idx in indices]
        return self.data[np.asarray(offsets, dtype=np.int64)]
