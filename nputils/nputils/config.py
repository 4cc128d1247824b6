"""Configuration model for nputils."""

from __future__ import annotations

from typing import Any

import numpy as np
from pydantic import BaseModel

from nputils.data.io import load_config
from nputils.data.structs import OffsetArray
from nputils.utils.debug_logger import DebugLogger
from nputils.utils.topk import topk_indices


class Config(BaseModel):
    """Defaults applied by callers that share one index base and debug log."""

    lower_bound: int = 0
    debug: bool = False
    debug_path: str = "nputils_debug.jsonl"
    debug_level: str = "INFO"

    class Config:
        extra = "allow"

    @classmethod
    def from_yaml(cls, path: str) -> "Config":
        return cls(**load_config(path))

    def build_debug_logger(self) -> DebugLogger:
        """Create a DebugLogger from the debug settings (disabled unless ``debug``)."""

        return DebugLogger(enabled=self.debug, path=self.debug_path, level=self.debug_level)

    def topk_indices(self, data: Any, k: int, **kwargs: Any) -> np.ndarray:
        """``topk_indices`` with the configured lower bound for plain arrays."""

        if not isinstance(data, OffsetArray):
            if kwargs.get("lower_bound") is None:
                kwargs["lower_bound"] = self.lower_bound
        return topk_indices(data, k, **kwargs)
