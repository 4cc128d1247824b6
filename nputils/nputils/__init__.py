"""Numeric array helpers: top-k selection, flag conversion, transpose and mask packing."""

from nputils.config import Config
from nputils.data.structs import OffsetArray
from nputils.errors import ContractViolation, InvalidArgumentError, LogicalValueError, NputilsError
from nputils.utils.debug_logger import DebugLogger
from nputils.utils.logical import to_logical
from nputils.utils.pack import masked_pack
from nputils.utils.topk import topk_indices
from nputils.utils.transpose import transpose_copy

__all__ = [
    "Config",
    "ContractViolation",
    "DebugLogger",
    "InvalidArgumentError",
    "LogicalValueError",
    "NputilsError",
    "OffsetArray",
    "masked_pack",
    "to_logical",
    "topk_indices",
    "transpose_copy",
]
