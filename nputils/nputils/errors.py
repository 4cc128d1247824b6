"""Exceptions raised by nputils routines."""

from __future__ import annotations

from typing import Optional, Tuple


class NputilsError(Exception):
    """Base class for value-level failures."""


class InvalidArgumentError(NputilsError, ValueError):
    """An argument is outside the range a routine accepts."""

    def __init__(self, message: str, argument: Optional[str] = None, bound: Optional[str] = None) -> None:
        super().__init__(message)
        self.argument = argument
        self.bound = bound


class LogicalValueError(NputilsError, ValueError):
    """A numeric flag array holds something other than 0 or 1."""

    def __init__(self, n_bad: int, first_bad: Tuple[int, ...]) -> None:
        super().__init__(
            f"bad value for logical data: {n_bad} element(s) not equal to 0 or 1, first at {first_bad}"
        )
        self.n_bad = n_bad
        self.first_bad = first_bad


class ContractViolation(AssertionError):
    """The caller broke an interface contract (e.g. a mis-sized output buffer)."""
