"""Tiny immutable time-of-day values with a fixed hh:mm:ss text form."""

from .exceptions import (
    InvalidArgumentError,
    TimeFormatError,
    TimeTinyError,
    UnavailableDependencyError,
)
from .time_value import TimeValue

__all__ = [
    "InvalidArgumentError",
    "TimeFormatError",
    "TimeTinyError",
    "TimeValue",
    "UnavailableDependencyError",
]
