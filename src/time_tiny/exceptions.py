"""Exception classes for time_tiny.

Every error raised by the package inherits from ``TimeTinyError`` and from the
built-in exception a caller would naturally catch for the same failure, so
``except ValueError`` around ``TimeValue.from_string`` keeps working.

Exception classes support two patterns:
1. No-argument raise: raise TimeFormatError()
2. Contextual attributes: err = TimeFormatError(value="1:2:3"); raise err
"""

from typing import Any


class TimeTinyError(Exception):
    """Base exception for all time_tiny errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "time_tiny error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class InvalidArgumentError(TimeTinyError, TypeError):
    """An argument of the wrong kind was supplied."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Invalid argument supplied"
        super().__init__(message, **kwargs)

    @classmethod
    def no_string(cls, value: object) -> "InvalidArgumentError":
        """Create error for a parse call made without a string."""
        return cls(f"No string supplied to from_string (got {type(value).__name__})", value=value)


class TimeFormatError(TimeTinyError, ValueError):
    """Time text does not match hh:mm:ss."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Invalid time format, does not match hh:mm:ss"
        super().__init__(message, **kwargs)

    @classmethod
    def mismatch(cls, text: str) -> "TimeFormatError":
        """Create error for text that does not match the hh:mm:ss pattern."""
        return cls(f"Invalid time format, does not match hh:mm:ss: {text!r}", value=text)


class UnavailableDependencyError(TimeTinyError, ImportError):
    """An optional dependency could not be loaded."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Optional dependency is not installed"
        super().__init__(message, **kwargs)

    @classmethod
    def missing_module(cls, module_name: str, purpose: str = "") -> "UnavailableDependencyError":
        """Create error for an optional module that failed to import."""
        msg = f"Unable to import {module_name}"
        if purpose:
            msg += f"; it is required for {purpose}"
        return cls(msg, module_name=module_name)


__all__ = [
    "TimeTinyError",
    "InvalidArgumentError",
    "TimeFormatError",
    "UnavailableDependencyError",
]
