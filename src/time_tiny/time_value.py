"""
Immutable time-of-day value.

A ``TimeValue`` holds an hour, minute and second with no date and no time
zone. It parses from and renders to ``HH:MM:SS``, compares by that rendered
text, and is always truthy. Field ranges are not validated: the value is meant
for transient use in logging and fast paths, not for calculations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from . import clock
from .exceptions import InvalidArgumentError, TimeFormatError
from .time_parsing import format_time_components, match_time_string
from .truthy import pick_truthy

logger = logging.getLogger(__name__)

FIELD_NAMES = ("hour", "minute", "second")


@dataclass(frozen=True, eq=False)
class TimeValue:
    """
    A wall-clock time of day.

    Missing and falsy components read back as 0, so ``TimeValue()`` and
    ``TimeValue(hour=0, minute=0, second=0)`` are indistinguishable. Negative
    and out-of-range components are kept as given.
    """

    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self):
        for name in FIELD_NAMES:
            object.__setattr__(self, name, pick_truthy(getattr(self, name), 0))

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> "TimeValue":
        """Build a value from a mapping; keys other than hour/minute/second are ignored."""
        ignored = sorted(str(key) for key in fields if key not in FIELD_NAMES)
        if ignored:
            logger.debug("Ignoring unrecognized time fields: %s", ", ".join(ignored))
        return cls(**{name: fields[name] for name in FIELD_NAMES if name in fields})

    @classmethod
    def now(cls) -> "TimeValue":
        """
        Capture the current local time.

        The time comes from the local clock but carries no zone, so it is
        lossy across zone changes. That is acceptable for transient values.
        """
        hour, minute, second = clock.read_local_clock()
        return cls(hour=hour, minute=minute, second=second)

    @classmethod
    def from_string(cls, text: str) -> "TimeValue":
        """
        Parse an ``hh:mm:ss`` string.

        Raises:
            InvalidArgumentError: If ``text`` is not a string
            TimeFormatError: If ``text`` does not match ``hh:mm:ss`` exactly
        """
        if not isinstance(text, str):
            raise InvalidArgumentError.no_string(text)
        components = match_time_string(text)
        if components is None:
            raise TimeFormatError.mismatch(text)
        hour, minute, second = components
        return cls(hour=hour, minute=minute, second=second)

    def as_string(self) -> str:
        """Render as ``HH:MM:SS``."""
        return format_time_components(self.hour, self.minute, self.second)

    def __str__(self) -> str:
        return self.as_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeValue):
            return NotImplemented
        return self.as_string() == other.as_string()

    def __hash__(self) -> int:
        return hash(self.as_string())

    def __bool__(self) -> bool:
        return True


__all__ = ["TimeValue", "FIELD_NAMES"]
