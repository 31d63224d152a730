"""
Canonical hh:mm:ss parsing and formatting.

The textual form is exactly two ASCII digits, colon, two digits, colon, two
digits. Formatting pads each component to a minimum of two digits and never
truncates, so components above 99 widen the field.
"""

import re

TIME_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2}):([0-9]{2})")
COMPONENT_WIDTH = 2


def match_time_string(text: str) -> tuple[int, int, int] | None:
    """
    Split a ``hh:mm:ss`` string into hour, minute and second integers.

    Args:
        text: Candidate time string

    Returns:
        Tuple of (hour, minute, second), or None when the text does not match
        the pattern exactly. Components are not range checked.

    Examples:
        >>> match_time_string("08:15:45")
        (8, 15, 45)
        >>> match_time_string("99:99:99")
        (99, 99, 99)
        >>> match_time_string("8:15:45") is None
        True
    """
    match = TIME_PATTERN.fullmatch(text)
    if match is None:
        return None
    hour, minute, second = (int(group) for group in match.groups())
    return hour, minute, second


def format_time_components(hour: int, minute: int, second: int) -> str:
    """Render components as ``HH:MM:SS`` with a two digit minimum width."""
    return f"{hour:0{COMPONENT_WIDTH}d}:{minute:0{COMPONENT_WIDTH}d}:{second:0{COMPONENT_WIDTH}d}"


__all__ = ["TIME_PATTERN", "match_time_string", "format_time_components"]
