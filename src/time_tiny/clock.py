"""Local wall-clock reads."""

from __future__ import annotations

from datetime import datetime


def read_local_clock() -> tuple[int, int, int]:
    """Return the host's local (hour, minute, second), with no zone attached."""
    now = datetime.now()
    return now.hour, now.minute, now.second


__all__ = ["read_local_clock"]
