"""Helpers for selecting truthy values without boolean fallbacks."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")


def pick_truthy(value: T, alternate: U) -> T | U:
    if value:
        return value
    return alternate


__all__ = ["pick_truthy"]
