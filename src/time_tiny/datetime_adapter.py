"""
Conversion of ``TimeValue`` into ``datetime.datetime``.

The value is anchored on a fixed reference date (1970-01-01) in the floating
time zone, which maps to a naive datetime, and the culture-neutral ``C``
locale. Only the call's keyword arguments override these, along with the
individual datetime fields.

Named time zones are resolved with pytz, loaded on first use; when it cannot
be imported the conversion raises ``UnavailableDependencyError``. The floating
zone needs nothing beyond the standard library.
"""

from __future__ import annotations

import importlib
import logging
from datetime import date, datetime, tzinfo
from types import ModuleType
from typing import Any, Optional, Union

from .exceptions import InvalidArgumentError, UnavailableDependencyError
from .time_value import TimeValue

logger = logging.getLogger(__name__)

FLOATING_TIME_ZONE = "floating"
DEFAULT_LOCALE = "C"
REFERENCE_DATE = date(1970, 1, 1)
CULTURE_NEUTRAL_LOCALES = frozenset({"C", "POSIX"})
DATETIME_FIELDS = ("year", "month", "day", "hour", "minute", "second", "microsecond")

TimeZoneSpec = Union[str, tzinfo, None]


def _import_optional(module_name: str, purpose: str) -> ModuleType:
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise UnavailableDependencyError.missing_module(module_name, purpose) from exc
    logger.debug("Loaded %s for %s", module_name, purpose)
    return module


def resolve_time_zone(time_zone: TimeZoneSpec) -> Optional[tzinfo]:
    """
    Map a time zone spec to a ``tzinfo``.

    ``None`` and ``"floating"`` give None (naive datetime). A ``tzinfo`` is
    returned unchanged. Any other string is looked up with pytz.
    """
    if time_zone is None or time_zone == FLOATING_TIME_ZONE:
        return None
    if isinstance(time_zone, tzinfo):
        return time_zone
    if not isinstance(time_zone, str):
        raise InvalidArgumentError(
            f"time_zone must be a zone name or tzinfo (got {type(time_zone).__name__})",
            value=time_zone,
        )

    pytz = _import_optional("pytz", "named time zones")
    try:
        return pytz.timezone(time_zone)
    except pytz.UnknownTimeZoneError as exc:
        raise InvalidArgumentError(f"Unknown time zone {time_zone!r}", value=time_zone) from exc


def _check_locale(locale: object) -> None:
    # datetime objects carry no locale; strftime output follows the C locale
    if not isinstance(locale, str):
        raise InvalidArgumentError(f"locale must be a locale name (got {type(locale).__name__})", value=locale)
    if locale not in CULTURE_NEUTRAL_LOCALES:
        raise InvalidArgumentError(
            f"Unsupported locale {locale!r}; expected one of {sorted(CULTURE_NEUTRAL_LOCALES)}",
            value=locale,
        )


def _attach_zone(naive: datetime, zone: Optional[tzinfo]) -> datetime:
    if zone is None:
        return naive
    localize = getattr(zone, "localize", None)
    if localize is not None:
        return localize(naive)
    return naive.replace(tzinfo=zone)


def to_datetime(
    value: TimeValue,
    *,
    time_zone: TimeZoneSpec = FLOATING_TIME_ZONE,
    locale: str = DEFAULT_LOCALE,
    **overrides: Any,
) -> datetime:
    """
    Build a ``datetime`` equivalent to ``value``.

    Args:
        value: Time to convert
        time_zone: ``"floating"`` (default), an IANA zone name or a ``tzinfo``
        locale: Culture-neutral locale name, defaults to ``C``
        **overrides: Any of year, month, day, hour, minute, second, microsecond;
            unspecified date fields come from 1970-01-01

    Returns:
        A naive datetime for the floating zone, otherwise an aware one

    Raises:
        InvalidArgumentError: Unknown override, unknown zone, unsupported locale
            or a field the calendar rejects (such as hour=99)
        UnavailableDependencyError: pytz cannot be imported for a named zone
    """
    unknown = sorted(key for key in overrides if key not in DATETIME_FIELDS)
    if unknown:
        raise InvalidArgumentError(f"Unsupported datetime fields: {', '.join(unknown)}", fields=unknown)
    _check_locale(locale)

    fields: dict[str, Any] = {
        "year": REFERENCE_DATE.year,
        "month": REFERENCE_DATE.month,
        "day": REFERENCE_DATE.day,
        "hour": value.hour,
        "minute": value.minute,
        "second": value.second,
    }
    fields.update(overrides)

    zone = resolve_time_zone(time_zone)
    try:
        naive = datetime(**fields)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Cannot convert {value} to datetime: {exc}", value=value) from exc
    return _attach_zone(naive, zone)


__all__ = [
    "FLOATING_TIME_ZONE",
    "DEFAULT_LOCALE",
    "REFERENCE_DATE",
    "resolve_time_zone",
    "to_datetime",
]
