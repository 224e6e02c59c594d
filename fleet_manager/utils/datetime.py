"""Helpers for working with timezone-aware datetimes."""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fleet_manager.config import get_settings

_DEFAULT_TIMEZONE: Final[str] = "UTC"
_SECONDS_PER_DAY: Final[int] = 24 * 60 * 60
_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the timezone reminders are evaluated in.

    ``APP_TIMEZONE`` accepts an IANA name or a ``UTC+HH:MM`` offset; anything
    unresolvable means UTC.
    """

    configured = (get_settings().app_timezone or "").strip()
    return _resolve_timezone(configured or _DEFAULT_TIMEZONE)


def now_in_app_timezone() -> datetime:
    """Return the current time localized to the configured timezone."""

    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Return the current localized time without attaching ``tzinfo``."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Express ``value`` in the app timezone; naive values are assumed local."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Return ``value`` localized to the app timezone but without ``tzinfo``.

    Timestamps are persisted as naive local times; entities carry aware ones.
    """

    localized = ensure_app_timezone(value)
    if localized is None:
        return None
    return localized.replace(tzinfo=None)


def start_of_day(value: date) -> datetime:
    """Return midnight of ``value`` in the application timezone."""

    return datetime.combine(value, time.min, tzinfo=get_app_timezone())


def days_until(due_date: date, now: datetime) -> int:
    """Return the number of calendar days from ``now`` until ``due_date``.

    Partial days round up: anything strictly after midnight of the due date
    counts as day zero or earlier, anything before it counts as at least one
    day away.
    """

    # Same-zone aware subtraction is wall-clock; compare in UTC for elapsed time.
    reference = ensure_app_timezone(now).astimezone(timezone.utc)
    delta = start_of_day(due_date).astimezone(timezone.utc) - reference
    return math.ceil(delta.total_seconds() / _SECONDS_PER_DAY)


def format_locale_date(value: date) -> str:
    """Format ``value`` the way en-US short dates are rendered (``M/D/YYYY``)."""

    return f"{value.month}/{value.day}/{value.year}"


def _resolve_timezone(tz_name: str) -> tzinfo:
    """Resolve ``tz_name`` into a ``timezone`` instance."""

    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        match = _OFFSET_PATTERN.match(tz_name)
        if match:
            sign = -1 if match.group("sign") == "-" else 1
            hours = int(match.group("hours"))
            minutes = int(match.group("minutes") or 0)
            offset = timedelta(hours=hours, minutes=minutes)
            return timezone(sign * offset)
    return timezone.utc
