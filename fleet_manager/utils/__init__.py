"""Utility helpers for reusable functionality."""

from .datetime import (
    days_until,
    ensure_app_naive_datetime,
    ensure_app_timezone,
    format_locale_date,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
    start_of_day,
)
from .logging import configure_logging

__all__ = [
    "configure_logging",
    "days_until",
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "format_locale_date",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
    "start_of_day",
]
