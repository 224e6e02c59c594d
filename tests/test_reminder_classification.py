from datetime import date, datetime, timezone

import pytest

from fleet_manager.application.use_cases.notifications import (
    classify_reminder,
    infer_notification_type,
)
from fleet_manager.domain.entities import NotificationPriority, NotificationType
from fleet_manager.utils import days_until

NOW = datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc)
MIDNIGHT = datetime(2025, 3, 10, 0, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Insurance Renewal", NotificationType.INSURANCE),
        ("Annual SERVICE", NotificationType.MAINTENANCE),
        ("Roadworthiness certificate", NotificationType.ROADWORTHINESS),
        ("Insurance service check", NotificationType.INSURANCE),
        ("Service roadworthiness", NotificationType.MAINTENANCE),
        ("Road tax", NotificationType.OTHER),
        ("", NotificationType.OTHER),
    ],
)
def test_infer_notification_type_uses_first_matching_keyword(name, expected):
    assert infer_notification_type(name) is expected


def test_days_until_rounds_partial_days_up():
    assert days_until(date(2025, 3, 16), NOW) == 6
    assert days_until(date(2025, 3, 11), NOW) == 1
    assert days_until(date(2025, 3, 10), NOW) == 0
    assert days_until(date(2025, 3, 7), NOW) == -3


def test_days_until_treats_naive_datetimes_as_app_timezone():
    assert days_until(date(2025, 3, 16), NOW.replace(tzinfo=None)) == 6


def test_due_today_is_overdue():
    result = classify_reminder("Annual Service", date(2025, 3, 10), NOW)

    assert result.should_notify is True
    assert result.diff_days == 0
    assert result.priority is NotificationPriority.HIGH
    assert result.message_key == "maintenance.overdue"


def test_past_due_reminder_is_overdue():
    result = classify_reminder("Annual Service", date(2025, 3, 7), NOW)

    assert result.diff_days == -3
    assert result.priority is NotificationPriority.HIGH
    assert result.message_key == "maintenance.overdue"


def test_insurance_due_in_five_days_is_high_priority():
    result = classify_reminder("Insurance Renewal", date(2025, 3, 15), NOW)

    assert result.type is NotificationType.INSURANCE
    assert result.diff_days == 5
    assert result.priority is NotificationPriority.HIGH
    assert result.message_key == "insurance.dueInDays"


@pytest.mark.parametrize(
    ("due_date", "reference", "message_key", "priority"),
    [
        (date(2025, 3, 17), NOW, "other.dueInDays", NotificationPriority.HIGH),
        (date(2025, 3, 18), NOW, "other.dueSoon", NotificationPriority.NORMAL),
        (date(2025, 3, 17), MIDNIGHT, "other.dueInDays", NotificationPriority.HIGH),
        (date(2025, 3, 18), MIDNIGHT, "other.dueSoon", NotificationPriority.NORMAL),
        (date(2025, 4, 9), NOW, "other.dueSoon", NotificationPriority.NORMAL),
    ],
)
def test_window_boundaries(due_date, reference, message_key, priority):
    result = classify_reminder("Road tax", due_date, reference)

    assert result.should_notify is True
    assert result.message_key == message_key
    assert result.priority is priority


def test_reminders_beyond_thirty_days_are_not_notified():
    result = classify_reminder("Roadworthiness test", date(2025, 4, 10), NOW)

    assert result.diff_days == 31
    assert result.should_notify is False
    assert result.priority is None
    assert result.message_key is None
    assert result.type is NotificationType.ROADWORTHINESS


def test_exactly_thirty_days_at_midnight_is_notified():
    result = classify_reminder("Road tax", date(2025, 4, 9), MIDNIGHT)

    assert result.diff_days == 30
    assert result.should_notify is True


@pytest.fixture()
def riga_timezone(monkeypatch):
    from zoneinfo import ZoneInfo

    import fleet_manager.utils.datetime as app_datetime

    monkeypatch.setattr(app_datetime, "get_app_timezone", lambda: ZoneInfo("Europe/Riga"))


def test_days_until_counts_elapsed_time_across_clock_change(riga_timezone):
    # Riga falls back from UTC+3 to UTC+2 on 2025-10-26; 7 days and 30 minutes remain.
    reference = datetime(2025, 10, 19, 21, 30, tzinfo=timezone.utc)

    assert days_until(date(2025, 10, 27), reference) == 8


def test_classification_after_clock_change_is_due_soon(riga_timezone):
    reference = datetime(2025, 10, 19, 21, 30, tzinfo=timezone.utc)

    result = classify_reminder("Road tax", date(2025, 10, 27), reference)

    assert result.message_key == "other.dueSoon"
    assert result.priority is NotificationPriority.NORMAL
