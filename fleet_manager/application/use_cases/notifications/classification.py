"""Classify reminders by urgency relative to the current instant."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Final

from fleet_manager.domain.entities import NotificationPriority, NotificationType
from fleet_manager.utils import days_until

# Ordered: the first keyword found in the reminder name decides the type.
_TYPE_KEYWORDS: Final[tuple[tuple[str, NotificationType], ...]] = (
    ("insurance", NotificationType.INSURANCE),
    ("service", NotificationType.MAINTENANCE),
    ("worthiness", NotificationType.ROADWORTHINESS),
)

HIGH_PRIORITY_WINDOW_DAYS: Final[int] = 7
NOTIFY_WINDOW_DAYS: Final[int] = 30

MESSAGE_OVERDUE: Final[str] = "overdue"
MESSAGE_DUE_IN_DAYS: Final[str] = "dueInDays"
MESSAGE_DUE_SOON: Final[str] = "dueSoon"


@dataclass(frozen=True)
class ReminderClassification:
    """Outcome of classifying one reminder."""

    type: NotificationType
    diff_days: int
    should_notify: bool
    priority: NotificationPriority | None = None
    message_key: str | None = None


def infer_notification_type(reminder_name: str) -> NotificationType:
    """Infer the notification type from the free-text reminder name."""

    lowered = (reminder_name or "").lower()
    for keyword, notification_type in _TYPE_KEYWORDS:
        if keyword in lowered:
            return notification_type
    return NotificationType.OTHER


def classify_reminder(
    reminder_name: str, due_date: date, now: datetime
) -> ReminderClassification:
    """Return type, priority and message key for a reminder due on ``due_date``.

    ``diff_days`` is the ceiling of the distance to the due date in days;
    reminders more than thirty days away are not notified.
    """

    notification_type = infer_notification_type(reminder_name)
    diff_days = days_until(due_date, now)

    if diff_days <= 0:
        suffix, priority = MESSAGE_OVERDUE, NotificationPriority.HIGH
    elif diff_days <= HIGH_PRIORITY_WINDOW_DAYS:
        suffix, priority = MESSAGE_DUE_IN_DAYS, NotificationPriority.HIGH
    elif diff_days <= NOTIFY_WINDOW_DAYS:
        suffix, priority = MESSAGE_DUE_SOON, NotificationPriority.NORMAL
    else:
        return ReminderClassification(
            type=notification_type, diff_days=diff_days, should_notify=False
        )

    return ReminderClassification(
        type=notification_type,
        diff_days=diff_days,
        should_notify=True,
        priority=priority,
        message_key=f"{notification_type.value}.{suffix}",
    )


__all__ = [
    "HIGH_PRIORITY_WINDOW_DAYS",
    "MESSAGE_DUE_IN_DAYS",
    "MESSAGE_DUE_SOON",
    "MESSAGE_OVERDUE",
    "NOTIFY_WINDOW_DAYS",
    "ReminderClassification",
    "classify_reminder",
    "infer_notification_type",
]
