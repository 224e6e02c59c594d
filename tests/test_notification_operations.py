from datetime import date, datetime, timedelta

import pytest

from fleet_manager.application.use_cases.notifications import (
    dismiss_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
    render_notification,
)
from fleet_manager.domain.entities import (
    Notification,
    NotificationPriority,
    NotificationType,
)
from fleet_manager.domain.exceptions import NotFoundError, ValidationError
from fleet_manager.infrastructure.repositories import NotificationRepository

CREATED = datetime(2025, 3, 10, 8, 0)


def _add_notification(
    session,
    *,
    created_at: datetime = CREATED,
    priority: NotificationPriority = NotificationPriority.NORMAL,
    notification_type: NotificationType = NotificationType.MAINTENANCE,
    message_key: str = "maintenance.dueSoon",
    due_date: date = date(2025, 3, 25),
    is_read: bool = False,
    is_dismissed: bool = False,
) -> Notification:
    notification = NotificationRepository(session).create(
        Notification(
            id=None,
            vehicle_id="AB-1234",
            type=notification_type,
            message_key=message_key,
            message_variables={
                "reminderName": "Annual Service",
                "vehicle": "Volvo FH16 (AB-1234)",
                "date": f"{due_date.month}/{due_date.day}/{due_date.year}",
            },
            due_date=due_date,
            priority=priority,
            created_at=created_at,
            is_read=is_read,
            is_dismissed=is_dismissed,
        )
    )
    session.commit()
    return notification


def test_mark_notification_read_is_idempotent(session):
    notification = _add_notification(session)

    first = mark_notification_read(session, notification.id)
    second = mark_notification_read(session, notification.id)

    assert first.is_read is True
    assert second.is_read is True
    assert second.is_dismissed is False


def test_dismiss_notification(session):
    notification = _add_notification(session)

    dismissed = dismiss_notification(session, notification.id)

    assert dismissed.is_dismissed is True
    assert dismissed.is_read is False


@pytest.mark.parametrize("operation", [mark_notification_read, dismiss_notification])
def test_flag_operations_reject_unknown_ids(session, operation):
    with pytest.raises(NotFoundError):
        operation(session, 999)


def test_mark_all_read_returns_changed_count(session):
    _add_notification(session)
    _add_notification(session, due_date=date(2025, 3, 26))
    _add_notification(session, due_date=date(2025, 3, 27), is_read=True)

    assert mark_all_notifications_read(session) == 2
    assert mark_all_notifications_read(session) == 0
    assert all(n.is_read for n in list_notifications(session))


def test_mark_all_read_on_empty_store(session):
    assert mark_all_notifications_read(session) == 0


def test_list_orders_newest_first_then_high_priority(session):
    older = _add_notification(session, created_at=CREATED - timedelta(hours=1))
    normal = _add_notification(session, due_date=date(2025, 3, 26))
    high = _add_notification(
        session,
        priority=NotificationPriority.HIGH,
        message_key="maintenance.dueInDays",
        due_date=date(2025, 3, 12),
    )

    ordered = list_notifications(session)

    assert [n.id for n in ordered] == [high.id, normal.id, older.id]


def test_list_filters_and_paginates(session):
    unread = _add_notification(session, created_at=CREATED)
    _add_notification(session, created_at=CREATED - timedelta(minutes=1), is_read=True)
    _add_notification(
        session, created_at=CREATED - timedelta(minutes=2), is_dismissed=True
    )

    assert len(list_notifications(session)) == 3
    assert len(list_notifications(session, unread_only=True)) == 2
    assert len(list_notifications(session, active_only=True)) == 2
    assert [n.id for n in list_notifications(session, unread_only=True, active_only=True)] == [
        unread.id
    ]
    assert len(list_notifications(session, limit=1, offset=1)) == 1


def test_list_rejects_negative_pagination(session):
    with pytest.raises(ValidationError):
        list_notifications(session, offset=-1)


def test_render_due_in_days_counts_from_now(session, now):
    notification = _add_notification(
        session,
        notification_type=NotificationType.INSURANCE,
        message_key="insurance.dueInDays",
        priority=NotificationPriority.HIGH,
        due_date=date(2025, 3, 15),
    )

    rendered = render_notification(notification, now=now)

    assert rendered.title == "Annual Service due in 5 days"
    assert rendered.message == "Annual Service for Volvo FH16 (AB-1234) is due on 3/15/2025."


def test_render_singular_day_and_overdue(session, now):
    tomorrow = _add_notification(
        session, message_key="maintenance.dueInDays", due_date=date(2025, 3, 11)
    )
    overdue = _add_notification(
        session, message_key="maintenance.overdue", due_date=date(2025, 3, 1)
    )

    assert render_notification(tomorrow, now=now).title == "Annual Service due in 1 day"
    assert (
        render_notification(overdue, now=now).title
        == "Annual Service overdue for Volvo FH16"
    )


def test_render_unknown_key_falls_back_to_reminder_name(session, now):
    notification = _add_notification(session, message_key="custom.key")

    assert render_notification(notification, now=now).title == "Annual Service"
