"""Read, acknowledge and dismiss notifications."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fleet_manager.domain.entities import Notification
from fleet_manager.domain.exceptions import (
    NotFoundError,
    TransactionFailure,
    ValidationError,
)
from fleet_manager.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session,
    *,
    unread_only: bool = False,
    active_only: bool = False,
    limit: int | None = None,
    offset: int = 0,
) -> Sequence[Notification]:
    """Return notifications newest first, high priority before normal."""

    if (limit is not None and limit < 0) or offset < 0:
        raise ValidationError("limit and offset must not be negative")
    return NotificationRepository(session).list(
        unread_only=unread_only,
        active_only=active_only,
        limit=limit,
        offset=offset,
    )


def _apply_flag(
    session: Session,
    notification_id: int,
    operation: Callable[[NotificationRepository, int], Notification | None],
) -> Notification:
    repository = NotificationRepository(session)
    try:
        notification = operation(repository, notification_id)
        if notification is None:
            session.rollback()
            raise NotFoundError("Notification not found")
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        raise TransactionFailure("Could not update notification") from exc
    return notification


def mark_notification_read(session: Session, notification_id: int) -> Notification:
    """Flag a notification as read; repeating the call is harmless."""

    return _apply_flag(session, notification_id, NotificationRepository.mark_as_read)


def dismiss_notification(session: Session, notification_id: int) -> Notification:
    """Flag a notification as dismissed, lifting duplicate suppression for its key."""

    return _apply_flag(session, notification_id, NotificationRepository.dismiss)


def mark_all_notifications_read(session: Session) -> int:
    """Mark every unread notification as read and return how many changed."""

    try:
        updated = NotificationRepository(session).mark_all_as_read()
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        raise TransactionFailure("Could not mark notifications as read") from exc
    return updated


__all__ = [
    "dismiss_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]
