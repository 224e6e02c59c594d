"""Endpoints for reminder notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fleet_manager.application.use_cases.notifications import (
    dismiss_notification as dismiss_notification_uc,
    generate_notifications as generate_notifications_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read as mark_all_notifications_read_uc,
    mark_notification_read as mark_notification_read_uc,
    render_notification,
)
from fleet_manager.domain.entities import Actor, Notification
from fleet_manager.infrastructure.database import get_db
from fleet_manager.interfaces.api.dependencies import get_current_actor
from fleet_manager.interfaces.api.routes_helpers import translate_errors
from fleet_manager.interfaces.api.schemas import (
    NotificationBulkUpdateResponse,
    NotificationGenerateResponse,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    rendered = render_notification(notification)
    return NotificationRead(
        id=notification.id or 0,
        vehicle_id=notification.vehicle_id,
        type=notification.type.value,
        priority=notification.priority.value,
        message_key=notification.message_key,
        message_variables=notification.message_variables or {},
        due_date=notification.due_date,
        created_at=notification.created_at,
        is_read=notification.is_read,
        is_dismissed=notification.is_dismissed,
        title=rendered.title,
        message=rendered.message,
    )


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    unread_only: bool = False,
    active_only: bool = True,
    limit: int | None = Query(default=None, ge=0),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
    _: Actor = Depends(get_current_actor),
) -> list[NotificationRead]:
    """Return notifications, newest and most urgent first."""

    with translate_errors():
        notifications = list_notifications_uc(
            db,
            unread_only=unread_only,
            active_only=active_only,
            limit=limit,
            offset=offset,
        )
    return [_notification_to_schema(notification) for notification in notifications]


@router.post("/generate", response_model=NotificationGenerateResponse)
def generate_notifications(
    force: bool = False,
    db: Session = Depends(get_db),
    _: Actor = Depends(get_current_actor),
) -> NotificationGenerateResponse:
    """Materialize notifications for reminders that entered their notify window."""

    with translate_errors():
        created = generate_notifications_uc(db, force=force)
    return NotificationGenerateResponse(
        created=len(created),
        notifications=[_notification_to_schema(notification) for notification in created],
    )


@router.put("/read-all", response_model=NotificationBulkUpdateResponse)
def mark_all_notifications_read(
    db: Session = Depends(get_db),
    _: Actor = Depends(get_current_actor),
) -> NotificationBulkUpdateResponse:
    """Mark every unread notification as read."""

    with translate_errors():
        updated = mark_all_notifications_read_uc(db)
    return NotificationBulkUpdateResponse(updated=updated)


@router.put("/{notification_id}/read", response_model=NotificationRead)
def mark_notification_read(
    notification_id: int,
    db: Session = Depends(get_db),
    _: Actor = Depends(get_current_actor),
) -> NotificationRead:
    with translate_errors():
        notification = mark_notification_read_uc(db, notification_id)
    return _notification_to_schema(notification)


@router.put("/{notification_id}/dismiss", response_model=NotificationRead)
def dismiss_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    _: Actor = Depends(get_current_actor),
) -> NotificationRead:
    with translate_errors():
        notification = dismiss_notification_uc(db, notification_id)
    return _notification_to_schema(notification)


__all__ = ["router"]
