"""Decide whether a classified reminder needs a new notification."""

from datetime import date

from sqlalchemy.orm import Session

from fleet_manager.domain.entities import NotificationType
from fleet_manager.infrastructure.repositories import NotificationRepository


def should_create_notification(
    session: Session,
    *,
    vehicle_id: str,
    notification_type: NotificationType,
    due_date: date,
    force: bool = False,
) -> bool:
    """Return ``False`` when an undismissed notification already covers the key.

    The key is ``(vehicle_id, notification_type, due_date)``; read state does
    not matter. ``force`` skips the lookup entirely.
    """

    if force:
        return True
    return not NotificationRepository(session).has_active(
        vehicle_id=vehicle_id,
        notification_type=notification_type,
        due_date=due_date,
    )


__all__ = ["should_create_notification"]
