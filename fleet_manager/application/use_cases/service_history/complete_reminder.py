"""Use case for closing a reminder by logging the service that fulfilled it."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from fleet_manager.domain.entities import Actor, ServiceRecord
from fleet_manager.domain.exceptions import NotFoundError
from fleet_manager.infrastructure.repositories import ReminderRepository
from fleet_manager.utils import now_in_app_timezone

from .create_service_record import create_service_record


def complete_reminder(
    session: Session,
    reminder_id: int,
    actor: Actor,
    data: Mapping[str, Any] | None = None,
) -> ServiceRecord:
    """Create a service record pre-filled from the reminder ``reminder_id``.

    The reminder's vehicle and id always win; its name becomes the service
    type and today becomes the service date unless ``data`` provides them.
    """

    reminder = ReminderRepository(session).get(reminder_id)
    if reminder is None:
        raise NotFoundError("Reminder not found")

    payload: dict[str, Any] = dict(data or {})
    if not payload.get("service_type"):
        payload["service_type"] = reminder.name
    if not payload.get("service_date"):
        payload["service_date"] = now_in_app_timezone().date()
    payload["vehicle_id"] = reminder.vehicle_id
    payload["reminder_id"] = reminder.id

    return create_service_record(session, payload, actor)


__all__ = ["complete_reminder"]
