"""Turn due reminders into notifications in a single transaction."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fleet_manager.domain.entities import Notification, ReminderWithVehicle
from fleet_manager.domain.exceptions import TransactionFailure
from fleet_manager.infrastructure.repositories import (
    NotificationRepository,
    ReminderRepository,
)
from fleet_manager.utils import (
    ensure_app_timezone,
    format_locale_date,
    now_in_app_timezone,
)

from .classification import ReminderClassification, classify_reminder
from .deduplication import should_create_notification

logger = logging.getLogger(__name__)


def build_message_variables(candidate: ReminderWithVehicle) -> dict[str, str]:
    """Return the variables interpolated into the notification message."""

    return {
        "reminderName": candidate.reminder.name,
        "vehicle": candidate.vehicle_label,
        "date": format_locale_date(candidate.reminder.due_date),
    }


def _build_notification(
    candidate: ReminderWithVehicle, classification: ReminderClassification
) -> Notification:
    reminder = candidate.reminder
    return Notification(
        id=None,
        vehicle_id=reminder.vehicle_id,
        type=classification.type,
        message_key=classification.message_key,
        message_variables=build_message_variables(candidate),
        due_date=reminder.due_date,
        priority=classification.priority,
        created_at=None,
        is_read=False,
        is_dismissed=False,
    )


def generate_notifications(
    session: Session,
    *,
    force: bool = False,
    now: datetime | None = None,
) -> list[Notification]:
    """Create notifications for every enabled reminder inside its notify window.

    Reminders are processed ordered by vehicle id and due date. The whole pass
    is one transaction: if any insert fails nothing is kept and
    :class:`TransactionFailure` is raised. With ``force`` the duplicate check
    is skipped. Generation is system-triggered and writes no audit entries.
    """

    reference = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    reminder_repository = ReminderRepository(session)
    notification_repository = NotificationRepository(session)
    created: list[Notification] = []

    try:
        for candidate in reminder_repository.list_enabled_with_vehicles():
            reminder = candidate.reminder
            classification = classify_reminder(reminder.name, reminder.due_date, reference)
            if not classification.should_notify:
                continue
            if not should_create_notification(
                session,
                vehicle_id=reminder.vehicle_id,
                notification_type=classification.type,
                due_date=reminder.due_date,
                force=force,
            ):
                continue
            created.append(
                notification_repository.create(
                    _build_notification(candidate, classification)
                )
            )
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Notification generation rolled back")
        raise TransactionFailure(
            "Notification generation failed; no notifications were saved"
        ) from exc
    except Exception:
        session.rollback()
        raise

    logger.info(
        "Generated %d new notifications (force=%s)", len(created), force
    )
    return created


__all__ = ["build_message_variables", "generate_notifications"]
