"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from sqlalchemy import case
from sqlalchemy.orm import Session

from fleet_manager.domain.entities import (
    Notification,
    NotificationPriority,
    NotificationType,
)
from fleet_manager.infrastructure.models import NotificationModel
from fleet_manager.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

_PRIORITY_RANK = case(
    (NotificationModel.priority == NotificationPriority.HIGH.value, 1),
    else_=0,
)


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def list(
        self,
        *,
        unread_only: bool = False,
        active_only: bool = False,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        if unread_only:
            query = query.filter(NotificationModel.is_read.is_(False))
        if active_only:
            query = query.filter(NotificationModel.is_dismissed.is_(False))
        query = query.order_by(
            NotificationModel.created_at.desc(),
            _PRIORITY_RANK.desc(),
            NotificationModel.id.desc(),
        )
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def has_active(
        self, *, vehicle_id: str, notification_type: NotificationType, due_date: date
    ) -> bool:
        """Return ``True`` when an undismissed notification shares the dedup key."""

        query = self.session.query(NotificationModel.id).filter(
            NotificationModel.vehicle_id == vehicle_id,
            NotificationModel.type == notification_type.value,
            NotificationModel.due_date == due_date,
            NotificationModel.is_dismissed.is_(False),
        )
        return self.session.query(query.exists()).scalar()

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def mark_as_read(self, notification_id: int) -> Notification | None:
        return self._set_flag(notification_id, is_read=True)

    def dismiss(self, notification_id: int) -> Notification | None:
        return self._set_flag(notification_id, is_dismissed=True)

    def mark_all_as_read(self) -> int:
        """Flip every unread notification to read and return how many changed."""

        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.is_read.is_(False))
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )

    def _set_flag(self, notification_id: int, **flags: bool) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return None
        for name, value in flags.items():
            setattr(model, name, value)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: NotificationModel, notification: Notification) -> None:
        model.created_at = (
            ensure_app_naive_datetime(notification.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone())
        )
        model.vehicle_id = notification.vehicle_id
        model.type = NotificationType(notification.type).value
        model.message_key = notification.message_key
        model.message_variables = dict(notification.message_variables or {})
        model.due_date = notification.due_date
        model.priority = NotificationPriority(notification.priority).value
        model.is_read = notification.is_read
        model.is_dismissed = notification.is_dismissed

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            vehicle_id=model.vehicle_id,
            type=NotificationType(model.type),
            message_key=model.message_key,
            message_variables=dict(model.message_variables or {}),
            due_date=model.due_date,
            priority=NotificationPriority(model.priority),
            created_at=ensure_app_timezone(model.created_at),
            is_read=bool(model.is_read),
            is_dismissed=bool(model.is_dismissed),
        )


__all__ = ["NotificationRepository"]
