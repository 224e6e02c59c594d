"""Persistence layer for audit log records."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from fleet_manager.domain.entities import AuditLog, AuditLogPage
from fleet_manager.infrastructure.models import AuditLogModel
from fleet_manager.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


def _contains(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class AuditLogRepository:
    """Append and query :class:`AuditLog` entries.

    The trail is append-only, so no update or delete helpers are provided.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, entry: AuditLog) -> AuditLog:
        model = AuditLogModel()
        self._apply_entity_to_model(model, entry)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def get(self, entry_id: int) -> AuditLog | None:
        """Return an audit entry by its primary key, if present."""

        model = self.session.get(AuditLogModel, entry_id)
        if model is None:
            return None
        return self._to_entity(model)

    def query(
        self,
        *,
        action: str | None = None,
        page: str | None = None,
        user_id: int | None = None,
        username: str | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        search: str | None = None,
        limit: int | None = 50,
        offset: int = 0,
    ) -> AuditLogPage:
        """Return the filtered page of entries and the unpaginated total."""

        query = self.session.query(AuditLogModel)
        if action:
            query = query.filter(AuditLogModel.action == action)
        if page:
            query = query.filter(AuditLogModel.page == page)
        if user_id is not None:
            query = query.filter(AuditLogModel.user_id == user_id)
        if username:
            query = query.filter(
                AuditLogModel.username.ilike(_contains(username), escape="\\")
            )
        if start_date is not None:
            query = query.filter(
                AuditLogModel.timestamp >= ensure_app_naive_datetime(start_date)
            )
        if end_date is not None:
            query = query.filter(
                AuditLogModel.timestamp <= ensure_app_naive_datetime(end_date)
            )
        if search:
            pattern = _contains(search)
            query = query.filter(
                or_(
                    AuditLogModel.field.ilike(pattern, escape="\\"),
                    AuditLogModel.old_value.ilike(pattern, escape="\\"),
                    AuditLogModel.new_value.ilike(pattern, escape="\\"),
                )
            )

        total = query.order_by(None).count()

        query = query.order_by(AuditLogModel.timestamp.desc(), AuditLogModel.id.desc())
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        entries = [self._to_entity(model) for model in query.all()]
        return AuditLogPage(entries=entries, total=total)

    @staticmethod
    def _to_entity(model: AuditLogModel) -> AuditLog:
        return AuditLog(
            id=model.id,
            action=model.action,
            page=model.page,
            user_id=model.user_id,
            username=model.username,
            field=model.field,
            old_value=model.old_value,
            new_value=model.new_value,
            details=model.details,
            ip_address=model.ip_address,
            user_agent=model.user_agent,
            timestamp=ensure_app_timezone(model.timestamp),
        )

    @staticmethod
    def _apply_entity_to_model(model: AuditLogModel, entry: AuditLog) -> None:
        model.user_id = entry.user_id
        model.username = entry.username
        model.action = entry.action
        model.page = entry.page
        model.field = entry.field
        model.old_value = entry.old_value
        model.new_value = entry.new_value
        model.details = entry.details
        model.ip_address = entry.ip_address
        model.user_agent = entry.user_agent
        model.timestamp = (
            ensure_app_naive_datetime(entry.timestamp)
            or ensure_app_naive_datetime(now_in_app_timezone())
        )


__all__ = ["AuditLogRepository"]
