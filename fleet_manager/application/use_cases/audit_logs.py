"""Use cases for appending to and querying the audit trail."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fleet_manager.domain.entities import Actor, AuditAction, AuditLog, AuditLogPage
from fleet_manager.domain.exceptions import (
    AuditWriteFailure,
    NotFoundError,
    ValidationError,
)
from fleet_manager.infrastructure.repositories import AuditLogRepository

logger = logging.getLogger(__name__)


def serialize_audit_value(value: Any) -> str | None:
    """Return ``value`` as the opaque text stored in the audit trail."""

    if value is None:
        return None
    if isinstance(value, str):
        return value
    return json.dumps(value, default=str)


def record_audit(
    session: Session,
    *,
    action: AuditAction | str,
    page: str,
    actor: Actor | None = None,
    user_id: int | None = None,
    username: str | None = None,
    field: str | None = None,
    old_value: Any = None,
    new_value: Any = None,
    details: Any = None,
    ip_address: str | None = None,
    user_agent: str | None = None,
    commit: bool = True,
) -> AuditLog:
    """Append one audit entry.

    With ``commit=False`` the entry joins the caller's open transaction and the
    caller decides whether it is committed or rolled back. Persistence errors
    surface as :class:`AuditWriteFailure` either way.
    """

    action_value = action.value if isinstance(action, AuditAction) else action
    if not action_value or not str(action_value).strip():
        raise ValidationError("Audit action is required")
    if not page or not page.strip():
        raise ValidationError("Audit page is required")

    if actor is not None:
        user_id = user_id if user_id is not None else actor.id
        username = username or actor.username
        ip_address = ip_address or actor.ip_address
        user_agent = user_agent or actor.user_agent

    entry = AuditLog(
        id=None,
        action=str(action_value),
        page=page,
        user_id=user_id,
        username=username,
        field=field,
        old_value=serialize_audit_value(old_value),
        new_value=serialize_audit_value(new_value),
        details=serialize_audit_value(details),
        ip_address=ip_address,
        user_agent=user_agent,
        timestamp=None,
    )

    repository = AuditLogRepository(session)
    try:
        saved = repository.create(entry)
        if commit:
            session.commit()
    except SQLAlchemyError as exc:
        if commit:
            session.rollback()
        raise AuditWriteFailure(
            f"Could not write audit entry {action_value} on {page}"
        ) from exc
    return saved


def record_audit_safely(session: Session, **entry: Any) -> AuditLog | None:
    """Append an audit entry after the audited change has been committed.

    Failures are logged and swallowed so audit unavailability never fails an
    operation that already succeeded.
    """

    entry["commit"] = True
    try:
        return record_audit(session, **entry)
    except AuditWriteFailure:
        logger.exception(
            "Post-commit audit entry %s on %s was not recorded",
            entry.get("action"),
            entry.get("page"),
        )
        return None


def query_audit(
    session: Session,
    *,
    action: str | None = None,
    page: str | None = None,
    user_id: int | None = None,
    username: str | None = None,
    start_date: datetime | None = None,
    end_date: datetime | None = None,
    search: str | None = None,
    limit: int = 50,
    offset: int = 0,
) -> AuditLogPage:
    """Return audit entries newest first together with the total match count."""

    if limit < 0 or offset < 0:
        raise ValidationError("limit and offset must not be negative")
    repository = AuditLogRepository(session)
    return repository.query(
        action=action,
        page=page,
        user_id=user_id,
        username=username,
        start_date=start_date,
        end_date=end_date,
        search=search,
        limit=limit,
        offset=offset,
    )


def get_audit_log(session: Session, entry_id: int) -> AuditLog:
    """Return an audit log entry identified by ``entry_id`` or raise an error."""

    entry = AuditLogRepository(session).get(entry_id)
    if entry is None:
        raise NotFoundError("Audit log entry not found")
    return entry


__all__ = [
    "get_audit_log",
    "query_audit",
    "record_audit",
    "record_audit_safely",
    "serialize_audit_value",
]
