"""Domain entities describing audit trail entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class AuditAction(str, Enum):
    """Verbs recorded in the audit trail."""

    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"
    DEBUG = "Debug"
    LOGIN = "Login"
    LOGOUT = "Logout"
    VIEW = "View"


@dataclass
class AuditLog:
    """Immutable record of a state-changing action."""

    id: int | None
    action: str
    page: str
    user_id: int | None = None
    username: str | None = None
    field: str | None = None
    old_value: str | None = None
    new_value: str | None = None
    details: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None
    timestamp: datetime | None = None


@dataclass
class AuditLogPage:
    """One page of audit entries plus the total matching the filters."""

    entries: list[AuditLog] = field(default_factory=list)
    total: int = 0


__all__ = ["AuditAction", "AuditLog", "AuditLogPage"]
