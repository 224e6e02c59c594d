"""Schemas for audit log endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AuditLogCreate(BaseModel):
    """Client-reported event to append to the audit trail."""

    action: str = Field(..., min_length=1, max_length=50)
    page: str = Field(..., min_length=1, max_length=100)
    field: str | None = Field(default=None, max_length=100)
    old_value: Any = None
    new_value: Any = None
    details: Any = None


class AuditLogRead(BaseModel):
    """Representation of an audit log entry returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int | None
    username: str | None
    action: str
    page: str
    field: str | None
    old_value: str | None
    new_value: str | None
    details: str | None
    ip_address: str | None
    user_agent: str | None
    timestamp: datetime | None


class AuditLogPageRead(BaseModel):
    entries: list[AuditLogRead]
    total: int


__all__ = ["AuditLogCreate", "AuditLogPageRead", "AuditLogRead"]
