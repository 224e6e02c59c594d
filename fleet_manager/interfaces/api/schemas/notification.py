"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    vehicle_id: str
    type: str
    priority: str
    message_key: str
    message_variables: dict[str, Any] = Field(default_factory=dict)
    due_date: date
    created_at: datetime | None = None
    is_read: bool
    is_dismissed: bool
    title: str
    message: str


class NotificationGenerateResponse(BaseModel):
    """Outcome of a generation run."""

    created: int
    notifications: list[NotificationRead] = Field(default_factory=list)


class NotificationBulkUpdateResponse(BaseModel):
    """Number of notifications changed by a bulk operation."""

    updated: int


__all__ = [
    "NotificationBulkUpdateResponse",
    "NotificationGenerateResponse",
    "NotificationRead",
]
