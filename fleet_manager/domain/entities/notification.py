"""Domain entity representing a reminder notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any


class NotificationType(str, Enum):
    """Category inferred from the reminder that produced the notification."""

    INSURANCE = "insurance"
    MAINTENANCE = "maintenance"
    ROADWORTHINESS = "roadworthiness"
    OTHER = "other"


class NotificationPriority(str, Enum):
    """Urgency of a notification; ``HIGH`` sorts before ``NORMAL``."""

    NORMAL = "normal"
    HIGH = "high"


@dataclass
class Notification:
    """Materialized, user-facing record generated from a due reminder."""

    id: int | None
    vehicle_id: str
    type: NotificationType
    message_key: str
    due_date: date
    priority: NotificationPriority
    message_variables: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    is_read: bool = False
    is_dismissed: bool = False


__all__ = ["Notification", "NotificationPriority", "NotificationType"]
