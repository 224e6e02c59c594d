"""Domain entity representing a completed maintenance event."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any


@dataclass
class ServiceRecord:
    """Service performed on a vehicle, optionally closing a reminder."""

    id: int | None
    vehicle_id: str
    service_type: str
    service_date: date
    mileage: int | None = None
    cost: Decimal | None = None
    technician: str | None = None
    location: str | None = None
    notes: str | None = None
    expense_category: str | None = None
    reminder_id: int | None = None
    documents: Any = None
    created_by: int | None = None
    created_at: datetime | None = None
    vehicle_make: str | None = None
    vehicle_model: str | None = None


__all__ = ["ServiceRecord"]
