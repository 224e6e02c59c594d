"""Schemas for service history endpoints."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict


class ServiceRecordUpdate(BaseModel):
    """Payload accepted when correcting a service record.

    Required fields are checked by the use case so that missing values are
    reported as validation errors with a readable message.
    """

    model_config = ConfigDict(extra="forbid")

    service_type: str | None = None
    service_date: date | None = None
    mileage: int | None = None
    cost: Decimal | None = None
    technician: str | None = None
    location: str | None = None
    notes: str | None = None
    expense_category: str | None = None
    documents: Any = None


class ServiceRecordCreate(ServiceRecordUpdate):
    """Payload required to log a completed service."""

    vehicle_id: str | None = None
    reminder_id: int | None = None


class ReminderCompletion(ServiceRecordUpdate):
    """Optional overrides used when completing a reminder."""


class ServiceRecordRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    vehicle_id: str
    service_type: str
    service_date: date
    mileage: int | None
    cost: Decimal | None
    technician: str | None
    location: str | None
    notes: str | None
    expense_category: str | None
    reminder_id: int | None
    documents: Any = None
    created_by: int | None
    created_at: datetime | None
    vehicle_make: str | None = None
    vehicle_model: str | None = None


__all__ = [
    "ReminderCompletion",
    "ServiceRecordCreate",
    "ServiceRecordRead",
    "ServiceRecordUpdate",
]
