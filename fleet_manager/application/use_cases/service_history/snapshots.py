"""Audit snapshots of service records."""

from __future__ import annotations

from typing import Any, Final

from fleet_manager.domain.entities import ServiceRecord

SERVICE_HISTORY_PAGE: Final[str] = "Service History"
SERVICE_RECORD_FIELD: Final[str] = "service_record"


def _iso(value: Any) -> str | None:
    return value.isoformat() if value is not None else None


def _number(value: Any) -> str | None:
    return str(value) if value is not None else None


def created_snapshot(record: ServiceRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "vehicle_id": record.vehicle_id,
        "service_type": record.service_type,
        "service_date": _iso(record.service_date),
        "mileage": record.mileage,
        "reminder_id": record.reminder_id,
    }


def change_snapshot(record: ServiceRecord, *, include_category: bool = False) -> dict[str, Any]:
    snapshot = {
        "id": record.id,
        "service_type": record.service_type,
        "service_date": _iso(record.service_date),
        "mileage": record.mileage,
        "cost": _number(record.cost),
    }
    if include_category:
        snapshot["expense_category"] = record.expense_category
    return snapshot


def deleted_snapshot(record: ServiceRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "vehicle_id": record.vehicle_id,
        "service_type": record.service_type,
        "service_date": _iso(record.service_date),
    }


__all__ = [
    "SERVICE_HISTORY_PAGE",
    "SERVICE_RECORD_FIELD",
    "change_snapshot",
    "created_snapshot",
    "deleted_snapshot",
]
