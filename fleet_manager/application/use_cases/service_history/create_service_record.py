"""Use case for recording a completed service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fleet_manager.application.use_cases.audit_logs import record_audit_safely
from fleet_manager.domain.entities import Actor, AuditAction, ServiceRecord
from fleet_manager.domain.exceptions import NotFoundError, TransactionFailure
from fleet_manager.infrastructure.repositories import (
    ReminderRepository,
    ServiceRecordRepository,
    VehicleRepository,
)

from .snapshots import SERVICE_HISTORY_PAGE, SERVICE_RECORD_FIELD, created_snapshot
from .validators import (
    ensure_required,
    format_mileage,
    optional_text,
    parse_cost,
    parse_date,
    parse_mileage,
    parse_optional_int,
)

logger = logging.getLogger(__name__)


def create_service_record(
    session: Session, data: Mapping[str, Any], actor: Actor
) -> ServiceRecord:
    """Persist a service record and close the reminder it fulfils.

    Inserting the record, disabling ``reminder_id`` and rolling the service
    date and mileage up to the vehicle happen in one transaction. The audit
    entry is written after the commit; if it cannot be stored the failure is
    logged and the record is still returned.
    """

    ensure_required(data, "vehicle_id", "service_type", "service_date")
    vehicle_id = str(data["vehicle_id"]).strip()
    service_date = parse_date(data["service_date"])
    mileage = parse_mileage(data.get("mileage"))
    reminder_id = parse_optional_int(data.get("reminder_id"), field_name="reminder_id")

    vehicles = VehicleRepository(session)
    if not vehicles.exists(vehicle_id):
        raise NotFoundError("Vehicle not found")

    reminders = ReminderRepository(session)
    if reminder_id is not None:
        reminder = reminders.get(reminder_id)
        if reminder is None:
            raise NotFoundError("Reminder not found")
        if reminder.vehicle_id != vehicle_id:
            logger.warning(
                "Service record for vehicle %s closes reminder %s of vehicle %s",
                vehicle_id,
                reminder_id,
                reminder.vehicle_id,
            )

    record = ServiceRecord(
        id=None,
        vehicle_id=vehicle_id,
        service_type=str(data["service_type"]).strip(),
        service_date=service_date,
        mileage=mileage,
        cost=parse_cost(data.get("cost")),
        technician=optional_text(data.get("technician")),
        location=optional_text(data.get("location")),
        notes=optional_text(data.get("notes")),
        expense_category=optional_text(data.get("expense_category")),
        reminder_id=reminder_id,
        documents=data.get("documents"),
        created_by=actor.id,
    )

    repository = ServiceRecordRepository(session)
    try:
        saved = repository.create(record)
        if reminder_id is not None:
            reminders.disable(reminder_id)
        vehicles.update_service_rollup(
            vehicle_id,
            last_service=service_date,
            mileage=format_mileage(mileage) if mileage is not None else None,
        )
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Service record for vehicle %s rolled back", vehicle_id)
        raise TransactionFailure("Could not save the service record") from exc
    except Exception:
        session.rollback()
        raise

    record_audit_safely(
        session,
        action=AuditAction.CREATE,
        page=SERVICE_HISTORY_PAGE,
        actor=actor,
        field=SERVICE_RECORD_FIELD,
        new_value=created_snapshot(saved),
    )
    return repository.get(saved.id) or saved


__all__ = ["create_service_record"]
