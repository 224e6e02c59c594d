"""Use case for correcting a service record."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fleet_manager.application.use_cases.audit_logs import record_audit
from fleet_manager.domain.entities import Actor, AuditAction, ServiceRecord
from fleet_manager.domain.exceptions import (
    AuditWriteFailure,
    NotFoundError,
    TransactionFailure,
)
from fleet_manager.infrastructure.repositories import ServiceRecordRepository

from .snapshots import SERVICE_HISTORY_PAGE, SERVICE_RECORD_FIELD, change_snapshot
from .validators import (
    ensure_required,
    optional_text,
    parse_cost,
    parse_date,
    parse_mileage,
)


def update_service_record(
    session: Session, record_id: int, data: Mapping[str, Any], actor: Actor
) -> ServiceRecord:
    """Overwrite the mutable fields of a service record.

    ``documents`` is kept when not supplied. The linked reminder and the
    vehicle rollups are left as they are. The before/after audit entry is part
    of the same transaction, so the update is rolled back if it cannot be
    recorded.
    """

    repository = ServiceRecordRepository(session)
    existing = repository.get(record_id)
    if existing is None:
        raise NotFoundError("Service history record not found")

    ensure_required(data, "service_type", "service_date")
    documents = data.get("documents")
    updated = replace(
        existing,
        service_type=str(data["service_type"]).strip(),
        service_date=parse_date(data["service_date"]),
        mileage=parse_mileage(data.get("mileage")),
        cost=parse_cost(data.get("cost")),
        technician=optional_text(data.get("technician")),
        location=optional_text(data.get("location")),
        notes=optional_text(data.get("notes")),
        expense_category=optional_text(data.get("expense_category")),
        documents=documents if documents is not None else existing.documents,
    )

    try:
        saved = repository.update(updated)
        record_audit(
            session,
            action=AuditAction.UPDATE,
            page=SERVICE_HISTORY_PAGE,
            actor=actor,
            field=SERVICE_RECORD_FIELD,
            old_value=change_snapshot(existing),
            new_value=change_snapshot(saved, include_category=True),
            commit=False,
        )
        session.commit()
    except AuditWriteFailure:
        session.rollback()
        raise
    except SQLAlchemyError as exc:
        session.rollback()
        raise TransactionFailure("Could not update the service record") from exc

    return repository.get(record_id) or saved


__all__ = ["update_service_record"]
