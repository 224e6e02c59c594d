"""Use case for deleting a service record."""

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

from .snapshots import SERVICE_HISTORY_PAGE, SERVICE_RECORD_FIELD, deleted_snapshot


def delete_service_record(session: Session, record_id: int, actor: Actor) -> ServiceRecord:
    """Delete the record and return it as it was before removal.

    Completion is one-way: a reminder closed by this record stays disabled.
    """

    repository = ServiceRecordRepository(session)
    existing = repository.get(record_id)
    if existing is None:
        raise NotFoundError("Service history record not found")

    try:
        repository.delete(record_id)
        record_audit(
            session,
            action=AuditAction.DELETE,
            page=SERVICE_HISTORY_PAGE,
            actor=actor,
            field=SERVICE_RECORD_FIELD,
            old_value=deleted_snapshot(existing),
            commit=False,
        )
        session.commit()
    except AuditWriteFailure:
        session.rollback()
        raise
    except SQLAlchemyError as exc:
        session.rollback()
        raise TransactionFailure("Could not delete the service record") from exc

    return existing


__all__ = ["delete_service_record"]
