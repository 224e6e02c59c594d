"""Routes for inspecting and appending to the audit trail."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from fleet_manager.application.use_cases.audit_logs import (
    get_audit_log as get_audit_log_uc,
    query_audit as query_audit_uc,
    record_audit as record_audit_uc,
)
from fleet_manager.domain.entities import Actor, AuditLog
from fleet_manager.infrastructure.database import get_db
from fleet_manager.interfaces.api.dependencies import get_current_actor, require_admin
from fleet_manager.interfaces.api.routes_helpers import translate_errors
from fleet_manager.interfaces.api.schemas import (
    AuditLogCreate,
    AuditLogPageRead,
    AuditLogRead,
)

router = APIRouter(prefix="/audit-logs", tags=["audit_logs"])


def _audit_log_to_read_model(entry: AuditLog) -> AuditLogRead:
    return AuditLogRead.model_validate(entry)


@router.get("/", response_model=AuditLogPageRead)
def list_audit_logs(
    action: str | None = None,
    page: str | None = None,
    user_id: int | None = None,
    username: str | None = None,
    start_date: datetime | None = None,
    end_date: datetime | None = None,
    search: str | None = None,
    limit: int = Query(default=50, ge=0, le=500),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
    _: Actor = Depends(require_admin),
) -> AuditLogPageRead:
    """Return matching audit entries newest first with the total match count."""

    with translate_errors():
        result = query_audit_uc(
            db,
            action=action,
            page=page,
            user_id=user_id,
            username=username,
            start_date=start_date,
            end_date=end_date,
            search=search,
            limit=limit,
            offset=offset,
        )
    return AuditLogPageRead(
        entries=[_audit_log_to_read_model(entry) for entry in result.entries],
        total=result.total,
    )


@router.get("/{entry_id}", response_model=AuditLogRead)
def read_audit_log(
    entry_id: int,
    db: Session = Depends(get_db),
    _: Actor = Depends(require_admin),
) -> AuditLogRead:
    with translate_errors():
        entry = get_audit_log_uc(db, entry_id)
    return _audit_log_to_read_model(entry)


@router.post("/", response_model=AuditLogRead, status_code=status.HTTP_201_CREATED)
def create_audit_log(
    payload: AuditLogCreate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
) -> AuditLogRead:
    """Record an event reported by the client on behalf of the caller."""

    with translate_errors():
        entry = record_audit_uc(
            db,
            action=payload.action,
            page=payload.page,
            actor=actor,
            field=payload.field,
            old_value=payload.old_value,
            new_value=payload.new_value,
            details=payload.details,
        )
    return _audit_log_to_read_model(entry)


__all__ = ["router"]
