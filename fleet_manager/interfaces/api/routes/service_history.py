"""Routes for logging and maintaining completed services."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from fleet_manager.application.use_cases.service_history import (
    complete_reminder as complete_reminder_uc,
    create_service_record as create_service_record_uc,
    delete_service_record as delete_service_record_uc,
    get_service_record as get_service_record_uc,
    list_service_records as list_service_records_uc,
    update_service_record as update_service_record_uc,
)
from fleet_manager.domain.entities import Actor, ServiceRecord
from fleet_manager.infrastructure.database import get_db
from fleet_manager.interfaces.api.dependencies import get_current_actor
from fleet_manager.interfaces.api.routes_helpers import translate_errors
from fleet_manager.interfaces.api.schemas import (
    ReminderCompletion,
    ServiceRecordCreate,
    ServiceRecordRead,
    ServiceRecordUpdate,
)

router = APIRouter(tags=["service_history"])


def _record_to_schema(record: ServiceRecord) -> ServiceRecordRead:
    return ServiceRecordRead.model_validate(record)


@router.get("/service-history/", response_model=list[ServiceRecordRead])
def list_service_history(
    vehicle_id: str | None = None,
    sort: str = "service_date",
    order: str = "desc",
    limit: int = Query(default=50, ge=0, le=500),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
    _: Actor = Depends(get_current_actor),
) -> list[ServiceRecordRead]:
    with translate_errors():
        records = list_service_records_uc(
            db, vehicle_id=vehicle_id, sort=sort, order=order, limit=limit, offset=offset
        )
    return [_record_to_schema(record) for record in records]


@router.get("/vehicles/{vehicle_id}/service-history", response_model=list[ServiceRecordRead])
def list_vehicle_service_history(
    vehicle_id: str,
    sort: str = "service_date",
    order: str = "desc",
    limit: int = Query(default=50, ge=0, le=500),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
    _: Actor = Depends(get_current_actor),
) -> list[ServiceRecordRead]:
    """Return the service history of a single vehicle."""

    with translate_errors():
        records = list_service_records_uc(
            db, vehicle_id=vehicle_id, sort=sort, order=order, limit=limit, offset=offset
        )
    return [_record_to_schema(record) for record in records]


@router.get("/service-history/{record_id}", response_model=ServiceRecordRead)
def read_service_record(
    record_id: int,
    db: Session = Depends(get_db),
    _: Actor = Depends(get_current_actor),
) -> ServiceRecordRead:
    with translate_errors():
        record = get_service_record_uc(db, record_id)
    return _record_to_schema(record)


@router.post(
    "/service-history/",
    response_model=ServiceRecordRead,
    status_code=status.HTTP_201_CREATED,
)
def create_service_record(
    payload: ServiceRecordCreate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
) -> ServiceRecordRead:
    """Log a completed service, closing the referenced reminder if any."""

    with translate_errors():
        record = create_service_record_uc(db, payload.model_dump(exclude_unset=True), actor)
    return _record_to_schema(record)


@router.put("/service-history/{record_id}", response_model=ServiceRecordRead)
def update_service_record(
    record_id: int,
    payload: ServiceRecordUpdate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
) -> ServiceRecordRead:
    with translate_errors():
        record = update_service_record_uc(
            db, record_id, payload.model_dump(exclude_unset=True), actor
        )
    return _record_to_schema(record)


@router.delete("/service-history/{record_id}", response_model=ServiceRecordRead)
def delete_service_record(
    record_id: int,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
) -> ServiceRecordRead:
    """Delete a service record and return it; the closed reminder stays closed."""

    with translate_errors():
        record = delete_service_record_uc(db, record_id, actor)
    return _record_to_schema(record)


@router.post(
    "/reminders/{reminder_id}/complete",
    response_model=ServiceRecordRead,
    status_code=status.HTTP_201_CREATED,
)
def complete_reminder(
    reminder_id: int,
    payload: ReminderCompletion | None = None,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_actor),
) -> ServiceRecordRead:
    """Record the service that fulfils a reminder."""

    overrides = payload.model_dump(exclude_unset=True) if payload is not None else {}
    with translate_errors():
        record = complete_reminder_uc(db, reminder_id, actor, overrides)
    return _record_to_schema(record)


__all__ = ["router"]
