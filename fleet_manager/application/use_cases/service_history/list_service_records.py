"""Use case for listing service history."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from fleet_manager.domain.entities import ServiceRecord
from fleet_manager.domain.exceptions import ValidationError
from fleet_manager.infrastructure.repositories import ServiceRecordRepository
from fleet_manager.infrastructure.repositories.service_record_repository import (
    DEFAULT_ORDER,
    DEFAULT_SORT,
)


def list_service_records(
    session: Session,
    *,
    vehicle_id: str | None = None,
    sort: str = DEFAULT_SORT,
    order: str = DEFAULT_ORDER,
    limit: int = 50,
    offset: int = 0,
) -> Sequence[ServiceRecord]:
    """Return a page of service records, optionally for one vehicle."""

    if limit < 0 or offset < 0:
        raise ValidationError("limit and offset must not be negative")
    return ServiceRecordRepository(session).list(
        vehicle_id=vehicle_id,
        sort=sort,
        order=order,
        limit=limit,
        offset=offset,
    )
