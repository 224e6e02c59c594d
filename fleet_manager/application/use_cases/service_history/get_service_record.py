"""Use case for retrieving a single service record."""

from sqlalchemy.orm import Session

from fleet_manager.domain.entities import ServiceRecord
from fleet_manager.domain.exceptions import NotFoundError
from fleet_manager.infrastructure.repositories import ServiceRecordRepository


def get_service_record(session: Session, record_id: int) -> ServiceRecord:
    """Return the record identified by ``record_id`` or raise an error."""

    record = ServiceRecordRepository(session).get(record_id)
    if record is None:
        raise NotFoundError("Service history record not found")
    return record
