"""Persistence layer for service history records."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from sqlalchemy.orm import Session

from fleet_manager.domain.entities import ServiceRecord
from fleet_manager.infrastructure.models import ServiceRecordModel, VehicleModel
from fleet_manager.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

SORTABLE_COLUMNS: Final[dict[str, object]] = {
    "service_date": ServiceRecordModel.service_date,
    "service_type": ServiceRecordModel.service_type,
    "vehicle_id": ServiceRecordModel.vehicle_id,
    "cost": ServiceRecordModel.cost,
    "mileage": ServiceRecordModel.mileage,
    "id": ServiceRecordModel.id,
    "created_at": ServiceRecordModel.created_at,
}
DEFAULT_SORT: Final[str] = "service_date"
DEFAULT_ORDER: Final[str] = "desc"


class ServiceRecordRepository:
    """Provide CRUD operations for :class:`ServiceRecord` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, record_id: int) -> ServiceRecord | None:
        row = self._base_query().filter(ServiceRecordModel.id == record_id).first()
        if row is None:
            return None
        model, make, model_name = row
        return self._to_entity(model, make=make, model_name=model_name)

    def list(
        self,
        *,
        vehicle_id: str | None = None,
        sort: str = DEFAULT_SORT,
        order: str = DEFAULT_ORDER,
        limit: int | None = 50,
        offset: int = 0,
    ) -> Sequence[ServiceRecord]:
        """Return records, sorted on an allow-listed column.

        Unknown ``sort`` or ``order`` values fall back to ``service_date``
        descending.
        """

        column = SORTABLE_COLUMNS.get(sort, SORTABLE_COLUMNS[DEFAULT_SORT])
        direction = (order or "").lower()
        if direction not in {"asc", "desc"}:
            direction = DEFAULT_ORDER

        query = self._base_query()
        if vehicle_id is not None:
            query = query.filter(ServiceRecordModel.vehicle_id == vehicle_id)
        ordering = column.asc() if direction == "asc" else column.desc()
        query = query.order_by(ordering, ServiceRecordModel.id.desc())
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return [
            self._to_entity(model, make=make, model_name=model_name)
            for model, make, model_name in query.all()
        ]

    def create(self, record: ServiceRecord) -> ServiceRecord:
        model = ServiceRecordModel()
        self._apply_entity_to_model(model, record)
        model.created_by = record.created_by
        model.created_at = (
            ensure_app_naive_datetime(record.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone())
        )
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def update(self, record: ServiceRecord) -> ServiceRecord:
        model = self.session.get(ServiceRecordModel, record.id)
        if model is None:
            msg = f"Service record with id {record.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, record)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def delete(self, record_id: int) -> bool:
        """Delete a record by id.

        Returns ``True`` when a record was removed and ``False`` when the
        requested record was not found.
        """

        model = self.session.get(ServiceRecordModel, record_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.flush()
        return True

    def _base_query(self):
        return self.session.query(
            ServiceRecordModel, VehicleModel.make, VehicleModel.model
        ).outerjoin(VehicleModel, ServiceRecordModel.vehicle_id == VehicleModel.id)

    @staticmethod
    def _apply_entity_to_model(model: ServiceRecordModel, record: ServiceRecord) -> None:
        model.vehicle_id = record.vehicle_id
        model.service_type = record.service_type
        model.service_date = record.service_date
        model.mileage = record.mileage
        model.cost = record.cost
        model.technician = record.technician
        model.location = record.location
        model.notes = record.notes
        model.expense_category = record.expense_category
        model.reminder_id = record.reminder_id
        model.documents = record.documents

    @staticmethod
    def _to_entity(
        model: ServiceRecordModel,
        *,
        make: str | None = None,
        model_name: str | None = None,
    ) -> ServiceRecord:
        return ServiceRecord(
            id=model.id,
            vehicle_id=model.vehicle_id,
            service_type=model.service_type,
            service_date=model.service_date,
            mileage=model.mileage,
            cost=model.cost,
            technician=model.technician,
            location=model.location,
            notes=model.notes,
            expense_category=model.expense_category,
            reminder_id=model.reminder_id,
            documents=model.documents,
            created_by=model.created_by,
            created_at=ensure_app_timezone(model.created_at),
            vehicle_make=make,
            vehicle_model=model_name,
        )


__all__ = ["DEFAULT_ORDER", "DEFAULT_SORT", "SORTABLE_COLUMNS", "ServiceRecordRepository"]
