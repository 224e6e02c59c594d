"""Persistence helpers for the vehicle registry fields the core touches."""

from __future__ import annotations

from datetime import date

from sqlalchemy.orm import Session

from fleet_manager.domain.entities import Vehicle
from fleet_manager.infrastructure.models import VehicleModel


class VehicleRepository:
    """Read vehicles and update their service rollup fields."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def exists(self, vehicle_id: str) -> bool:
        query = self.session.query(VehicleModel.id).filter(VehicleModel.id == vehicle_id)
        return self.session.query(query.exists()).scalar()

    def update_service_rollup(
        self,
        vehicle_id: str,
        *,
        last_service: date,
        mileage: str | None = None,
    ) -> Vehicle:
        """Record the latest service date and, when given, the odometer reading."""

        model = self.session.get(VehicleModel, vehicle_id)
        if model is None:
            msg = f"Vehicle with id {vehicle_id} not found"
            raise ValueError(msg)
        model.last_service = last_service
        if mileage is not None:
            model.mileage = mileage
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: VehicleModel) -> Vehicle:
        return Vehicle(
            id=model.id,
            status=model.status,
            type=model.type,
            last_service=model.last_service,
            documents=bool(model.documents),
            make=model.make,
            model=model.model,
            year=model.year,
            mileage=model.mileage,
        )


__all__ = ["VehicleRepository"]
