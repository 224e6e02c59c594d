"""Persistence helpers for reminder entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from fleet_manager.domain.entities import Reminder, ReminderWithVehicle
from fleet_manager.infrastructure.models import ReminderModel, VehicleModel
from fleet_manager.utils import ensure_app_timezone, now_in_app_naive_datetime


class ReminderRepository:
    """Provide the reminder reads and transitions used by the core."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, reminder_id: int) -> Reminder | None:
        model = self.session.get(ReminderModel, reminder_id)
        return self._to_entity(model) if model else None

    def list_enabled_with_vehicles(self) -> Sequence[ReminderWithVehicle]:
        """Return enabled reminders joined with vehicle make/model.

        Rows are ordered by vehicle id and then due date, ascending.
        """

        rows = (
            self.session.query(ReminderModel, VehicleModel.make, VehicleModel.model)
            .join(VehicleModel, ReminderModel.vehicle_id == VehicleModel.id)
            .filter(ReminderModel.enabled.is_(True))
            .order_by(
                ReminderModel.vehicle_id.asc(),
                ReminderModel.due_date.asc(),
                ReminderModel.id.asc(),
            )
            .all()
        )
        return [
            ReminderWithVehicle(reminder=self._to_entity(model), make=make, model=model_name)
            for model, make, model_name in rows
        ]

    def disable(self, reminder_id: int) -> int:
        """Mark the reminder as completed and return the number of rows changed."""

        return (
            self.session.query(ReminderModel)
            .filter(ReminderModel.id == reminder_id)
            .update(
                {
                    ReminderModel.enabled: False,
                    ReminderModel.updated_at: now_in_app_naive_datetime(),
                },
                synchronize_session="fetch",
            )
        )

    @staticmethod
    def _to_entity(model: ReminderModel) -> Reminder:
        return Reminder(
            id=model.id,
            vehicle_id=model.vehicle_id,
            name=model.name,
            due_date=model.due_date,
            enabled=bool(model.enabled),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["ReminderRepository"]
