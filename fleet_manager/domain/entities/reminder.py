"""Domain entity representing a scheduled vehicle obligation."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass
class Reminder:
    """Obligation attached to a vehicle; disabled once it has been completed."""

    id: int | None
    vehicle_id: str
    name: str
    due_date: date
    enabled: bool = True
    updated_at: datetime | None = None


@dataclass
class ReminderWithVehicle:
    """Enabled reminder joined with the make and model of its vehicle."""

    reminder: Reminder
    make: str | None
    model: str | None

    @property
    def vehicle_label(self) -> str:
        return f"{self.make or ''} {self.model or ''} ({self.reminder.vehicle_id})"


__all__ = ["Reminder", "ReminderWithVehicle"]
