"""Domain entity representing a fleet vehicle."""

from dataclasses import dataclass
from datetime import date


@dataclass
class Vehicle:
    """Registry attributes of a vehicle that the core reads or rolls up."""

    id: str
    status: str | None
    type: str | None
    last_service: date | None
    documents: bool
    make: str | None
    model: str | None
    year: int | None
    mileage: str | None


__all__ = ["Vehicle"]
