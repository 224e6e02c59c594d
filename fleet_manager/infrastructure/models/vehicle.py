"""SQLAlchemy model for registered fleet vehicles."""

from sqlalchemy import Boolean, Column, Date, Integer, String
from sqlalchemy.orm import relationship

from fleet_manager.infrastructure.database import Base


class VehicleModel(Base):
    """Database representation of a fleet vehicle."""

    __tablename__ = "vehicles"

    id = Column(String(32), primary_key=True)
    status = Column(String(32), nullable=True)
    type = Column(String(50), nullable=True)
    last_service = Column(Date, nullable=True)
    documents = Column(Boolean, nullable=False, default=False)
    make = Column(String(50), nullable=True)
    model = Column(String(50), nullable=True)
    year = Column(Integer, nullable=True)
    mileage = Column(String(32), nullable=True)

    reminders = relationship(
        "ReminderModel",
        back_populates="vehicle",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["VehicleModel"]
