"""SQLAlchemy model for vehicle reminders."""

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from fleet_manager.infrastructure.database import Base
from fleet_manager.utils import now_in_app_naive_datetime


class ReminderModel(Base):
    """Database representation of a scheduled vehicle obligation."""

    __tablename__ = "reminders"

    id = Column(Integer, primary_key=True, index=True)
    vehicle_id = Column(
        String(32),
        ForeignKey("vehicles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(120), nullable=False)
    due_date = Column(Date, nullable=False)
    enabled = Column(
        Boolean,
        nullable=False,
        default=True,
        server_default=expression.true(),
    )
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=True,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )

    vehicle = relationship("VehicleModel", back_populates="reminders")


__all__ = ["ReminderModel"]
