"""SQLAlchemy model for completed maintenance records."""

from sqlalchemy import (
    JSON,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)

from fleet_manager.infrastructure.database import Base
from fleet_manager.utils import now_in_app_naive_datetime


class ServiceRecordModel(Base):
    """Database representation of a service history entry."""

    __tablename__ = "service_history"

    id = Column(Integer, primary_key=True, index=True)
    vehicle_id = Column(
        String(32),
        ForeignKey("vehicles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    service_type = Column(String(120), nullable=False)
    service_date = Column(Date, nullable=False)
    mileage = Column(Integer, nullable=True)
    cost = Column(Numeric(12, 2), nullable=True)
    technician = Column(String(120), nullable=True)
    location = Column(String(200), nullable=True)
    notes = Column(Text, nullable=True)
    expense_category = Column(String(50), nullable=True)
    reminder_id = Column(
        Integer,
        ForeignKey("reminders.id", ondelete="SET NULL"),
        nullable=True,
    )
    documents = Column(JSON, nullable=True)
    created_by = Column(Integer, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ServiceRecordModel"]
