"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
)
from sqlalchemy.sql import expression

from fleet_manager.infrastructure.database import Base
from fleet_manager.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for reminder notifications."""

    __tablename__ = "notifications"
    __table_args__ = (
        Index(
            "ix_notifications_dedup_key",
            "vehicle_id",
            "type",
            "due_date",
            "is_dismissed",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    vehicle_id = Column(
        String(32),
        ForeignKey("vehicles.id", ondelete="CASCADE"),
        nullable=False,
    )
    type = Column(String(32), nullable=False)
    message_key = Column(String(64), nullable=False)
    message_variables = Column(JSON, nullable=False, default=dict)
    due_date = Column(Date, nullable=False)
    priority = Column(String(16), nullable=False, default="normal")
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    is_read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    is_dismissed = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )


__all__ = ["NotificationModel"]
