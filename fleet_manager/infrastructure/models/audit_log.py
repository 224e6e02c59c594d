"""SQLAlchemy model for the append-only audit trail."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from fleet_manager.infrastructure.database import Base
from fleet_manager.utils import now_in_app_naive_datetime


class AuditLogModel(Base):
    """Database representation of audit events."""

    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=True)
    username = Column(String(100), nullable=True)
    action = Column(String(50), nullable=False)
    page = Column(String(100), nullable=False)
    field = Column(String(100), nullable=True)
    old_value = Column(Text, nullable=True)
    new_value = Column(Text, nullable=True)
    details = Column(Text, nullable=True)
    ip_address = Column(String(64), nullable=True)
    user_agent = Column(Text, nullable=True)
    timestamp = Column(
        DateTime, nullable=False, default=now_in_app_naive_datetime, index=True
    )


__all__ = ["AuditLogModel"]
