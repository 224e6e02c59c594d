"""Repository implementations for infrastructure layer."""

from .audit_log_repository import AuditLogRepository
from .notification_repository import NotificationRepository
from .reminder_repository import ReminderRepository
from .service_record_repository import ServiceRecordRepository
from .vehicle_repository import VehicleRepository

__all__ = [
    "AuditLogRepository",
    "NotificationRepository",
    "ReminderRepository",
    "ServiceRecordRepository",
    "VehicleRepository",
]
