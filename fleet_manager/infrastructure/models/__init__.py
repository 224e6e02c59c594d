"""ORM models used by the application infrastructure."""

from .audit_log import AuditLogModel
from .notification import NotificationModel
from .reminder import ReminderModel
from .service_record import ServiceRecordModel
from .vehicle import VehicleModel

__all__ = [
    "AuditLogModel",
    "NotificationModel",
    "ReminderModel",
    "ServiceRecordModel",
    "VehicleModel",
]
