"""Domain entities exposed by the application."""

from .actor import Actor
from .audit_log import AuditAction, AuditLog, AuditLogPage
from .notification import Notification, NotificationPriority, NotificationType
from .reminder import Reminder, ReminderWithVehicle
from .service_record import ServiceRecord
from .vehicle import Vehicle

__all__ = [
    "Actor",
    "AuditAction",
    "AuditLog",
    "AuditLogPage",
    "Notification",
    "NotificationPriority",
    "NotificationType",
    "Reminder",
    "ReminderWithVehicle",
    "ServiceRecord",
    "Vehicle",
]
