from .audit_log import AuditLogCreate, AuditLogPageRead, AuditLogRead
from .notification import (
    NotificationBulkUpdateResponse,
    NotificationGenerateResponse,
    NotificationRead,
)
from .service_record import (
    ReminderCompletion,
    ServiceRecordCreate,
    ServiceRecordRead,
    ServiceRecordUpdate,
)

__all__ = [
    "AuditLogCreate",
    "AuditLogPageRead",
    "AuditLogRead",
    "NotificationBulkUpdateResponse",
    "NotificationGenerateResponse",
    "NotificationRead",
    "ReminderCompletion",
    "ServiceRecordCreate",
    "ServiceRecordRead",
    "ServiceRecordUpdate",
]
