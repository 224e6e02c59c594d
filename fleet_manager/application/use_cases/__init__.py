"""Aggregate application use cases."""

from .audit_logs import query_audit, record_audit
from .notifications import generate_notifications
from .service_history import create_service_record

__all__ = [
    "create_service_record",
    "generate_notifications",
    "query_audit",
    "record_audit",
]
