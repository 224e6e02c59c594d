"""Use cases for the service completion workflow."""

from .complete_reminder import complete_reminder
from .create_service_record import create_service_record
from .delete_service_record import delete_service_record
from .get_service_record import get_service_record
from .list_service_records import list_service_records
from .update_service_record import update_service_record

__all__ = [
    "complete_reminder",
    "create_service_record",
    "delete_service_record",
    "get_service_record",
    "list_service_records",
    "update_service_record",
]
