"""Use cases for reminder notifications."""

from .classification import (
    ReminderClassification,
    classify_reminder,
    infer_notification_type,
)
from .deduplication import should_create_notification
from .generate_notifications import build_message_variables, generate_notifications
from .manage_notifications import (
    dismiss_notification,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from .messages import RenderedMessage, render_notification

__all__ = [
    "ReminderClassification",
    "RenderedMessage",
    "build_message_variables",
    "classify_reminder",
    "dismiss_notification",
    "generate_notifications",
    "infer_notification_type",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "render_notification",
    "should_create_notification",
]
