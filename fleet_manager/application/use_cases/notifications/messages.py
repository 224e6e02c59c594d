"""English message catalog for notification keys."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final

from fleet_manager.domain.entities import Notification, NotificationType
from fleet_manager.utils import days_until, now_in_app_timezone

from .classification import MESSAGE_DUE_IN_DAYS, MESSAGE_DUE_SOON, MESSAGE_OVERDUE

_TITLES: Final[dict[str, str]] = {
    MESSAGE_OVERDUE: "{reminderName} overdue for {vehicleName}",
    MESSAGE_DUE_IN_DAYS: "{reminderName} due in {days} {day_word}",
    MESSAGE_DUE_SOON: "{reminderName} due soon",
}
_BODY: Final[str] = "{reminderName} for {vehicle} is due on {date}."

CATALOG: Final[dict[str, str]] = {
    f"{notification_type.value}.{suffix}": title
    for notification_type in NotificationType
    for suffix, title in _TITLES.items()
}


@dataclass(frozen=True)
class RenderedMessage:
    title: str
    message: str


class _Defaults(dict):
    def __missing__(self, key: str) -> str:
        return ""


def _vehicle_name(label: str, vehicle_id: str) -> str:
    suffix = f" ({vehicle_id})"
    return label[: -len(suffix)] if label.endswith(suffix) else label


def render_notification(
    notification: Notification, *, now: datetime | None = None
) -> RenderedMessage:
    """Render the title and message of ``notification``.

    Unknown keys fall back to the reminder name as title. The day count for
    ``dueInDays`` is recomputed from the due date so it stays current. The
    ``overdue`` title names the vehicle by make and model only; the body keeps
    the full ``"<make> <model> (<id>)"`` label.
    """

    reference = now or now_in_app_timezone()
    days = max(days_until(notification.due_date, reference), 0)
    variables = _Defaults(notification.message_variables or {})
    variables["days"] = str(days)
    variables["day_word"] = "day" if days == 1 else "days"
    variables["vehicleName"] = _vehicle_name(variables["vehicle"], notification.vehicle_id)

    template = CATALOG.get(notification.message_key, "{reminderName}")
    return RenderedMessage(
        title=template.format_map(variables),
        message=_BODY.format_map(variables),
    )


__all__ = ["CATALOG", "RenderedMessage", "render_notification"]
