"""Input parsing shared by the service history use cases."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from fleet_manager.domain.exceptions import ValidationError

MILEAGE_UNIT = "km"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def ensure_required(data: Mapping[str, Any], *names: str) -> None:
    """Raise :class:`ValidationError` listing every blank required field."""

    missing = [name for name in names if _is_blank(data.get(name))]
    if missing:
        readable = ", ".join(name.replace("_", " ") for name in missing)
        raise ValidationError(f"Missing required fields: {readable}")


def parse_date(value: Any, *, field_name: str = "service_date") -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError as exc:
            raise ValidationError(f"{field_name} must be an ISO date") from exc
    raise ValidationError(f"{field_name} must be an ISO date")


def parse_mileage(value: Any) -> int | None:
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        raise ValidationError("mileage must be a whole number")
    try:
        mileage = int(str(value).strip())
    except ValueError as exc:
        raise ValidationError("mileage must be a whole number") from exc
    if mileage < 0:
        raise ValidationError("mileage must not be negative")
    return mileage


def parse_cost(value: Any) -> Decimal | None:
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        raise ValidationError("cost must be a number")
    try:
        cost = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValidationError("cost must be a number") from exc
    if not cost.is_finite():
        raise ValidationError("cost must be a number")
    return cost


def parse_optional_int(value: Any, *, field_name: str) -> int | None:
    if _is_blank(value):
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name} must be an integer") from exc


def optional_text(value: Any) -> str | None:
    if _is_blank(value):
        return None
    return str(value).strip()


def format_mileage(mileage: int) -> str:
    """Return the vehicle registry display form, e.g. ``"45000 km"``."""

    return f"{mileage} {MILEAGE_UNIT}"


__all__ = [
    "MILEAGE_UNIT",
    "ensure_required",
    "format_mileage",
    "optional_text",
    "parse_cost",
    "parse_date",
    "parse_mileage",
    "parse_optional_int",
]
