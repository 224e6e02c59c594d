"""Errors raised by the fleet manager use cases."""

from __future__ import annotations


class FleetManagerError(Exception):
    """Base class for errors surfaced by the core."""


class ValidationError(FleetManagerError, ValueError):
    """Required input is missing or malformed."""


class NotFoundError(FleetManagerError, LookupError):
    """A referenced vehicle, reminder, notification or record does not exist."""


class TransactionFailure(FleetManagerError, RuntimeError):
    """The data store rejected a unit of work; it has already been rolled back."""


class AuditWriteFailure(TransactionFailure):
    """An audit entry could not be persisted."""


__all__ = [
    "AuditWriteFailure",
    "FleetManagerError",
    "NotFoundError",
    "TransactionFailure",
    "ValidationError",
]
