"""Helper utilities shared across API route handlers."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status

from fleet_manager.domain.exceptions import (
    NotFoundError,
    TransactionFailure,
    ValidationError,
)

logger = logging.getLogger(__name__)


@contextmanager
def translate_errors() -> Iterator[None]:
    """Map core errors raised inside the block to HTTP responses."""

    try:
        yield
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except TransactionFailure as exc:
        logger.error("Request failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        ) from exc


__all__ = ["translate_errors"]
