"""Helper utilities shared across API route handlers."""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import HTTPException, status

from ludoteca.domain.entities import Borrowing
from ludoteca.domain.errors import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from ludoteca.utils import now_in_app_timezone

from .schemas import BorrowingRead

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[Exception], int], ...] = (
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (StorageError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def http_exception_from(exc: Exception) -> HTTPException:
    """Translate a domain or storage failure into an :class:`HTTPException`."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            break
    else:
        status_code = status.HTTP_400_BAD_REQUEST

    if status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
        logger.error("Storage failure while serving request: %s", exc)
    return HTTPException(status_code=status_code, detail=str(exc))


def borrowing_to_read_model(
    borrowing: Borrowing, now: datetime | None = None
) -> BorrowingRead:
    """Serialize ``borrowing`` with its overdue state recomputed at ``now``."""

    now = now or now_in_app_timezone()
    return BorrowingRead(
        id=borrowing.id,
        user_id=borrowing.user_id,
        game_id=borrowing.game_id,
        borrowed_at=borrowing.borrowed_at,
        due_date=borrowing.due_date,
        returned_at=borrowing.returned_at,
        is_overdue=borrowing.is_overdue,
        currently_overdue=borrowing.is_currently_overdue(now),
        days_overdue=borrowing.days_overdue(now),
    )


__all__ = ["borrowing_to_read_model", "http_exception_from"]
