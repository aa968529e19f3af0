"""Use case for pushing back the due date of an open borrowing."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime

from sqlalchemy.orm import Session

from ludoteca.config import Settings, get_settings
from ludoteca.domain.entities import Borrowing
from ludoteca.domain.errors import ConflictError, NotFoundError, ValidationError
from ludoteca.infrastructure.database import unit_of_work
from ludoteca.infrastructure.repositories import BorrowingRepository
from ludoteca.utils import ensure_app_timezone, now_in_app_timezone

from ..validators import ensure_positive_id
from .validators import ensure_within_loan_cap

logger = logging.getLogger(__name__)


def extend_due_date(
    session: Session,
    borrowing_id: int,
    new_due_date: datetime,
    *,
    now: datetime | None = None,
    settings: Settings | None = None,
) -> Borrowing:
    """Move the due date of ``borrowing_id`` to ``new_due_date``.

    The new date must be later than the current one and stay within the
    maximum loan length counted from the original borrow date, so chained
    extensions cannot keep a game out indefinitely.
    """

    ensure_positive_id(borrowing_id, "borrowing")
    if new_due_date is None:
        raise ValidationError("new due date is required")

    settings = settings or get_settings()
    now = ensure_app_timezone(now) or now_in_app_timezone()
    new_due_date = ensure_app_timezone(new_due_date)

    with unit_of_work(session):
        repository = BorrowingRepository(session)
        borrowing = repository.get(borrowing_id)
        if borrowing is None:
            raise NotFoundError("borrowing not found")
        if borrowing.is_returned:
            raise ConflictError("cannot extend a returned item")
        if new_due_date <= borrowing.due_date:
            raise ValidationError("new due date must be after the current due date")
        ensure_within_loan_cap(new_due_date, borrowing.borrowed_at, settings.max_loan_days)

        extended = replace(borrowing, due_date=new_due_date)
        # Keep the cached flag consistent with the new deadline.
        extended.is_overdue = extended.is_currently_overdue(now)
        updated = repository.update(extended)

    logger.info(
        "Borrowing %s extended to %s", borrowing_id, updated.due_date.isoformat()
    )
    return updated
