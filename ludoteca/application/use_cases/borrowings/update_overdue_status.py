"""Batch action that refreshes the cached overdue flag."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from ludoteca.infrastructure.database import unit_of_work
from ludoteca.infrastructure.repositories import BorrowingRepository
from ludoteca.utils import ensure_app_timezone, now_in_app_timezone

logger = logging.getLogger(__name__)


def update_overdue_status(session: Session, *, now: datetime | None = None) -> int:
    """Write ``is_overdue`` on every open borrowing and return how many changed.

    Nothing calls this implicitly; eligibility and alerts never depend on it.
    """

    now = ensure_app_timezone(now) or now_in_app_timezone()
    changed = 0

    with unit_of_work(session):
        repository = BorrowingRepository(session)
        for borrowing in repository.list_open():
            overdue = borrowing.is_currently_overdue(now)
            if overdue != borrowing.is_overdue:
                repository.set_overdue_flag(borrowing.id, overdue)
                changed += 1

    logger.info("Overdue flag refreshed on %s borrowing(s)", changed)
    return changed
