"""Use case for closing a borrowing."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime

from sqlalchemy.orm import Session

from ludoteca.domain.entities import Borrowing
from ludoteca.domain.errors import ConflictError, NotFoundError
from ludoteca.infrastructure.database import unit_of_work
from ludoteca.infrastructure.repositories import BorrowingRepository, GameRepository
from ludoteca.utils import ensure_app_timezone, now_in_app_timezone

from ..validators import ensure_positive_id

logger = logging.getLogger(__name__)

ALREADY_RETURNED = "game has already been returned"


def return_game(
    session: Session, borrowing_id: int, *, now: datetime | None = None
) -> Borrowing:
    """Mark the borrowing as returned and make its game available again."""

    ensure_positive_id(borrowing_id, "borrowing")
    now = ensure_app_timezone(now) or now_in_app_timezone()

    with unit_of_work(session):
        borrowings = BorrowingRepository(session)
        borrowing = borrowings.get(borrowing_id)
        if borrowing is None:
            raise NotFoundError("borrowing not found")
        if borrowing.is_returned:
            raise ConflictError(ALREADY_RETURNED)

        # Re-checked by the UPDATE itself in case a concurrent return won.
        if not borrowings.mark_returned(borrowing_id, now):
            raise ConflictError(ALREADY_RETURNED)
        GameRepository(session).mark_available(borrowing.game_id)

    logger.info(
        "Borrowing %s returned (user %s, game %s)",
        borrowing_id,
        borrowing.user_id,
        borrowing.game_id,
    )
    return replace(borrowing, returned_at=now, is_overdue=False)
