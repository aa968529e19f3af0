"""Use case for lending a game to a member."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ludoteca.config import Settings, get_settings
from ludoteca.domain.entities import Borrowing
from ludoteca.domain.errors import ConflictError, NotFoundError
from ludoteca.infrastructure.database import unit_of_work
from ludoteca.infrastructure.repositories import (
    BorrowingRepository,
    GameRepository,
    UserRepository,
)
from ludoteca.utils import ensure_app_timezone, now_in_app_timezone

from ..validators import ensure_positive_id
from .eligibility import ensure_user_can_borrow
from .validators import ensure_due_date_in_future, ensure_within_loan_cap

logger = logging.getLogger(__name__)

GAME_NOT_AVAILABLE = "game not available"


def borrow_game(
    session: Session,
    *,
    user_id: int,
    game_id: int,
    due_date: datetime | None = None,
    now: datetime | None = None,
    settings: Settings | None = None,
) -> Borrowing:
    """Lend ``game_id`` to ``user_id`` until ``due_date``.

    When ``due_date`` is omitted the configured default loan length is used.
    The borrowing insert and the availability flip are committed together;
    the availability flip only matches a game that is still available, so of
    two concurrent borrowers exactly one succeeds.
    """

    ensure_positive_id(user_id, "user")
    ensure_positive_id(game_id, "game")

    settings = settings or get_settings()
    now = ensure_app_timezone(now) or now_in_app_timezone()
    due_date = ensure_app_timezone(due_date) or now + timedelta(
        days=settings.default_loan_days
    )

    with unit_of_work(session):
        user = UserRepository(session).get(user_id)
        if user is None:
            raise NotFoundError("user not found")

        games = GameRepository(session)
        game = games.get(game_id)
        if game is None:
            raise NotFoundError("game not found")
        if not game.is_available:
            raise ConflictError(GAME_NOT_AVAILABLE)

        ensure_due_date_in_future(due_date, now)
        ensure_within_loan_cap(due_date, now, settings.max_loan_days)
        ensure_user_can_borrow(session, user, now)

        if not games.mark_unavailable(game_id):
            logger.info(
                "Game %s was taken concurrently; rejecting borrow by user %s",
                game_id,
                user_id,
            )
            raise ConflictError(GAME_NOT_AVAILABLE)

        try:
            borrowing = BorrowingRepository(session).create(
                Borrowing(
                    id=None,
                    user_id=user_id,
                    game_id=game_id,
                    borrowed_at=now,
                    due_date=due_date,
                    returned_at=None,
                    is_overdue=False,
                )
            )
        except IntegrityError as exc:
            # The partial unique index refused a second open borrowing.
            raise ConflictError(GAME_NOT_AVAILABLE) from exc

    logger.info(
        "User %s borrowed game %s (borrowing %s, due %s)",
        user_id,
        game_id,
        borrowing.id,
        borrowing.due_date.isoformat(),
    )
    return borrowing
