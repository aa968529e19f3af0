"""Read-only borrowing queries."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from ludoteca.domain.entities import Borrowing
from ludoteca.domain.errors import NotFoundError
from ludoteca.infrastructure.database import storage_guard
from ludoteca.infrastructure.repositories import (
    BorrowingRepository,
    GameRepository,
    UserRepository,
)
from ludoteca.utils import ensure_app_timezone, now_in_app_timezone

from ..validators import ensure_positive_id
from .validators import ensure_lookahead_days


def list_borrowings(
    session: Session, *, skip: int = 0, limit: int | None = None
) -> Sequence[Borrowing]:
    with storage_guard(session):
        return BorrowingRepository(session).list(skip=skip, limit=limit)


def list_active_borrowings_by_user(session: Session, user_id: int) -> Sequence[Borrowing]:
    """Return the open borrowings of ``user_id``, earliest due date first."""

    ensure_positive_id(user_id, "user")
    with storage_guard(session):
        if UserRepository(session).get(user_id) is None:
            raise NotFoundError("user not found")
        return BorrowingRepository(session).list_active_by_user(user_id)


def list_borrowings_by_game(session: Session, game_id: int) -> Sequence[Borrowing]:
    """Return the full borrowing history of ``game_id``."""

    ensure_positive_id(game_id, "game")
    with storage_guard(session):
        if GameRepository(session).get(game_id) is None:
            raise NotFoundError("game not found")
        return BorrowingRepository(session).list_by_game(game_id)


def list_overdue_borrowings(
    session: Session, *, now: datetime | None = None
) -> Sequence[Borrowing]:
    """Return open borrowings whose due date has passed at ``now``.

    The result is computed from the due dates; the stored flag is ignored.
    """

    now = ensure_app_timezone(now) or now_in_app_timezone()
    with storage_guard(session):
        return BorrowingRepository(session).list_due_before(now)


def list_borrowings_due_soon(
    session: Session, days_ahead: int, *, now: datetime | None = None
) -> Sequence[Borrowing]:
    """Return open, not yet overdue borrowings due within ``days_ahead`` days."""

    ensure_lookahead_days(days_ahead)
    now = ensure_app_timezone(now) or now_in_app_timezone()
    cutoff = now + timedelta(days=days_ahead)
    with storage_guard(session):
        candidates = BorrowingRepository(session).list_due_before(cutoff)
    return [
        borrowing for borrowing in candidates if not borrowing.is_currently_overdue(now)
    ]


__all__ = [
    "list_active_borrowings_by_user",
    "list_borrowings",
    "list_borrowings_by_game",
    "list_borrowings_due_soon",
    "list_overdue_borrowings",
]
