"""Policy deciding whether a member may start a new borrowing."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from ludoteca.domain.entities import User
from ludoteca.domain.errors import ConflictError, NotFoundError
from ludoteca.infrastructure.database import storage_guard
from ludoteca.infrastructure.repositories import BorrowingRepository, UserRepository
from ludoteca.utils import ensure_app_timezone, now_in_app_timezone

from ..validators import ensure_positive_id

OVERDUE_ITEMS_REASON = "user has overdue items"
INACTIVE_ACCOUNT_REASON = "user account is inactive"


@dataclass(frozen=True)
class Eligibility:
    """Outcome of an eligibility check."""

    allowed: bool
    reason: str | None = None


def _evaluate(session: Session, user: User, now: datetime) -> Eligibility:
    if not user.is_active:
        return Eligibility(allowed=False, reason=INACTIVE_ACCOUNT_REASON)

    # Overdue is recomputed from the due date; the stored flag may be stale.
    open_borrowings = BorrowingRepository(session).list_active_by_user(user.id)
    if any(borrowing.is_currently_overdue(now) for borrowing in open_borrowings):
        return Eligibility(allowed=False, reason=OVERDUE_ITEMS_REASON)
    return Eligibility(allowed=True)


def can_user_borrow(
    session: Session, user_id: int, *, now: datetime | None = None
) -> Eligibility:
    """Return whether ``user_id`` may borrow a game at ``now``."""

    ensure_positive_id(user_id, "user")
    now = ensure_app_timezone(now) or now_in_app_timezone()
    with storage_guard(session):
        user = UserRepository(session).get(user_id)
        if user is None:
            raise NotFoundError("user not found")
        return _evaluate(session, user, now)


def ensure_user_can_borrow(session: Session, user: User, now: datetime) -> None:
    """Raise :class:`ConflictError` when ``user`` is not allowed to borrow."""

    eligibility = _evaluate(session, user, now)
    if not eligibility.allowed:
        raise ConflictError(eligibility.reason)


__all__ = [
    "Eligibility",
    "INACTIVE_ACCOUNT_REASON",
    "OVERDUE_ITEMS_REASON",
    "can_user_borrow",
    "ensure_user_can_borrow",
]
