"""Use cases deriving overdue and reminder alerts from open borrowings.

Both generators are idempotent: an alert is only inserted when the member has
no unread alert of the same type for the same game. Overdue state is computed
from the due dates, never from the cached borrowing flag.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from ludoteca.config import Settings, get_settings
from ludoteca.domain.entities import Alert, AlertType, Borrowing
from ludoteca.infrastructure.database import unit_of_work
from ludoteca.infrastructure.repositories import (
    AlertRepository,
    BorrowingRepository,
    GameRepository,
)
from ludoteca.utils import ensure_app_timezone, now_in_app_timezone

from ..borrowings.validators import ensure_lookahead_days
from .messages import overdue_message, reminder_message

logger = logging.getLogger(__name__)


def _create_missing_alerts(
    session: Session,
    borrowings: Iterable[Borrowing],
    alert_type: AlertType,
    build_message: Callable[[str, Borrowing], str],
    now: datetime,
) -> list[Alert]:
    alerts = AlertRepository(session)
    games = GameRepository(session)
    created: list[Alert] = []

    for borrowing in borrowings:
        if alerts.exists_unread(
            user_id=borrowing.user_id,
            game_id=borrowing.game_id,
            alert_type=alert_type,
        ):
            continue
        game = games.get(borrowing.game_id)
        game_name = game.name if game else f"#{borrowing.game_id}"
        created.append(
            alerts.create(
                Alert(
                    id=None,
                    user_id=borrowing.user_id,
                    game_id=borrowing.game_id,
                    type=alert_type,
                    message=build_message(game_name, borrowing),
                    created_at=now,
                    is_read=False,
                )
            )
        )
    return created


def generate_overdue_alerts(
    session: Session, *, now: datetime | None = None
) -> list[Alert]:
    """Create one unread overdue alert per overdue (user, game) pair."""

    now = ensure_app_timezone(now) or now_in_app_timezone()

    with unit_of_work(session):
        overdue = BorrowingRepository(session).list_due_before(now)
        created = _create_missing_alerts(
            session,
            overdue,
            AlertType.OVERDUE,
            lambda name, borrowing: overdue_message(
                name, borrowing.due_date, borrowing.days_overdue(now)
            ),
            now,
        )

    logger.info(
        "Overdue sweep: %s overdue borrowing(s), %s new alert(s)",
        len(overdue),
        len(created),
    )
    return created


def generate_reminder_alerts(
    session: Session,
    *,
    now: datetime | None = None,
    window_days: int | None = None,
    settings: Settings | None = None,
) -> list[Alert]:
    """Create reminders for open borrowings due within the reminder window."""

    if window_days is None:
        window_days = (settings or get_settings()).reminder_window_days
    ensure_lookahead_days(window_days)
    now = ensure_app_timezone(now) or now_in_app_timezone()
    cutoff = now + timedelta(days=window_days)

    with unit_of_work(session):
        due_soon = [
            borrowing
            for borrowing in BorrowingRepository(session).list_due_before(cutoff)
            if not borrowing.is_currently_overdue(now)
        ]
        created = _create_missing_alerts(
            session,
            due_soon,
            AlertType.REMINDER,
            lambda name, borrowing: reminder_message(
                name, borrowing.due_date, borrowing.days_until_due(now)
            ),
            now,
        )

    logger.info(
        "Reminder sweep: %s borrowing(s) due within %s day(s), %s new alert(s)",
        len(due_soon),
        window_days,
        len(created),
    )
    return created


__all__ = ["generate_overdue_alerts", "generate_reminder_alerts"]
