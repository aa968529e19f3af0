"""Use case removing generated alerts whose borrowing has been closed."""

import logging

from sqlalchemy.orm import Session

from ludoteca.infrastructure.database import unit_of_work
from ludoteca.infrastructure.repositories import AlertRepository, BorrowingRepository

logger = logging.getLogger(__name__)


def cleanup_resolved_alerts(session: Session) -> int:
    """Delete overdue and reminder alerts with no open borrowing behind them.

    Custom alerts are never removed here. Returns the number of deleted rows.
    """

    with unit_of_work(session):
        alerts = AlertRepository(session)
        borrowings = BorrowingRepository(session)
        still_open: dict[tuple[int, int], bool] = {}
        resolved: list[int] = []

        for alert in alerts.list_generated():
            key = (alert.user_id, alert.game_id)
            if key not in still_open:
                still_open[key] = borrowings.has_open_for(
                    user_id=alert.user_id, game_id=alert.game_id
                )
            if not still_open[key]:
                resolved.append(alert.id)

        deleted = alerts.delete_many(resolved)

    logger.info("Removed %s resolved alert(s)", deleted)
    return deleted
