"""Use cases for acknowledging alerts."""

import logging

from sqlalchemy.orm import Session

from ludoteca.domain.entities import Alert
from ludoteca.domain.errors import NotFoundError
from ludoteca.infrastructure.database import unit_of_work
from ludoteca.infrastructure.repositories import AlertRepository, UserRepository

from ..validators import ensure_positive_id

logger = logging.getLogger(__name__)


def mark_alert_as_read(session: Session, alert_id: int) -> Alert:
    ensure_positive_id(alert_id, "alert")

    with unit_of_work(session):
        repository = AlertRepository(session)
        if repository.get(alert_id) is None:
            raise NotFoundError("alert not found")
        return repository.mark_as_read(alert_id)


def mark_all_user_alerts_as_read(session: Session, user_id: int) -> int:
    """Mark every unread alert of ``user_id`` as read and return how many."""

    ensure_positive_id(user_id, "user")

    with unit_of_work(session):
        if UserRepository(session).get(user_id) is None:
            raise NotFoundError("user not found")
        updated = AlertRepository(session).mark_all_as_read_for_user(user_id)

    logger.info("Marked %s alert(s) as read for user %s", updated, user_id)
    return updated


__all__ = ["mark_alert_as_read", "mark_all_user_alerts_as_read"]
