"""Read-only alert queries."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from ludoteca.domain.entities import Alert
from ludoteca.domain.errors import NotFoundError
from ludoteca.infrastructure.database import storage_guard
from ludoteca.infrastructure.repositories import AlertRepository, UserRepository

from ..validators import ensure_positive_id


def get_alert(session: Session, alert_id: int) -> Alert:
    ensure_positive_id(alert_id, "alert")
    with storage_guard(session):
        alert = AlertRepository(session).get(alert_id)
    if alert is None:
        raise NotFoundError("alert not found")
    return alert


def list_alerts(session: Session) -> Sequence[Alert]:
    with storage_guard(session):
        return AlertRepository(session).list()


def list_unread_alerts(session: Session) -> Sequence[Alert]:
    """Return every unread alert, newest first."""

    with storage_guard(session):
        return AlertRepository(session).list_unread()


def list_alerts_by_user(
    session: Session, user_id: int, *, unread_only: bool = False
) -> Sequence[Alert]:
    """Return the alerts addressed to ``user_id``, newest first."""

    ensure_positive_id(user_id, "user")
    with storage_guard(session):
        if UserRepository(session).get(user_id) is None:
            raise NotFoundError("user not found")
        return AlertRepository(session).list_for_user(user_id, unread_only=unread_only)


__all__ = ["get_alert", "list_alerts", "list_alerts_by_user", "list_unread_alerts"]
