"""Use case for removing an alert."""

from sqlalchemy.orm import Session

from ludoteca.domain.errors import NotFoundError
from ludoteca.infrastructure.database import unit_of_work
from ludoteca.infrastructure.repositories import AlertRepository

from ..validators import ensure_positive_id


def delete_alert(session: Session, alert_id: int) -> None:
    """Delete the specified alert."""

    ensure_positive_id(alert_id, "alert")

    with unit_of_work(session):
        repository = AlertRepository(session)
        if repository.get(alert_id) is None:
            raise NotFoundError("alert not found")
        repository.delete(alert_id)
