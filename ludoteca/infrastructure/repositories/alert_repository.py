"""Persistence helpers for alert entities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from ludoteca.domain.entities import Alert, AlertType
from ludoteca.domain.errors import NotFoundError
from ludoteca.infrastructure.models import AlertModel
from ludoteca.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_naive_datetime,
)

_GENERATED_TYPES = [alert_type.value for alert_type in AlertType if alert_type.is_generated]


class AlertRepository:
    """Provide CRUD operations for :class:`Alert` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, alert_id: int) -> Alert | None:
        model = self.session.get(AlertModel, alert_id)
        return self._to_entity(model) if model else None

    def list(self) -> Sequence[Alert]:
        query = self.session.query(AlertModel).order_by(
            AlertModel.created_at.desc(), AlertModel.id.desc()
        )
        return [self._to_entity(model) for model in query.all()]

    def list_unread(self) -> Sequence[Alert]:
        query = (
            self.session.query(AlertModel)
            .filter(AlertModel.is_read.is_(False))
            .order_by(AlertModel.created_at.desc(), AlertModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_for_user(
        self, user_id: int, *, unread_only: bool = False
    ) -> Sequence[Alert]:
        query = self.session.query(AlertModel).filter(AlertModel.user_id == user_id)
        if unread_only:
            query = query.filter(AlertModel.is_read.is_(False))
        query = query.order_by(AlertModel.created_at.desc(), AlertModel.id.desc())
        return [self._to_entity(model) for model in query.all()]

    def list_generated(self) -> Sequence[Alert]:
        """Return every alert produced by the automatic generators."""

        query = (
            self.session.query(AlertModel)
            .filter(AlertModel.type.in_(_GENERATED_TYPES))
            .order_by(AlertModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def exists_unread(self, *, user_id: int, game_id: int, alert_type: AlertType) -> bool:
        return (
            self.session.query(AlertModel.id)
            .filter(
                AlertModel.user_id == user_id,
                AlertModel.game_id == game_id,
                AlertModel.type == alert_type.value,
                AlertModel.is_read.is_(False),
            )
            .first()
            is not None
        )

    def create(self, alert: Alert) -> Alert:
        model = AlertModel()
        model.created_at = (
            ensure_app_naive_datetime(alert.created_at) or now_in_app_naive_datetime()
        )
        model.user_id = alert.user_id
        model.game_id = alert.game_id
        model.type = AlertType.from_wire(alert.type).value
        model.message = alert.message
        model.is_read = alert.is_read
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, alert_id: int) -> Alert:
        model = self.session.get(AlertModel, alert_id)
        if model is None:
            msg = f"Alert with id {alert_id} not found"
            raise NotFoundError(msg)
        model.is_read = True
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_all_as_read_for_user(self, user_id: int) -> int:
        return (
            self.session.query(AlertModel)
            .filter(AlertModel.user_id == user_id, AlertModel.is_read.is_(False))
            .update({AlertModel.is_read: True}, synchronize_session="fetch")
        )

    def delete(self, alert_id: int) -> None:
        model = self.session.get(AlertModel, alert_id)
        if model is None:
            msg = f"Alert with id {alert_id} not found"
            raise NotFoundError(msg)
        self.session.delete(model)
        self.session.flush()

    def delete_many(self, alert_ids: Iterable[int]) -> int:
        ids = [alert_id for alert_id in alert_ids if alert_id is not None]
        if not ids:
            return 0
        return (
            self.session.query(AlertModel)
            .filter(AlertModel.id.in_(ids))
            .delete(synchronize_session="fetch")
        )

    @staticmethod
    def _to_entity(model: AlertModel) -> Alert:
        return Alert(
            id=model.id,
            user_id=model.user_id,
            game_id=model.game_id,
            type=AlertType.from_wire(model.type),
            message=model.message,
            created_at=ensure_app_timezone(model.created_at),
            is_read=bool(model.is_read),
        )


__all__ = ["AlertRepository"]
