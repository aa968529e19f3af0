"""Persistence layer for member data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from ludoteca.domain.entities import User
from ludoteca.domain.errors import ConflictError, NotFoundError
from ludoteca.infrastructure.models import AlertModel, BorrowingModel, UserModel
from ludoteca.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_naive_datetime,
)


class UserRepository:
    """Provide CRUD operations for user entities.

    Writes are flushed, not committed: the calling use case owns the
    transaction through :func:`ludoteca.infrastructure.database.unit_of_work`.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, skip: int = 0, limit: int | None = 100) -> Sequence[User]:
        query = self.session.query(UserModel).order_by(UserModel.id)
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(UserModel.email == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user, include_creation_fields=True)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id) if user.id is not None else None
        if not model:
            msg = f"User with id {user.id} not found"
            raise NotFoundError(msg)
        self._apply_entity_to_model(model, user, include_creation_fields=False)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, user_id: int) -> None:
        model = self.session.get(UserModel, user_id)
        if not model:
            msg = f"User with id {user_id} not found"
            raise NotFoundError(msg)

        history = self.count_borrowings(user_id)
        if history:
            msg = (
                f"cannot delete user: {history} borrowing record(s) reference it"
            )
            raise ConflictError(msg)

        self.session.query(AlertModel).filter(AlertModel.user_id == user_id).delete(
            synchronize_session=False
        )
        self.session.delete(model)
        self.session.flush()

    def count_borrowings(self, user_id: int) -> int:
        return (
            self.session.query(BorrowingModel)
            .filter(BorrowingModel.user_id == user_id)
            .count()
        )

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            registered_at=ensure_app_timezone(model.registered_at),
            is_active=model.is_active,
        )

    @staticmethod
    def _apply_entity_to_model(
        model: UserModel, user: User, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields:
            model.registered_at = ensure_app_naive_datetime(
                user.registered_at
            ) or now_in_app_naive_datetime()
        model.name = user.name
        model.email = user.email.strip().lower()
        model.is_active = user.is_active


__all__ = ["UserRepository"]
