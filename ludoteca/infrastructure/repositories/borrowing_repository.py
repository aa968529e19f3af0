"""Persistence layer for borrowing records."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import desc
from sqlalchemy.orm import Query, Session

from ludoteca.domain.entities import Borrowing
from ludoteca.domain.errors import NotFoundError
from ludoteca.infrastructure.models import BorrowingModel
from ludoteca.utils import ensure_app_naive_datetime, ensure_app_timezone


class BorrowingRepository:
    """Provide CRUD operations and filtered queries for borrowings."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, borrowing_id: int) -> Borrowing | None:
        model = self.session.get(BorrowingModel, borrowing_id)
        return self._to_entity(model) if model else None

    def list(self, *, skip: int = 0, limit: int | None = None) -> Sequence[Borrowing]:
        query = self.session.query(BorrowingModel).order_by(
            desc(BorrowingModel.borrowed_at), desc(BorrowingModel.id)
        )
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_open(self) -> Sequence[Borrowing]:
        query = self._open_query().order_by(BorrowingModel.due_date, BorrowingModel.id)
        return [self._to_entity(model) for model in query.all()]

    def list_by_user(self, user_id: int) -> Sequence[Borrowing]:
        query = (
            self.session.query(BorrowingModel)
            .filter(BorrowingModel.user_id == user_id)
            .order_by(desc(BorrowingModel.borrowed_at), desc(BorrowingModel.id))
        )
        return [self._to_entity(model) for model in query.all()]

    def list_active_by_user(self, user_id: int) -> Sequence[Borrowing]:
        query = (
            self._open_query()
            .filter(BorrowingModel.user_id == user_id)
            .order_by(BorrowingModel.due_date, BorrowingModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_by_game(self, game_id: int) -> Sequence[Borrowing]:
        query = (
            self.session.query(BorrowingModel)
            .filter(BorrowingModel.game_id == game_id)
            .order_by(desc(BorrowingModel.borrowed_at), desc(BorrowingModel.id))
        )
        return [self._to_entity(model) for model in query.all()]

    def get_open_by_game(self, game_id: int) -> Borrowing | None:
        model = self._open_query().filter(BorrowingModel.game_id == game_id).first()
        return self._to_entity(model) if model else None

    def list_due_before(self, cutoff: datetime) -> Sequence[Borrowing]:
        """Return open borrowings whose due date is earlier than ``cutoff``."""

        query = (
            self._open_query()
            .filter(BorrowingModel.due_date < ensure_app_naive_datetime(cutoff))
            .order_by(BorrowingModel.due_date, BorrowingModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def has_open_for(self, *, user_id: int, game_id: int) -> bool:
        return (
            self._open_query()
            .filter(
                BorrowingModel.user_id == user_id,
                BorrowingModel.game_id == game_id,
            )
            .first()
            is not None
        )

    def create(self, borrowing: Borrowing) -> Borrowing:
        model = BorrowingModel()
        self._apply_entity_to_model(model, borrowing)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, borrowing: Borrowing) -> Borrowing:
        model = (
            self.session.get(BorrowingModel, borrowing.id)
            if borrowing.id is not None
            else None
        )
        if model is None:
            msg = f"Borrowing with id {borrowing.id} not found"
            raise NotFoundError(msg)
        self._apply_entity_to_model(model, borrowing)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_returned(self, borrowing_id: int, returned_at: datetime) -> bool:
        """Close the borrowing if it is still open.

        Returns ``False`` when it was already returned (or does not exist).
        """

        updated = (
            self.session.query(BorrowingModel)
            .filter(
                BorrowingModel.id == borrowing_id,
                BorrowingModel.returned_at.is_(None),
            )
            .update(
                {
                    BorrowingModel.returned_at: ensure_app_naive_datetime(returned_at),
                    BorrowingModel.is_overdue: False,
                },
                synchronize_session="fetch",
            )
        )
        return updated == 1

    def set_overdue_flag(self, borrowing_id: int, is_overdue: bool) -> None:
        self.session.query(BorrowingModel).filter(
            BorrowingModel.id == borrowing_id
        ).update({BorrowingModel.is_overdue: is_overdue}, synchronize_session="fetch")

    def _open_query(self) -> Query:
        return self.session.query(BorrowingModel).filter(
            BorrowingModel.returned_at.is_(None)
        )

    @staticmethod
    def _apply_entity_to_model(model: BorrowingModel, borrowing: Borrowing) -> None:
        model.user_id = borrowing.user_id
        model.game_id = borrowing.game_id
        model.borrowed_at = ensure_app_naive_datetime(borrowing.borrowed_at)
        model.due_date = ensure_app_naive_datetime(borrowing.due_date)
        model.returned_at = ensure_app_naive_datetime(borrowing.returned_at)
        model.is_overdue = borrowing.is_overdue

    @staticmethod
    def _to_entity(model: BorrowingModel) -> Borrowing:
        return Borrowing(
            id=model.id,
            user_id=model.user_id,
            game_id=model.game_id,
            borrowed_at=ensure_app_timezone(model.borrowed_at),
            due_date=ensure_app_timezone(model.due_date),
            returned_at=ensure_app_timezone(model.returned_at),
            is_overdue=bool(model.is_overdue),
        )


__all__ = ["BorrowingRepository"]
