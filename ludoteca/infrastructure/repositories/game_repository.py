"""Persistence layer for the game catalog."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session

from ludoteca.domain.entities import Game, GameCondition
from ludoteca.domain.errors import ConflictError, NotFoundError
from ludoteca.infrastructure.models import AlertModel, BorrowingModel, GameModel
from ludoteca.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_naive_datetime,
)


class GameRepository:
    """Provide CRUD operations for :class:`Game` objects.

    Availability is never written by :meth:`update`; it only changes through
    the conditional :meth:`mark_unavailable` and :meth:`mark_available`
    statements used by the borrowing use cases.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        skip: int = 0,
        limit: int | None = None,
        available_only: bool = False,
    ) -> Sequence[Game]:
        query = self.session.query(GameModel)
        if available_only:
            query = query.filter(GameModel.is_available.is_(True))
        query = query.order_by(GameModel.name, GameModel.id)
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def search(self, text: str) -> Sequence[Game]:
        pattern = f"%{text.strip()}%"
        query = (
            self.session.query(GameModel)
            .filter(
                or_(
                    GameModel.name.ilike(pattern),
                    GameModel.description.ilike(pattern),
                    GameModel.category.ilike(pattern),
                )
            )
            .order_by(GameModel.name, GameModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, game_id: int) -> Game | None:
        model = self.session.get(GameModel, game_id)
        return self._to_entity(model) if model else None

    def create(self, game: Game) -> Game:
        model = GameModel()
        model.entry_date = ensure_app_naive_datetime(
            game.entry_date
        ) or now_in_app_naive_datetime()
        model.is_available = True
        self._apply_entity_to_model(model, game)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, game: Game) -> Game:
        model = self.session.get(GameModel, game.id) if game.id is not None else None
        if model is None:
            msg = f"Game with id {game.id} not found"
            raise NotFoundError(msg)
        self._apply_entity_to_model(model, game)
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_unavailable(self, game_id: int) -> bool:
        """Flip the game to unavailable if it still is available.

        Returns ``False`` when no row matched, i.e. the game is missing or was
        taken by a concurrent borrowing that committed first.
        """

        updated = (
            self.session.query(GameModel)
            .filter(GameModel.id == game_id, GameModel.is_available.is_(True))
            .update({GameModel.is_available: False}, synchronize_session="fetch")
        )
        return updated == 1

    def mark_available(self, game_id: int) -> bool:
        updated = (
            self.session.query(GameModel)
            .filter(GameModel.id == game_id)
            .update({GameModel.is_available: True}, synchronize_session="fetch")
        )
        return updated == 1

    def delete(self, game_id: int) -> None:
        model = self.session.get(GameModel, game_id)
        if model is None:
            msg = f"Game with id {game_id} not found"
            raise NotFoundError(msg)

        history = (
            self.session.query(BorrowingModel)
            .filter(BorrowingModel.game_id == game_id)
            .count()
        )
        if history:
            msg = (
                f"cannot delete game '{model.name}': it has borrowing history "
                f"({history} records)"
            )
            raise ConflictError(msg)

        self.session.query(AlertModel).filter(AlertModel.game_id == game_id).delete(
            synchronize_session=False
        )
        self.session.delete(model)
        self.session.flush()

    @staticmethod
    def _apply_entity_to_model(model: GameModel, game: Game) -> None:
        model.name = game.name
        model.description = game.description
        model.category = game.category
        model.condition = GameCondition.from_wire(game.condition).value

    @staticmethod
    def _to_entity(model: GameModel) -> Game:
        return Game(
            id=model.id,
            name=model.name,
            description=model.description or "",
            category=model.category or "",
            condition=GameCondition.from_wire(model.condition),
            entry_date=ensure_app_timezone(model.entry_date),
            is_available=model.is_available,
        )


__all__ = ["GameRepository"]
