"""Use case for removing games from the catalog."""

import logging

from sqlalchemy.orm import Session

from ludoteca.domain.errors import ConflictError, NotFoundError
from ludoteca.infrastructure.database import unit_of_work
from ludoteca.infrastructure.repositories import BorrowingRepository, GameRepository

from ..validators import ensure_positive_id

logger = logging.getLogger(__name__)


def delete_game(session: Session, game_id: int) -> None:
    """Delete the specified game when no borrowing references it."""

    ensure_positive_id(game_id, "game")

    with unit_of_work(session):
        repository = GameRepository(session)
        if repository.get(game_id) is None:
            raise NotFoundError("game not found")

        current = BorrowingRepository(session).get_open_by_game(game_id)
        if current is not None:
            raise ConflictError(
                f"cannot delete game: currently borrowed by user {current.user_id}"
            )
        repository.delete(game_id)

    logger.info("Deleted game %s", game_id)
