"""Use case for retrieving a single game."""

from sqlalchemy.orm import Session

from ludoteca.domain.entities import Game
from ludoteca.domain.errors import NotFoundError
from ludoteca.infrastructure.database import storage_guard
from ludoteca.infrastructure.repositories import GameRepository

from ..validators import ensure_positive_id


def get_game(session: Session, game_id: int) -> Game:
    """Return the game identified by ``game_id`` or raise an error."""

    ensure_positive_id(game_id, "game")
    with storage_guard(session):
        game = GameRepository(session).get(game_id)
    if game is None:
        raise NotFoundError("game not found")
    return game
