"""Use case reporting whether a game can be borrowed right now."""

from dataclasses import dataclass

from sqlalchemy.orm import Session

from ludoteca.domain.entities import Borrowing, Game
from ludoteca.infrastructure.database import storage_guard
from ludoteca.infrastructure.repositories import BorrowingRepository

from .get_game import get_game


@dataclass(frozen=True)
class GameAvailability:
    """Availability flag of a game together with its open borrowing, if any."""

    game: Game
    current_borrowing: Borrowing | None

    @property
    def is_available(self) -> bool:
        return self.game.is_available


def get_game_availability(session: Session, game_id: int) -> GameAvailability:
    """Return the availability of ``game_id`` and who currently holds it."""

    game = get_game(session, game_id)
    with storage_guard(session):
        current = BorrowingRepository(session).get_open_by_game(game_id)
    return GameAvailability(game=game, current_borrowing=current)
