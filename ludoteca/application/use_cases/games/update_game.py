"""Use case for editing catalog entries."""

from dataclasses import replace

from sqlalchemy.orm import Session

from ludoteca.domain.entities import Game, GameCondition
from ludoteca.domain.errors import NotFoundError
from ludoteca.infrastructure.database import unit_of_work
from ludoteca.infrastructure.repositories import GameRepository

from ..validators import ensure_positive_id
from .validators import (
    ensure_valid_category,
    ensure_valid_description,
    ensure_valid_game_name,
)


def update_game(
    session: Session,
    *,
    game_id: int,
    name: str | None = None,
    description: str | None = None,
    category: str | None = None,
    condition: str | GameCondition | None = None,
) -> Game:
    """Update the descriptive fields of a game.

    Availability is not editable here; it follows the borrowing lifecycle.
    """

    ensure_positive_id(game_id, "game")

    with unit_of_work(session):
        repository = GameRepository(session)
        current = repository.get(game_id)
        if current is None:
            raise NotFoundError("game not found")

        updated = replace(
            current,
            name=ensure_valid_game_name(name) if name is not None else current.name,
            description=(
                ensure_valid_description(description)
                if description is not None
                else current.description
            ),
            category=(
                ensure_valid_category(category)
                if category is not None
                else current.category
            ),
            condition=(
                GameCondition.from_wire(condition)
                if condition is not None
                else current.condition
            ),
        )
        return repository.update(updated)
