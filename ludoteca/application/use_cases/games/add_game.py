"""Use case for adding games to the catalog."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from ludoteca.domain.entities import Game, GameCondition
from ludoteca.infrastructure.database import unit_of_work
from ludoteca.infrastructure.repositories import GameRepository
from ludoteca.utils import ensure_app_timezone, now_in_app_timezone

from .validators import (
    ensure_valid_category,
    ensure_valid_description,
    ensure_valid_game_name,
)

logger = logging.getLogger(__name__)


def add_game(
    session: Session,
    *,
    name: str,
    description: str = "",
    category: str = "",
    condition: str | GameCondition,
    now: datetime | None = None,
) -> Game:
    """Register a new, available game in the catalog."""

    entity = Game(
        id=None,
        name=ensure_valid_game_name(name),
        description=ensure_valid_description(description),
        category=ensure_valid_category(category),
        condition=GameCondition.from_wire(condition),
        entry_date=ensure_app_timezone(now) or now_in_app_timezone(),
        is_available=True,
    )

    with unit_of_work(session):
        game = GameRepository(session).create(entity)

    logger.info("Added game %s (%s)", game.id, game.name)
    return game
