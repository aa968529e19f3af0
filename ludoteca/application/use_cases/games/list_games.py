"""Use cases for listing and searching the catalog."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from ludoteca.domain.entities import Game
from ludoteca.infrastructure.database import storage_guard
from ludoteca.infrastructure.repositories import GameRepository


def list_games(
    session: Session,
    *,
    available_only: bool = False,
    skip: int = 0,
    limit: int | None = None,
) -> Sequence[Game]:
    """Return catalogued games ordered by name."""

    with storage_guard(session):
        return GameRepository(session).list(
            skip=skip, limit=limit, available_only=available_only
        )


def search_games(session: Session, query: str | None) -> Sequence[Game]:
    """Return games whose name, description or category contains ``query``.

    A blank query lists the whole catalog.
    """

    if not query or not query.strip():
        return list_games(session)
    with storage_guard(session):
        return GameRepository(session).search(query)


__all__ = ["list_games", "search_games"]
