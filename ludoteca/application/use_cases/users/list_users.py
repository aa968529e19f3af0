"""Use case for listing members."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from ludoteca.domain.entities import User
from ludoteca.infrastructure.database import storage_guard
from ludoteca.infrastructure.repositories import UserRepository


def list_users(
    session: Session, *, skip: int = 0, limit: int | None = 100
) -> Sequence[User]:
    """Return a list of users respecting pagination parameters."""

    with storage_guard(session):
        return UserRepository(session).list(skip=skip, limit=limit)
