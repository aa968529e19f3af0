"""Use case for retrieving a single member."""

from sqlalchemy.orm import Session

from ludoteca.domain.entities import User
from ludoteca.domain.errors import NotFoundError
from ludoteca.infrastructure.database import storage_guard
from ludoteca.infrastructure.repositories import UserRepository

from ..validators import ensure_positive_id


def get_user(session: Session, user_id: int) -> User:
    """Return the requested user or raise an error if it does not exist."""

    ensure_positive_id(user_id, "user")
    with storage_guard(session):
        user = UserRepository(session).get(user_id)
    if user is None:
        raise NotFoundError("user not found")
    return user
