"""Use case for deleting a member."""

import logging

from sqlalchemy.orm import Session

from ludoteca.domain.errors import ConflictError, NotFoundError
from ludoteca.infrastructure.database import unit_of_work
from ludoteca.infrastructure.repositories import BorrowingRepository, UserRepository

from ..validators import ensure_positive_id

logger = logging.getLogger(__name__)


def delete_user(session: Session, user_id: int) -> None:
    """Delete the specified user from the system.

    Members holding games cannot be removed, and neither can members with a
    borrowing history (the repository refuses to orphan those records).
    """

    ensure_positive_id(user_id, "user")

    with unit_of_work(session):
        repository = UserRepository(session)
        if repository.get(user_id) is None:
            raise NotFoundError("user not found")

        active = BorrowingRepository(session).list_active_by_user(user_id)
        if active:
            raise ConflictError(
                f"cannot delete user: has {len(active)} active borrowing(s)"
            )
        repository.delete(user_id)

    logger.info("Deleted user %s", user_id)
