"""Use case for reading the borrowing history of a member."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from ludoteca.domain.entities import Borrowing
from ludoteca.infrastructure.database import storage_guard
from ludoteca.infrastructure.repositories import BorrowingRepository

from .get_user import get_user


def list_user_borrowings(session: Session, user_id: int) -> Sequence[Borrowing]:
    """Return every borrowing of ``user_id``, newest first."""

    get_user(session, user_id)
    with storage_guard(session):
        return BorrowingRepository(session).list_by_user(user_id)
