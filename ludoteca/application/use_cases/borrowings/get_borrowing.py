"""Use case for retrieving a single borrowing."""

from sqlalchemy.orm import Session

from ludoteca.domain.entities import Borrowing
from ludoteca.domain.errors import NotFoundError
from ludoteca.infrastructure.database import storage_guard
from ludoteca.infrastructure.repositories import BorrowingRepository

from ..validators import ensure_positive_id


def get_borrowing(session: Session, borrowing_id: int) -> Borrowing:
    """Return the borrowing identified by ``borrowing_id`` or raise an error."""

    ensure_positive_id(borrowing_id, "borrowing")
    with storage_guard(session):
        borrowing = BorrowingRepository(session).get(borrowing_id)
    if borrowing is None:
        raise NotFoundError("borrowing not found")
    return borrowing
