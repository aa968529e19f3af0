"""Routes for managing library members."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from ludoteca.application.use_cases.borrowings import (
    can_user_borrow as can_user_borrow_uc,
    list_active_borrowings_by_user as list_active_borrowings_by_user_uc,
)
from ludoteca.application.use_cases.users import (
    delete_user as delete_user_uc,
    get_user as get_user_uc,
    list_user_borrowings as list_user_borrowings_uc,
    list_users as list_users_uc,
    register_user as register_user_uc,
    update_user as update_user_uc,
)
from ludoteca.domain.entities import User
from ludoteca.domain.errors import LibraryError, StorageError
from ludoteca.infrastructure.database import get_db
from ludoteca.interfaces.api.routes_helpers import (
    borrowing_to_read_model,
    http_exception_from,
)
from ludoteca.interfaces.api.schemas import (
    BorrowingRead,
    EligibilityRead,
    UserCreate,
    UserRead,
    UserUpdate,
)

router = APIRouter(prefix="/users", tags=["users"])


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)):
    """Register a new member."""

    try:
        user = register_user_uc(db, name=user_in.name, email=user_in.email)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return _to_read_model(user)


@router.get("/", response_model=list[UserRead])
def list_users(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    try:
        users = list_users_uc(db, skip=skip, limit=limit)
    except StorageError as exc:
        raise http_exception_from(exc) from exc
    return [_to_read_model(user) for user in users]


@router.get("/{user_id}", response_model=UserRead)
def read_user(user_id: int, db: Session = Depends(get_db)):
    try:
        user = get_user_uc(db, user_id)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return _to_read_model(user)


@router.put("/{user_id}", response_model=UserRead)
def update_user(user_id: int, user_in: UserUpdate, db: Session = Depends(get_db)):
    """Update the profile of an existing member."""

    update_data = user_in.model_dump(exclude_unset=True)
    if not update_data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="no fields to update",
        )

    try:
        user = update_user_uc(db, user_id=user_id, **update_data)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return _to_read_model(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, db: Session = Depends(get_db)) -> Response:
    """Remove a member without borrowing history."""

    try:
        delete_user_uc(db, user_id)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}/borrowings", response_model=list[BorrowingRead])
def list_user_borrowings(user_id: int, db: Session = Depends(get_db)):
    """Return the complete borrowing history of a member."""

    try:
        borrowings = list_user_borrowings_uc(db, user_id)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return [borrowing_to_read_model(borrowing) for borrowing in borrowings]


@router.get("/{user_id}/current-loans", response_model=list[BorrowingRead])
def list_current_loans(user_id: int, db: Session = Depends(get_db)):
    try:
        borrowings = list_active_borrowings_by_user_uc(db, user_id)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return [borrowing_to_read_model(borrowing) for borrowing in borrowings]


@router.get("/{user_id}/eligibility", response_model=EligibilityRead)
def read_eligibility(user_id: int, db: Session = Depends(get_db)):
    """Report whether the member may borrow another game right now."""

    try:
        eligibility = can_user_borrow_uc(db, user_id)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return EligibilityRead(
        user_id=user_id,
        can_borrow=eligibility.allowed,
        reason=eligibility.reason,
    )
