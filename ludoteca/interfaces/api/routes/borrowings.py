"""Routes driving the borrowing lifecycle."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ludoteca.application.use_cases.borrowings import (
    borrow_game as borrow_game_uc,
    extend_due_date as extend_due_date_uc,
    get_borrowing as get_borrowing_uc,
    list_active_borrowings_by_user as list_active_borrowings_by_user_uc,
    list_borrowings as list_borrowings_uc,
    list_borrowings_by_game as list_borrowings_by_game_uc,
    list_borrowings_due_soon as list_borrowings_due_soon_uc,
    list_overdue_borrowings as list_overdue_borrowings_uc,
    return_game as return_game_uc,
    update_overdue_status as update_overdue_status_uc,
)
from ludoteca.domain.errors import LibraryError, StorageError
from ludoteca.infrastructure.database import get_db
from ludoteca.interfaces.api.routes_helpers import (
    borrowing_to_read_model,
    http_exception_from,
)
from ludoteca.interfaces.api.schemas import (
    BorrowingCreate,
    BorrowingExtend,
    BorrowingRead,
    OverdueUpdateRead,
)

router = APIRouter(prefix="/borrowings", tags=["borrowings"])


@router.post("/", response_model=BorrowingRead, status_code=status.HTTP_201_CREATED)
def borrow_game(borrowing_in: BorrowingCreate, db: Session = Depends(get_db)):
    """Lend a game to a member."""

    try:
        borrowing = borrow_game_uc(
            db,
            user_id=borrowing_in.user_id,
            game_id=borrowing_in.game_id,
            due_date=borrowing_in.due_date,
        )
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return borrowing_to_read_model(borrowing)


@router.get("/", response_model=list[BorrowingRead])
def list_borrowings(skip: int = 0, limit: int | None = None, db: Session = Depends(get_db)):
    try:
        borrowings = list_borrowings_uc(db, skip=skip, limit=limit)
    except StorageError as exc:
        raise http_exception_from(exc) from exc
    return [borrowing_to_read_model(borrowing) for borrowing in borrowings]


@router.get("/overdue", response_model=list[BorrowingRead])
def list_overdue_borrowings(db: Session = Depends(get_db)):
    """Return open borrowings whose due date has passed."""

    try:
        borrowings = list_overdue_borrowings_uc(db)
    except StorageError as exc:
        raise http_exception_from(exc) from exc
    return [borrowing_to_read_model(borrowing) for borrowing in borrowings]


@router.get("/due-soon", response_model=list[BorrowingRead])
def list_borrowings_due_soon(
    days: int = Query(2, ge=0, description="Look-ahead window in days"),
    db: Session = Depends(get_db),
):
    try:
        borrowings = list_borrowings_due_soon_uc(db, days)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return [borrowing_to_read_model(borrowing) for borrowing in borrowings]


@router.post("/update-overdue", response_model=OverdueUpdateRead)
def update_overdue_status(db: Session = Depends(get_db)):
    """Refresh the stored overdue flag of every open borrowing."""

    try:
        updated = update_overdue_status_uc(db)
    except StorageError as exc:
        raise http_exception_from(exc) from exc
    return OverdueUpdateRead(updated=updated)


@router.get("/user/{user_id}", response_model=list[BorrowingRead])
def list_user_active_borrowings(user_id: int, db: Session = Depends(get_db)):
    try:
        borrowings = list_active_borrowings_by_user_uc(db, user_id)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return [borrowing_to_read_model(borrowing) for borrowing in borrowings]


@router.get("/game/{game_id}", response_model=list[BorrowingRead])
def list_game_borrowings(game_id: int, db: Session = Depends(get_db)):
    try:
        borrowings = list_borrowings_by_game_uc(db, game_id)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return [borrowing_to_read_model(borrowing) for borrowing in borrowings]


@router.get("/{borrowing_id}", response_model=BorrowingRead)
def read_borrowing(borrowing_id: int, db: Session = Depends(get_db)):
    try:
        borrowing = get_borrowing_uc(db, borrowing_id)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return borrowing_to_read_model(borrowing)


@router.put("/{borrowing_id}/return", response_model=BorrowingRead)
def return_game(borrowing_id: int, db: Session = Depends(get_db)):
    """Close a borrowing and put the game back on the shelf."""

    try:
        borrowing = return_game_uc(db, borrowing_id)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return borrowing_to_read_model(borrowing)


@router.put("/{borrowing_id}/extend", response_model=BorrowingRead)
def extend_due_date(
    borrowing_id: int,
    extension: BorrowingExtend,
    db: Session = Depends(get_db),
):
    try:
        borrowing = extend_due_date_uc(db, borrowing_id, extension.new_due_date)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return borrowing_to_read_model(borrowing)
