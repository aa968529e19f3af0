"""Routes for the game catalog."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from ludoteca.application.use_cases.borrowings import (
    list_borrowings_by_game as list_borrowings_by_game_uc,
)
from ludoteca.application.use_cases.games import (
    add_game as add_game_uc,
    delete_game as delete_game_uc,
    get_game as get_game_uc,
    get_game_availability as get_game_availability_uc,
    list_games as list_games_uc,
    search_games as search_games_uc,
    update_game as update_game_uc,
)
from ludoteca.domain.entities import Game
from ludoteca.domain.errors import LibraryError, StorageError
from ludoteca.infrastructure.database import get_db
from ludoteca.interfaces.api.routes_helpers import (
    borrowing_to_read_model,
    http_exception_from,
)
from ludoteca.interfaces.api.schemas import (
    BorrowingRead,
    GameAvailabilityRead,
    GameCreate,
    GameRead,
    GameUpdate,
)

router = APIRouter(prefix="/games", tags=["games"])


def _to_read_model(game: Game) -> GameRead:
    return GameRead.model_validate(game)


@router.post("/", response_model=GameRead, status_code=status.HTTP_201_CREATED)
def add_game(game_in: GameCreate, db: Session = Depends(get_db)):
    """Add a game to the catalog; new games start out available."""

    try:
        game = add_game_uc(
            db,
            name=game_in.name,
            description=game_in.description,
            category=game_in.category,
            condition=game_in.condition,
        )
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return _to_read_model(game)


@router.get("/", response_model=list[GameRead])
def list_games(
    available_only: bool = Query(False, description="Only list games that can be borrowed"),
    skip: int = 0,
    limit: int | None = None,
    db: Session = Depends(get_db),
):
    try:
        games = list_games_uc(
            db, available_only=available_only, skip=skip, limit=limit
        )
    except StorageError as exc:
        raise http_exception_from(exc) from exc
    return [_to_read_model(game) for game in games]


@router.get("/search", response_model=list[GameRead])
def search_games(
    q: str = Query("", description="Text matched against name, description and category"),
    db: Session = Depends(get_db),
):
    try:
        games = search_games_uc(db, q)
    except StorageError as exc:
        raise http_exception_from(exc) from exc
    return [_to_read_model(game) for game in games]


@router.get("/{game_id}", response_model=GameRead)
def read_game(game_id: int, db: Session = Depends(get_db)):
    try:
        game = get_game_uc(db, game_id)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return _to_read_model(game)


@router.put("/{game_id}", response_model=GameRead)
def update_game(game_id: int, game_in: GameUpdate, db: Session = Depends(get_db)):
    """Edit the descriptive fields of a game."""

    update_data = game_in.model_dump(exclude_unset=True)
    if not update_data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="no fields to update",
        )

    try:
        game = update_game_uc(db, game_id=game_id, **update_data)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return _to_read_model(game)


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game(game_id: int, db: Session = Depends(get_db)) -> Response:
    try:
        delete_game_uc(db, game_id)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{game_id}/borrowings", response_model=list[BorrowingRead])
def list_game_borrowings(game_id: int, db: Session = Depends(get_db)):
    try:
        borrowings = list_borrowings_by_game_uc(db, game_id)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc
    return [borrowing_to_read_model(borrowing) for borrowing in borrowings]


@router.get("/{game_id}/availability", response_model=GameAvailabilityRead)
def read_game_availability(game_id: int, db: Session = Depends(get_db)):
    """Return whether the game is on the shelf and who holds it otherwise."""

    try:
        availability = get_game_availability_uc(db, game_id)
    except (LibraryError, StorageError) as exc:
        raise http_exception_from(exc) from exc

    current = availability.current_borrowing
    return GameAvailabilityRead(
        game_id=availability.game.id,
        is_available=availability.is_available,
        current_borrowing=borrowing_to_read_model(current) if current else None,
    )
