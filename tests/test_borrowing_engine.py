"""Tests for the borrow, return and extend lifecycle."""

from __future__ import annotations

import threading
from datetime import timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from ludoteca.application.use_cases.borrowings import (
    borrow_game,
    extend_due_date,
    get_borrowing,
    list_active_borrowings_by_user,
    list_borrowings_by_game,
    list_borrowings_due_soon,
    list_overdue_borrowings,
    return_game,
    update_overdue_status,
)
from ludoteca.application.use_cases.games import (
    add_game,
    get_game,
    get_game_availability,
)
from ludoteca.application.use_cases.users import register_user, update_user
from ludoteca.config import Settings
from ludoteca.domain.entities import Borrowing
from ludoteca.domain.errors import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    ValidationError,
)
from ludoteca.infrastructure.repositories import BorrowingRepository, GameRepository


def test_borrow_and_return_cycle_keeps_availability_in_sync(session, now):
    user = register_user(session, name="Ana", email="a@x.com")
    game = add_game(
        session,
        name="Chess",
        description="desc",
        category="Strategy",
        condition="good",
    )

    borrowing = borrow_game(
        session,
        user_id=user.id,
        game_id=game.id,
        due_date=now + timedelta(days=14),
        now=now,
    )

    assert borrowing.id is not None
    assert borrowing.returned_at is None
    assert borrowing.is_overdue is False
    assert borrowing.borrowed_at == now
    assert get_game(session, game.id).is_available is False

    returned = return_game(session, borrowing.id, now=now + timedelta(days=3))

    assert returned.returned_at == now + timedelta(days=3)
    assert get_game(session, game.id).is_available is True
    assert get_borrowing(session, borrowing.id).returned_at is not None

    with pytest.raises(ConflictError, match="already been returned"):
        return_game(session, borrowing.id, now=now + timedelta(days=4))


def test_borrow_uses_default_loan_length_when_due_date_missing(
    session, make_user, make_game, now
):
    user = make_user()
    game = make_game()

    borrowing = borrow_game(
        session,
        user_id=user.id,
        game_id=game.id,
        now=now,
        settings=Settings(_env_file=None, default_loan_days=10),
    )

    assert borrowing.due_date == now + timedelta(days=10)


@pytest.mark.parametrize(
    ("user_id", "game_id", "label"),
    [(0, 1, "user"), (-3, 1, "user"), (1, 0, "game")],
)
def test_borrow_rejects_non_positive_ids(session, user_id, game_id, label):
    with pytest.raises(InvalidArgumentError, match=f"invalid {label} ID"):
        borrow_game(session, user_id=user_id, game_id=game_id)


def test_borrow_reports_missing_entities(session, make_user, make_game, now):
    user = make_user()
    game = make_game()

    with pytest.raises(NotFoundError, match="game not found"):
        borrow_game(session, user_id=user.id, game_id=999, now=now)
    with pytest.raises(NotFoundError, match="user not found"):
        borrow_game(session, user_id=999, game_id=game.id, now=now)


def test_borrow_of_unavailable_game_conflicts(session, make_user, make_game, now):
    first, second = make_user(), make_user()
    game = make_game()
    borrow_game(session, user_id=first.id, game_id=game.id, now=now)

    with pytest.raises(ConflictError, match="game not available"):
        borrow_game(session, user_id=second.id, game_id=game.id, now=now)

    assert len(list_borrowings_by_game(session, game.id)) == 1


@pytest.mark.parametrize("offset", [timedelta(0), timedelta(days=-1)])
def test_borrow_requires_future_due_date(session, make_user, make_game, now, offset):
    user = make_user()
    game = make_game()

    with pytest.raises(ValidationError, match="future"):
        borrow_game(
            session, user_id=user.id, game_id=game.id, due_date=now + offset, now=now
        )

    assert get_game(session, game.id).is_available is True


def test_borrow_rejects_loans_longer_than_ninety_days(
    session, make_user, make_game, now
):
    user = make_user()
    game = make_game()

    with pytest.raises(ValidationError, match="90 days"):
        borrow_game(
            session,
            user_id=user.id,
            game_id=game.id,
            due_date=now + timedelta(days=91),
            now=now,
        )


def test_borrow_is_refused_to_inactive_members(session, make_user, make_game, now):
    user = make_user()
    update_user(session, user_id=user.id, is_active=False)
    game = make_game()

    with pytest.raises(ConflictError, match="inactive"):
        borrow_game(session, user_id=user.id, game_id=game.id, now=now)
    assert get_game(session, game.id).is_available is True


def test_failed_borrow_leaves_no_partial_state(
    session, make_user, make_game, now, monkeypatch
):
    user = make_user()
    game = make_game()

    def _fail(self, borrowing):
        raise RuntimeError("disk full")

    monkeypatch.setattr(BorrowingRepository, "create", _fail)

    with pytest.raises(RuntimeError):
        borrow_game(session, user_id=user.id, game_id=game.id, now=now)

    assert get_game(session, game.id).is_available is True


def test_stale_availability_read_is_caught_by_conditional_update(
    session, make_user, make_game, now, monkeypatch
):
    first, second = make_user(), make_user()
    game = make_game()
    borrow_game(session, user_id=first.id, game_id=game.id, now=now)

    original_get = GameRepository.get

    def _stale_get(self, game_id):
        stale = original_get(self, game_id)
        stale.is_available = True
        return stale

    monkeypatch.setattr(GameRepository, "get", _stale_get)

    with pytest.raises(ConflictError, match="game not available"):
        borrow_game(session, user_id=second.id, game_id=game.id, now=now)

    monkeypatch.undo()
    assert len(list_borrowings_by_game(session, game.id)) == 1


def test_open_borrowings_are_unique_per_game(session, make_user, make_game, now):
    first, second = make_user(), make_user()
    game = make_game()
    repository = BorrowingRepository(session)
    repository.create(
        Borrowing(
            id=None,
            user_id=first.id,
            game_id=game.id,
            borrowed_at=now,
            due_date=now + timedelta(days=7),
        )
    )

    with pytest.raises(IntegrityError):
        repository.create(
            Borrowing(
                id=None,
                user_id=second.id,
                game_id=game.id,
                borrowed_at=now,
                due_date=now + timedelta(days=7),
            )
        )
    session.rollback()


def test_concurrent_borrowers_only_one_wins(
    session, session_factory, make_user, make_game, now
):
    users = [make_user(), make_user()]
    game = make_game()
    session.close()

    barrier = threading.Barrier(len(users))
    results: list[object] = []
    lock = threading.Lock()

    def _attempt(user_id: int) -> None:
        worker_session = session_factory()
        try:
            barrier.wait()
            outcome = borrow_game(
                worker_session, user_id=user_id, game_id=game.id, now=now
            )
        except ConflictError as exc:
            outcome = exc
        finally:
            worker_session.close()
        with lock:
            results.append(outcome)

    threads = [threading.Thread(target=_attempt, args=(user.id,)) for user in users]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=60)

    winners = [result for result in results if isinstance(result, Borrowing)]
    losers = [result for result in results if isinstance(result, ConflictError)]
    assert len(winners) == 1
    assert len(losers) == 1
    assert "not available" in str(losers[0])

    availability = get_game_availability(session, game.id)
    assert availability.is_available is False
    assert availability.current_borrowing.id == winners[0].id


def test_extend_moves_due_date_forward(session, make_user, make_game, now):
    user = make_user()
    game = make_game()
    borrowing = borrow_game(
        session,
        user_id=user.id,
        game_id=game.id,
        due_date=now + timedelta(days=14),
        now=now,
    )

    extended = extend_due_date(
        session, borrowing.id, now + timedelta(days=30), now=now + timedelta(days=1)
    )

    assert extended.due_date == now + timedelta(days=30)
    assert get_borrowing(session, borrowing.id).due_date == now + timedelta(days=30)


def test_extend_requires_later_date(session, make_user, make_game, now):
    user = make_user()
    game = make_game()
    borrowing = borrow_game(
        session,
        user_id=user.id,
        game_id=game.id,
        due_date=now + timedelta(days=14),
        now=now,
    )

    with pytest.raises(ValidationError, match="after the current due date"):
        extend_due_date(session, borrowing.id, now + timedelta(days=14), now=now)


def test_extend_cap_is_measured_from_borrow_date(session, make_user, make_game, now):
    user = make_user()
    game = make_game()
    borrowing = borrow_game(
        session,
        user_id=user.id,
        game_id=game.id,
        due_date=now + timedelta(days=60),
        now=now,
    )

    later = now + timedelta(days=59)
    extend_due_date(session, borrowing.id, now + timedelta(days=90), now=later)

    with pytest.raises(ValidationError, match="90 days"):
        extend_due_date(
            session,
            borrowing.id,
            now + timedelta(days=90, minutes=1),
            now=later,
        )


def test_extend_of_returned_borrowing_conflicts(session, make_user, make_game, now):
    user = make_user()
    game = make_game()
    borrowing = borrow_game(session, user_id=user.id, game_id=game.id, now=now)
    return_game(session, borrowing.id, now=now + timedelta(days=1))

    with pytest.raises(ConflictError, match="cannot extend a returned item"):
        extend_due_date(session, borrowing.id, now + timedelta(days=20), now=now)


def test_extend_and_return_of_missing_borrowing(session, now):
    with pytest.raises(NotFoundError, match="borrowing not found"):
        return_game(session, 42)
    with pytest.raises(NotFoundError, match="borrowing not found"):
        extend_due_date(session, 42, now + timedelta(days=5), now=now)


def test_overdue_listing_ignores_stored_flag(session, make_user, make_game, now):
    user = make_user()
    game = make_game()
    borrowing = borrow_game(
        session,
        user_id=user.id,
        game_id=game.id,
        due_date=now + timedelta(days=2),
        now=now,
    )
    later = now + timedelta(days=5)

    overdue = list_overdue_borrowings(session, now=later)

    assert [item.id for item in overdue] == [borrowing.id]
    assert overdue[0].is_overdue is False
    assert list_overdue_borrowings(session, now=now) == []


def test_update_overdue_status_writes_flag_and_return_clears_it(
    session, make_user, make_game, now
):
    user = make_user()
    late_game, fine_game = make_game(), make_game()
    late = borrow_game(
        session,
        user_id=user.id,
        game_id=late_game.id,
        due_date=now + timedelta(days=1),
        now=now,
    )
    borrow_game(
        session,
        user_id=user.id,
        game_id=fine_game.id,
        due_date=now + timedelta(days=20),
        now=now,
    )
    later = now + timedelta(days=3)

    assert update_overdue_status(session, now=later) == 1
    assert get_borrowing(session, late.id).is_overdue is True
    assert update_overdue_status(session, now=later) == 0

    return_game(session, late.id, now=later)
    assert get_borrowing(session, late.id).is_overdue is False


def test_extension_recomputes_stored_flag(session, make_user, make_game, now):
    user = make_user()
    game = make_game()
    borrowing = borrow_game(
        session,
        user_id=user.id,
        game_id=game.id,
        due_date=now + timedelta(days=1),
        now=now,
    )
    later = now + timedelta(days=3)
    update_overdue_status(session, now=later)

    extended = extend_due_date(session, borrowing.id, now + timedelta(days=10), now=later)

    assert extended.is_overdue is False


def test_due_soon_excludes_overdue_and_distant_loans(
    session, make_user, make_game, now
):
    user = make_user()
    games = [make_game() for _ in range(3)]
    soon = borrow_game(
        session,
        user_id=user.id,
        game_id=games[0].id,
        due_date=now + timedelta(days=2),
        now=now,
    )
    borrow_game(
        session,
        user_id=user.id,
        game_id=games[1].id,
        due_date=now + timedelta(hours=1),
        now=now,
    )
    borrow_game(
        session,
        user_id=user.id,
        game_id=games[2].id,
        due_date=now + timedelta(days=10),
        now=now,
    )
    later = now + timedelta(hours=2)

    due_soon = list_borrowings_due_soon(session, 3, now=later)

    assert [item.id for item in due_soon] == [soon.id]
    with pytest.raises(ValidationError):
        list_borrowings_due_soon(session, -1, now=later)
    with pytest.raises(ValidationError):
        list_borrowings_due_soon(session, 10**9, now=later)


def test_active_borrowings_by_user(session, make_user, make_game, now):
    user = make_user()
    first, second = make_game(), make_game()
    kept = borrow_game(session, user_id=user.id, game_id=first.id, now=now)
    closed = borrow_game(session, user_id=user.id, game_id=second.id, now=now)
    return_game(session, closed.id, now=now + timedelta(days=1))

    active = list_active_borrowings_by_user(session, user.id)

    assert [item.id for item in active] == [kept.id]
    with pytest.raises(NotFoundError):
        list_active_borrowings_by_user(session, 999)
