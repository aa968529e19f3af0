"""Tests for member and game management."""

from datetime import timedelta

import pytest

from ludoteca.application.use_cases.borrowings import borrow_game, return_game
from ludoteca.application.use_cases.games import (
    add_game,
    delete_game,
    get_game,
    get_game_availability,
    list_games,
    search_games,
    update_game,
)
from ludoteca.application.use_cases.users import (
    delete_user,
    get_user,
    list_user_borrowings,
    list_users,
    register_user,
    update_user,
)
from ludoteca.domain.entities import GameCondition
from ludoteca.domain.errors import (
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    ValidationError,
)


def test_register_user_normalizes_email(session):
    user = register_user(session, name="  Ana Torres ", email=" Ana@Example.COM ")

    assert user.id is not None
    assert user.name == "Ana Torres"
    assert user.email == "ana@example.com"
    assert user.is_active is True
    assert user.registered_at is not None


def test_register_user_rejects_duplicate_email(session):
    register_user(session, name="Ana", email="a@x.com")

    with pytest.raises(ConflictError, match="already exists"):
        register_user(session, name="Another Ana", email="A@X.com")

    assert len(list_users(session)) == 1


@pytest.mark.parametrize(
    ("name", "email"),
    [
        ("A", "a@x.com"),
        ("", "a@x.com"),
        ("x" * 101, "a@x.com"),
        ("Ana", "not-an-email"),
        ("Ana", "ana@localhost"),
        ("Ana", ""),
    ],
)
def test_register_user_validation(session, name, email):
    with pytest.raises(ValidationError):
        register_user(session, name=name, email=email)


def test_update_user_checks_email_uniqueness(session, make_user):
    first = make_user(email="first@example.com")
    second = make_user(email="second@example.com")

    with pytest.raises(ConflictError):
        update_user(session, user_id=second.id, email="FIRST@example.com")

    updated = update_user(session, user_id=second.id, name="Renamed", is_active=False)
    assert updated.name == "Renamed"
    assert updated.is_active is False
    assert get_user(session, first.id).email == "first@example.com"


def test_get_user_errors(session):
    with pytest.raises(InvalidArgumentError):
        get_user(session, 0)
    with pytest.raises(NotFoundError, match="user not found"):
        get_user(session, 5)


def test_delete_user_guards_borrowing_history(session, make_user, make_game, now):
    member = make_user()
    idle = make_user()
    borrowing = borrow_game(session, user_id=member.id, game_id=make_game().id, now=now)

    with pytest.raises(ConflictError, match="active borrowing"):
        delete_user(session, member.id)

    return_game(session, borrowing.id, now=now + timedelta(days=1))
    with pytest.raises(ConflictError, match="borrowing record"):
        delete_user(session, member.id)

    assert [item.id for item in list_user_borrowings(session, member.id)] == [
        borrowing.id
    ]

    delete_user(session, idle.id)
    with pytest.raises(NotFoundError):
        get_user(session, idle.id)


def test_add_game_defaults_to_available(session):
    game = add_game(
        session,
        name="Chess",
        description="desc",
        category="Strategy",
        condition="GOOD",
    )

    assert game.is_available is True
    assert game.condition is GameCondition.GOOD
    assert game.entry_date is not None


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": "C"},
        {"name": "x" * 201},
        {"description": "x" * 1001},
        {"category": "x" * 101},
        {"condition": "broken"},
        {"condition": ""},
    ],
)
def test_add_game_validation(session, overrides):
    arguments = {
        "name": "Chess",
        "description": "desc",
        "category": "Strategy",
        "condition": "good",
    }
    arguments.update(overrides)

    with pytest.raises(ValidationError):
        add_game(session, **arguments)


def test_list_and_search_games(session, make_user, now):
    chess = add_game(
        session, name="Chess", description="Classic", category="Strategy", condition="good"
    )
    dixit = add_game(
        session, name="Dixit", description="Storytelling", category="Party", condition="fair"
    )
    borrow_game(session, user_id=make_user().id, game_id=chess.id, now=now)

    assert [game.id for game in list_games(session)] == [chess.id, dixit.id]
    assert [game.id for game in list_games(session, available_only=True)] == [dixit.id]
    assert [game.id for game in search_games(session, "party")] == [dixit.id]
    assert [game.id for game in search_games(session, "CLASS")] == [chess.id]
    assert len(search_games(session, "  ")) == 2


def test_update_game_keeps_availability(session, make_user, make_game, now):
    game = make_game("Azul")
    borrow_game(session, user_id=make_user().id, game_id=game.id, now=now)

    updated = update_game(session, game_id=game.id, name="Azul: Summer", condition="poor")

    assert updated.name == "Azul: Summer"
    assert updated.condition is GameCondition.POOR
    assert updated.is_available is False
    with pytest.raises(NotFoundError):
        update_game(session, game_id=404, name="Missing")


def test_game_availability_reports_current_borrowing(
    session, make_user, make_game, now
):
    user = make_user()
    game = make_game()

    assert get_game_availability(session, game.id).current_borrowing is None

    borrowing = borrow_game(session, user_id=user.id, game_id=game.id, now=now)
    availability = get_game_availability(session, game.id)

    assert availability.is_available is False
    assert availability.current_borrowing.id == borrowing.id


def test_delete_game_guards(session, make_user, make_game, now):
    user = make_user()
    borrowed = make_game()
    spare = make_game()
    borrowing = borrow_game(session, user_id=user.id, game_id=borrowed.id, now=now)

    with pytest.raises(ConflictError, match=f"currently borrowed by user {user.id}"):
        delete_game(session, borrowed.id)

    return_game(session, borrowing.id, now=now)
    with pytest.raises(ConflictError, match="borrowing history"):
        delete_game(session, borrowed.id)

    delete_game(session, spare.id)
    with pytest.raises(NotFoundError, match="game not found"):
        get_game(session, spare.id)
