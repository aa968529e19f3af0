"""Populate an empty database with a few members, games and loans."""

from __future__ import annotations

import argparse
from datetime import timedelta

from ludoteca.application.use_cases.borrowings import borrow_game
from ludoteca.application.use_cases.games import add_game
from ludoteca.application.use_cases.users import list_users, register_user
from ludoteca.domain.errors import LibraryError, StorageError
from ludoteca.infrastructure.database import SessionLocal, initialize_database
from ludoteca.utils import now_in_app_timezone

DEMO_USERS = [
    ("Ana Torres", "ana@example.com"),
    ("Bruno Díaz", "bruno@example.com"),
    ("Carla Méndez", "carla@example.com"),
]

DEMO_GAMES = [
    ("Chess", "Classic two player strategy game", "Strategy", "excellent"),
    ("Catan", "Trade and build settlements", "Strategy", "good"),
    ("Dixit", "Storytelling with illustrated cards", "Party", "good"),
    ("Carcassonne", "Tile placement in medieval France", "Family", "fair"),
]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the database with demo data.")
    parser.add_argument(
        "--with-overdue",
        action="store_true",
        help="Backdate one loan so that it is already overdue.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        if list_users(session, limit=1):
            raise SystemExit("The database already contains members; nothing seeded.")

        users = [register_user(session, name=name, email=email) for name, email in DEMO_USERS]
        games = [
            add_game(
                session,
                name=name,
                description=description,
                category=category,
                condition=condition,
            )
            for name, description, category, condition in DEMO_GAMES
        ]

        now = now_in_app_timezone()
        borrow_game(session, user_id=users[0].id, game_id=games[0].id)
        borrow_game(
            session,
            user_id=users[1].id,
            game_id=games[1].id,
            due_date=now + timedelta(days=1),
        )
        if args.with_overdue:
            borrowed_at = now - timedelta(days=20)
            borrow_game(
                session,
                user_id=users[2].id,
                game_id=games[2].id,
                due_date=borrowed_at + timedelta(days=14),
                now=borrowed_at,
            )
    except (LibraryError, StorageError) as exc:
        raise SystemExit(f"Could not seed demo data: {exc}") from exc
    finally:
        session.close()

    print(f"Seeded {len(DEMO_USERS)} members and {len(DEMO_GAMES)} games.")


if __name__ == "__main__":
    main()
