"""Shared fixtures: a throwaway SQLite database per test."""

from __future__ import annotations

import pathlib
import sys
from datetime import datetime, timezone

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ludoteca.application.use_cases.games import add_game
from ludoteca.application.use_cases.users import register_user
from ludoteca.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)

# Fixed reference instant so date arithmetic in tests is deterministic.
NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def db_engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'ludoteca-test.db'}")
    initialize_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(db_engine):
    return build_session_factory(db_engine)


@pytest.fixture()
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_user(session):
    counter = {"value": 0}

    def _make_user(name: str | None = None, email: str | None = None):
        counter["value"] += 1
        index = counter["value"]
        return register_user(
            session,
            name=name or f"Member {index}",
            email=email or f"member{index}@example.com",
        )

    return _make_user


@pytest.fixture()
def make_game(session):
    counter = {"value": 0}

    def _make_game(name: str | None = None, condition: str = "good"):
        counter["value"] += 1
        return add_game(
            session,
            name=name or f"Game {counter['value']}",
            description="A game for testing",
            category="Strategy",
            condition=condition,
        )

    return _make_game


