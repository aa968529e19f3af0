"""Fixtures providing a test client bound to the per-test database."""

import pytest
from fastapi.testclient import TestClient

from ludoteca.infrastructure.database import get_db
from main import create_app


@pytest.fixture()
def client(session_factory):
    """Return a client whose requests use the temporary database.

    The lifespan is not entered, so the default database is never touched.
    """

    app = create_app()

    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def create_user(client):
    def _create_user(name: str = "Ana Torres", email: str = "ana@example.com") -> dict:
        response = client.post("/users/", json={"name": name, "email": email})
        assert response.status_code == 201, response.text
        return response.json()

    return _create_user


@pytest.fixture()
def create_game(client):
    def _create_game(name: str = "Chess", condition: str = "good") -> dict:
        response = client.post(
            "/games/",
            json={
                "name": name,
                "description": "A board game",
                "category": "Strategy",
                "condition": condition,
            },
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create_game
