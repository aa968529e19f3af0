from fastapi import FastAPI

from .alerts import router as alerts_router
from .borrowings import router as borrowings_router
from .games import router as games_router
from .health import router as health_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(health_router)
    app.include_router(users_router)
    app.include_router(games_router)
    app.include_router(borrowings_router)
    app.include_router(alerts_router)
