from contextlib import asynccontextmanager

from fastapi import FastAPI

from ludoteca import __version__
from ludoteca.config import get_settings
from ludoteca.infrastructure.database import SessionLocal, engine, initialize_database
from ludoteca.infrastructure.jobs import AlertScheduler
from ludoteca.infrastructure.log_config import configure_logging
from ludoteca.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the tables on startup and release resources on shutdown."""

    settings = get_settings()
    configure_logging(settings)
    initialize_database()

    scheduler = None
    if settings.alerts_scheduler_enabled:
        scheduler = AlertScheduler(SessionLocal, settings)
        scheduler.start()
    app.state.alert_scheduler = scheduler

    yield

    if scheduler is not None:
        await scheduler.stop()
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(title="Ludoteca", version=__version__, lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
