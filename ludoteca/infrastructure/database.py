"""Database configuration and session management."""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from ludoteca.config import get_settings
from ludoteca.domain.errors import StorageError


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


logger = logging.getLogger(__name__)

_SQLITE_BUSY_TIMEOUT_SECONDS = 30

# Execution option marking a connection whose transaction will write.
WRITE_TRANSACTION_OPTION = "ludoteca_write_transaction"


def _enable_sqlite_single_writer(engine: Engine) -> None:
    """Emit ``BEGIN`` ourselves and turn foreign keys on for SQLite.

    SQLite has no row level locks, so mutating use cases are serialized by
    taking the write lock when their transaction starts (``BEGIN IMMEDIATE``).
    A competing writer waits for the busy timeout and then sees the committed
    state. Read-only transactions use a deferred ``BEGIN`` and never queue
    behind writers.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):  # noqa: ARG001
        # Let SQLAlchemy emit BEGIN itself instead of the driver.
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(connection):
        if connection.get_execution_options().get(WRITE_TRANSACTION_OPTION):
            connection.exec_driver_sql("BEGIN IMMEDIATE")
        else:
            connection.exec_driver_sql("BEGIN")


def build_engine(database_url: str, **kwargs) -> Engine:
    """Create an engine for ``database_url`` with backend specific tweaks."""

    if database_url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        connect_args.setdefault("timeout", _SQLITE_BUSY_TIMEOUT_SECONDS)
        engine = create_engine(database_url, connect_args=connect_args, **kwargs)
        _enable_sqlite_single_writer(engine)
        return engine
    return create_engine(database_url, pool_pre_ping=True, **kwargs)


def build_session_factory(bind: Engine) -> sessionmaker[Session]:
    """Return a session factory bound to ``bind``."""

    return sessionmaker(autocommit=False, autoflush=False, bind=bind)


settings = get_settings()

engine = build_engine(settings.database_url)
SessionLocal = build_session_factory(engine)


def initialize_database(bind: Engine | None = None) -> None:
    """Ensure all ORM models have corresponding database tables."""

    from ludoteca.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=bind or engine, checkfirst=True)


def get_db() -> Generator:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(session: Session) -> Iterator[Session]:
    """Run the enclosed block as one transaction on ``session``.

    The transaction is committed when the block finishes and rolled back when
    it raises. SQLAlchemy failures are re-raised as :class:`StorageError`;
    domain errors propagate unchanged after the rollback.

    When the session has no transaction yet, one is started as a write
    transaction so that SQLite takes its write lock up front.
    """

    try:
        if not session.in_transaction():
            session.connection(execution_options={WRITE_TRANSACTION_OPTION: True})
        yield session
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Database transaction failed: %s", exc)
        raise StorageError(f"storage failure: {exc}") from exc
    except BaseException:
        session.rollback()
        raise


@contextmanager
def storage_guard(session: Session) -> Iterator[Session]:
    """Run read-only work on ``session``, reporting failures as :class:`StorageError`.

    Nothing is committed. A failed query rolls the session back so it can be
    reused.
    """

    try:
        yield session
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Database query failed: %s", exc)
        raise StorageError(f"storage failure: {exc}") from exc


__all__ = [
    "Base",
    "SessionLocal",
    "WRITE_TRANSACTION_OPTION",
    "build_engine",
    "build_session_factory",
    "engine",
    "get_db",
    "initialize_database",
    "storage_guard",
    "unit_of_work",
]
