"""Database configuration and session management."""

from __future__ import annotations

from collections.abc import Generator, Iterator
from contextlib import contextmanager

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from event_planner.config import Settings, get_settings
from event_planner.domain.errors import ApiError


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)


def _engine_options(settings: Settings) -> dict[str, object]:
    """Return keyword arguments for ``create_engine`` based on the URL backend."""

    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine for the configured database."""

    built = create_engine(settings.database_url, **_engine_options(settings))
    if built.dialect.name == "sqlite":
        event.listen(built, "connect", _enable_sqlite_foreign_keys)
    logger.debug("Database engine created for backend '%s'", built.dialect.name)
    return built


engine = build_engine(settings)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from event_planner.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def translate_database_errors(code: str, session: Session | None = None) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as a categorized :class:`ApiError`."""

    try:
        yield
    except SQLAlchemyError as exc:
        if session is not None:
            session.rollback()
        logger.exception("Database operation failed (%s)", code)
        raise ApiError(
            code,
            "The database operation could not be completed",
            hint="Retry the request; contact support if the problem persists.",
            status_code=500,
        ) from exc
