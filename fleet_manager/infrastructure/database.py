"""Database configuration and session management."""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from fleet_manager.config import get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)


def _engine_options(database_url: str) -> dict[str, Any]:
    """Return engine keyword arguments suitable for ``database_url``."""

    if database_url.startswith("sqlite"):
        # SQLite connections are shared between the request threads FastAPI uses.
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


def build_engine(database_url: str) -> Engine:
    """Create a SQLAlchemy engine for ``database_url``."""

    return create_engine(database_url, **_engine_options(database_url))


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database(bind: Engine | None = None) -> None:
    """Ensure all ORM models have corresponding database tables."""

    from fleet_manager.infrastructure import models  # noqa: F401  # ensure models are imported

    target = bind or engine
    Base.metadata.create_all(bind=target, checkfirst=True)
    logger.debug("Database schema ensured on %s", target.url.render_as_string(hide_password=True))


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


__all__ = [
    "Base",
    "SessionLocal",
    "build_engine",
    "engine",
    "get_db",
    "initialize_database",
]
