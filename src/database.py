"""Database configuration and session management."""

import logging
from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from src.config import get_settings
from src.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)

settings = get_settings()

# SQLite connections are handed to the request threadpool
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(
    settings.database_url,
    connect_args=connect_args,
    pool_pre_ping=True,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_timeout=settings.db_pool_timeout,
    hide_parameters=True,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base: Any = declarative_base()


def acquire(db: Session) -> Session:
    """Check out a connection for the session or raise DatabaseConnectionError.

    A single attempt is made. The driver message is appended to the error only
    when ``show_db_errors`` is enabled.
    """
    try:
        db.connection()
    except SQLAlchemyError as e:
        detail = str(e.orig) if isinstance(e, DBAPIError) else str(e)
        logger.error(f"Database connection failed: {detail}")
        message = DatabaseConnectionError.default_message
        if get_settings().show_db_errors:
            message = f"{message}: {detail}"
        raise DatabaseConnectionError(message) from e
    return db


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a connected database session."""
    db = SessionLocal()
    try:
        yield acquire(db)
    finally:
        db.close()


def init_db() -> None:
    """Initialize the database by creating all tables."""
    # Import all models here so they are registered with Base.metadata
    from src import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
