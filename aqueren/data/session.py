"""
Session management for SQLAlchemy.

Provides:
- Engine and session factory
- Lifecycle management (init_db, close_db)
- A transactional session_scope context manager

The game engine is synchronous and serialized behind one lock, so this
uses SQLAlchemy's synchronous engine.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from aqueren.data.config import engine_kwargs_for, get_settings
from aqueren.data.models import Base

logger = logging.getLogger(__name__)

# Global engine and session factory (initialized once)
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get the global engine.

    Raises:
        RuntimeError: If engine not initialized (call init_db first)
    """
    if _engine is None:
        raise RuntimeError("Database engine not initialized. Call init_db() first.")
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    """
    Get the global session factory.

    Raises:
        RuntimeError: If session factory not initialized
    """
    if _session_factory is None:
        raise RuntimeError("Session factory not initialized. Call init_db() first.")
    return _session_factory


def init_db(database_url: Optional[str] = None, *, create: bool = True) -> None:
    """
    Initialize the engine and session factory.

    Args:
        database_url: Overrides DATABASE_URL from settings.
        create: Create missing tables (there are no migrations yet).
    """
    global _engine, _session_factory

    settings = get_settings()
    url = database_url or settings.database_url
    if not url:
        raise RuntimeError("No database URL configured (set DATABASE_URL)")
    logger.info(f"Initializing database connection: {url.split('@')[-1]}")

    _engine = create_engine(
        url,
        **engine_kwargs_for(
            url,
            echo=settings.db_echo,
            pool_size=settings.db_pool_size,
            pool_recycle=settings.db_pool_recycle,
        ),
    )
    if url.startswith("sqlite"):
        event.listen(_engine, "connect", _enable_sqlite_foreign_keys)
    _session_factory = sessionmaker(
        bind=_engine,
        expire_on_commit=False,  # Rows are read after the session closes
        autoflush=False,
    )

    if create:
        create_tables()

    logger.info("Database initialized successfully")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def close_db() -> None:
    """Dispose of the engine and forget the session factory."""
    global _engine, _session_factory

    if _engine is not None:
        logger.info("Closing database connection")
        _engine.dispose()
        _engine = None
        _session_factory = None
        logger.info("Database connection closed")


def create_tables() -> None:
    """Create all tables defined in Base.metadata."""
    Base.metadata.create_all(get_engine())
    logger.info("Tables created successfully")


def drop_tables() -> None:
    """
    Drop all tables defined in Base.metadata.

    WARNING: This is destructive and for testing only!
    """
    logger.warning("Dropping all tables (testing mode)")
    Base.metadata.drop_all(get_engine())


@contextmanager
def session_scope() -> Iterator[Session]:
    """
    Context manager for database sessions.

    Usage:
        with session_scope() as session:
            repo = GameRepository(session)
            ...

    Auto-commits on success, rolls back on exception.
    """
    factory = get_session_factory()

    with factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
