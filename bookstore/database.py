"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Bookstore API.

We use SYNCHRONOUS SQLAlchemy: route handlers are plain functions that
FastAPI runs in its threadpool, which is plenty for a CRUD service.

Storage Client
==============
There is no module-level engine. A Database object owns the engine and
the session factory; the application creates one during startup, keeps
it on app.state and disposes it on shutdown. Tests build their own
instance against SQLite.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session from app.state.database
2. Use session for all database operations in that request
3. Commit on success, rollback on failure (done by the service layer)
4. Close session when request ends
"""

import logging
from collections.abc import Generator
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookstore.config import Settings

logger = logging.getLogger(__name__)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic reads Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Engine Options
# =============================================================================
def engine_options(url: str, pool_size: int, max_overflow: int) -> dict[str, Any]:
    """
    Build create_engine() keyword arguments for the given URL.

    SQLite does not support server-side pooling:
    - check_same_thread=False lets FastAPI's threadpool share connections
    - An in-memory database lives only as long as its connection, so
      StaticPool keeps a single connection open for the engine's lifetime

    Every other backend gets a sized QueuePool with pre-ping, which
    verifies connections are alive before handing them out.
    """
    parsed = make_url(url)

    if parsed.get_backend_name() == "sqlite":
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if parsed.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_pre_ping": True,
    }


# =============================================================================
# Storage Client
# =============================================================================
class Database:
    """
    Engine plus session factory, scoped to the lifetime of the process.

    Usage:
        database = Database.from_settings(get_settings())
        with database.session() as db:
            db.execute(select(Book))
        database.dispose()
    """

    def __init__(
        self,
        url: str,
        *,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
    ) -> None:
        self.url = url
        self.engine: Engine = create_engine(
            url,
            echo=echo,
            **engine_options(url, pool_size, max_overflow),
        )
        # autocommit=False: we control when to commit
        # autoflush=False: don't auto-flush before queries
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.effective_database_url,
            echo=settings.debug,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
        )

    def session(self) -> Session:
        """Open a new session. Sessions are context managers."""
        return self.session_factory()

    def ping(self) -> bool:
        """Return True if the database answers a trivial query."""
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.warning(f"Database ping failed: {exc}")
            return False
        return True

    def create_tables(self) -> None:
        """
        Create all tables known to Base.metadata.

        WARNING: In production, use Alembic migrations instead!
        """
        # Import models so they register with Base.metadata
        import bookstore.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self) -> None:
        """
        Drop all tables.

        DANGER: This deletes all data! Only use in development and tests.
        """
        import bookstore.models  # noqa: F401

        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        """Close every pooled connection."""
        self.engine.dispose()

    def __repr__(self) -> str:
        return f"Database(url='{make_url(self.url).render_as_string(hide_password=True)}')"


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Takes the Database created at startup from the application state,
    yields a fresh session to the route handler and closes it when the
    request ends. The finally block runs even if the handler raises.

    Yields:
        SQLAlchemy Session instance
    """
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()
