"""
Database Configuration Module

Sets up SQLAlchemy 2.0 for the BookStore API.

We use SYNCHRONOUS SQLAlchemy with synchronous route handlers. FastAPI runs
`def` endpoints in its threadpool, so a request waiting on the database
never blocks the event loop.

Session Management Pattern
==========================
"Session per request":
1. Request arrives → create a new session
2. Repositories use that session for every operation in the request
3. Repositories commit on success, roll back on failure
4. Session is closed when the request ends

This is implemented with FastAPI's dependency injection (get_db).
"""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from bookstore.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# - pool_size / max_overflow: only meaningful for server databases; SQLite
#   uses its own pool classes and rejects these arguments
# - pool_pre_ping: test connection health before using it
# - echo: log SQL statements in debug mode

def _engine_options() -> dict[str, Any]:
    options: dict[str, Any] = {"echo": settings.debug}
    if settings.is_sqlite:
        # SQLite connections may be used from the FastAPI threadpool
        options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=True,
        )
    return options


engine = create_engine(settings.database_url, **_engine_options())


# =============================================================================
# Session Factory
# =============================================================================
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Code before yield creates the session, code after yield closes it.
    The finally block ensures cleanup happens even if the handler raises.

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    Useful for development and for the seed script. In production, use
    Alembic migrations instead.
    """
    Base.metadata.create_all(bind=engine)
