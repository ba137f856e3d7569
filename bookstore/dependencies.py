"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers with
Depends(). FastAPI manages their lifecycle per request.

Everything a handler talks to comes from here: the database session, the
logger, the repositories and the identity store. Tests swap any of them
through app.dependency_overrides.
"""

import logging
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from bookstore.database import get_db
from bookstore.repositories import AuthorRepository, BookRepository
from bookstore.services.identity import IdentityStore

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def get_books(db: Session = Depends(get_db)):
# you can write:
#   def get_books(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Logging
# =============================================================================
def get_logger() -> logging.Logger:
    """
    Logger handed to route handlers and the components they build.

    Override this dependency to capture or silence request logging.
    """
    return logging.getLogger("bookstore.api")


AppLogger = Annotated[logging.Logger, Depends(get_logger)]


# =============================================================================
# Repositories
# =============================================================================
def get_author_repository(db: DbSession, logger: AppLogger) -> AuthorRepository:
    return AuthorRepository(db, logger)


def get_book_repository(db: DbSession, logger: AppLogger) -> BookRepository:
    return BookRepository(db, logger)


def get_identity_store(db: DbSession, logger: AppLogger) -> IdentityStore:
    return IdentityStore(db, logger)


Authors = Annotated[AuthorRepository, Depends(get_author_repository)]
Books = Annotated[BookRepository, Depends(get_book_repository)]
Identity = Annotated[IdentityStore, Depends(get_identity_store)]
