"""
Repositories Package

One repository per entity, all sharing SQLAlchemyRepository:
- find_all / find_by_id / exists for reads
- create / update / delete returning a RepositoryResult
"""

from bookstore.repositories.author import AuthorRepository
from bookstore.repositories.base import (
    FailureReason,
    RepositoryResult,
    SQLAlchemyRepository,
)
from bookstore.repositories.book import BookRepository

__all__ = [
    "AuthorRepository",
    "BookRepository",
    "FailureReason",
    "RepositoryResult",
    "SQLAlchemyRepository",
]
