"""
Pydantic Schemas Package

Request/response shapes, kept separate from the SQLAlchemy models so the
database schema and the API can evolve independently.
"""

from bookstore.schemas.author import (
    AuthorCreate,
    AuthorResponse,
    AuthorSummary,
    AuthorUpdate,
    BookSummary,
)
from bookstore.schemas.book import (
    BookCreate,
    BookResponse,
    BookUpdate,
)
from bookstore.schemas.common import ErrorResponse, FieldError
from bookstore.schemas.user import LoginRequest, TokenResponse

__all__ = [
    # Author schemas
    "AuthorCreate",
    "AuthorUpdate",
    "AuthorResponse",
    "AuthorSummary",
    # Book schemas
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookSummary",
    # Error schemas
    "ErrorResponse",
    "FieldError",
    # Auth schemas
    "LoginRequest",
    "TokenResponse",
]
