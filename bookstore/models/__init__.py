"""
SQLAlchemy Models Package

Model Relationships:
- Author -> Book: One-to-Many (Book.author_id, nullable)
- User <-> Role: Many-to-Many through user_roles

All models are imported here so Alembic discovers them for migrations.
"""

from bookstore.models.author import Author
from bookstore.models.book import Book
from bookstore.models.user import Role, User, user_roles

__all__ = [
    "Author",
    "Book",
    "Role",
    "User",
    "user_roles",
]
