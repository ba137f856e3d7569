"""Book repository."""

from sqlalchemy.orm import selectinload

from bookstore.models import Book
from bookstore.repositories.base import SQLAlchemyRepository


class BookRepository(SQLAlchemyRepository[Book]):
    """Data access for books; loads the referenced author with each book."""

    model = Book
    load_options = (selectinload(Book.author),)
