"""Author repository."""

from sqlalchemy.orm import selectinload

from bookstore.models import Author
from bookstore.repositories.base import SQLAlchemyRepository


class AuthorRepository(SQLAlchemyRepository[Author]):
    """Data access for authors; loads each author's books with it."""

    model = Author
    load_options = (selectinload(Author.books),)
