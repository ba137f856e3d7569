"""
Author Model

Represents an author in the catalog. An author owns zero or more books
through the books.author_id foreign key.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

# TYPE_CHECKING is True only during type checking (mypy, IDE)
if TYPE_CHECKING:
    from bookstore.models.book import Book


class Author(Base):
    """
    Author model representing writers in the catalog.

    Table: authors

    Relationships:
    - books: One-to-Many (Book.author_id points here)

    Example:
        author = Author(first_name="Frank", last_name="Herbert")
        db.add(author)
        db.commit()
    """

    __tablename__ = "authors"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    # Assigned by the database on insert and never changed afterwards
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    first_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Author's first name"
    )

    last_name: Mapped[str] = mapped_column(
        String(100),
        index=True,
        nullable=False,
        comment="Author's last name"
    )

    bio: Mapped[str | None] = mapped_column(
        String(250),
        nullable=True,
        comment="Short author biography"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    # Deleting an author leaves its books in place with author_id set to NULL
    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="author",
    )

    def __repr__(self) -> str:
        return (
            f"Author(id={self.id}, first_name='{self.first_name}', "
            f"last_name='{self.last_name}')"
        )
