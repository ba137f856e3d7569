"""
Book Model

The central model of the catalog. A book optionally references one author.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base

if TYPE_CHECKING:
    from bookstore.models.author import Author


class Book(Base):
    """
    Book model representing books in the catalog.

    Table: books

    Fields:
    - title: Book title (required)
    - year: Publication year
    - isbn: International Standard Book Number (required)
    - summary: Short description, up to 500 characters
    - image: Path of the cover image
    - price: Book price
    - author_id: Optional reference to the author

    Example:
        book = Book(title="Dune", isbn="9780441013593", year=1965)
    """

    __tablename__ = "books"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    year: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Year of publication"
    )

    isbn: Mapped[str] = mapped_column(
        String(20),
        index=True,
        nullable=False,
        comment="International Standard Book Number"
    )

    summary: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Book summary"
    )

    image: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Path of the cover image"
    )

    price: Mapped[float | None] = mapped_column(
        Float,
        nullable=True,
        comment="Book price"
    )

    # -------------------------------------------------------------------------
    # Foreign Keys
    # -------------------------------------------------------------------------
    author_id: Mapped[int | None] = mapped_column(
        ForeignKey("authors.id", ondelete="SET NULL"),
        index=True,
        nullable=True,
        comment="Author of the book"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    author: Mapped["Author | None"] = relationship(
        "Author",
        back_populates="books",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', isbn='{self.isbn}')"
