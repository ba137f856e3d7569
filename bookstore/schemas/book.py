"""
Book Pydantic Schemas

Wire shapes for Book-related API operations. As with authors, the rules
(required title and ISBN, length limits, non-negative price) are enforced
by bookstore.services.validation, not by the schema.
"""

from pydantic import BaseModel, ConfigDict, Field

from bookstore.schemas.author import AuthorSummary


class BookCreate(BaseModel):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "Dune",
        "isbn": "9780441013593",
        "year": 1965,
        "author_id": 1
    }
    """

    title: str | None = Field(
        default=None,
        description="Book title (required)",
        examples=["Dune", "The Left Hand of Darkness"],
    )

    year: int | None = Field(
        default=None,
        description="Year of publication",
        examples=[1965, 1969],
    )

    isbn: str | None = Field(
        default=None,
        description="ISBN (required)",
        examples=["9780441013593"],
    )

    summary: str | None = Field(
        default=None,
        description="Summary, up to 500 characters",
        examples=["A duke's son is thrown into the politics of a desert planet."],
    )

    image: str | None = Field(
        default=None,
        description="Path of the cover image",
        examples=["covers/dune.jpg"],
    )

    price: float | None = Field(
        default=None,
        description="Book price",
        examples=[9.99],
    )

    author_id: int | None = Field(
        default=None,
        description="ID of an existing author",
        examples=[1],
    )


class BookUpdate(BookCreate):
    """
    Schema for replacing an existing book.

    Full replacement: omitted fields are stored as null.
    """

    id: int | None = Field(
        default=None,
        description="Identifier of the book being replaced",
        examples=[1],
    )


class BookResponse(BaseModel):
    """Schema for book responses."""

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1, 42],
    )
    title: str
    year: int | None = None
    isbn: str
    summary: str | None = None
    image: str | None = None
    price: float | None = None
    author_id: int | None = None
    author: AuthorSummary | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Dune",
                "year": 1965,
                "isbn": "9780441013593",
                "summary": "A duke's son is thrown into the politics of a desert planet.",
                "image": "covers/dune.jpg",
                "price": 9.99,
                "author_id": 1,
                "author": {"id": 1, "first_name": "Frank", "last_name": "Herbert"},
            }
        },
    )
