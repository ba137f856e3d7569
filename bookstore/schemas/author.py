"""
Author Pydantic Schemas

These schemas define the wire shape of Author-related API operations.

Schemas only declare field types. Business rules (required fields, length
limits) are checked by explicit functions in
bookstore.services.validation so that every failure can be reported as a
field-level error with a 400 status.

Schema Naming Convention:
- AuthorCreate: body of POST /api/authors
- AuthorUpdate: body of PUT /api/authors/{id} (full replacement, carries id)
- AuthorResponse: what the API returns
- AuthorSummary: compact form nested inside book responses
"""

from pydantic import BaseModel, ConfigDict, Field


class AuthorCreate(BaseModel):
    """
    Schema for creating a new author.

    Example request body:
    {
        "first_name": "Frank",
        "last_name": "Herbert",
        "bio": "American science-fiction author."
    }
    """

    first_name: str | None = Field(
        default=None,
        description="Author's first name (required)",
        examples=["Frank", "Ursula"],
    )

    last_name: str | None = Field(
        default=None,
        description="Author's last name (required)",
        examples=["Herbert", "Le Guin"],
    )

    bio: str | None = Field(
        default=None,
        description="Short biography, up to 250 characters",
        examples=["American science-fiction author best known for Dune."],
    )


class AuthorUpdate(AuthorCreate):
    """
    Schema for replacing an existing author.

    PUT is a full replacement: fields left out of the body are stored as
    null. The id must match the id in the URL.
    """

    id: int | None = Field(
        default=None,
        description="Identifier of the author being replaced",
        examples=[1],
    )


class BookSummary(BaseModel):
    """Compact book representation listed under an author."""

    id: int
    title: str
    year: int | None = None
    isbn: str


class AuthorSummary(BaseModel):
    """Compact author representation nested inside a book."""

    id: int
    first_name: str
    last_name: str


class AuthorResponse(BaseModel):
    """
    Schema for author responses (what the API returns).
    """

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1, 42],
    )
    first_name: str
    last_name: str
    bio: str | None = None
    books: list[BookSummary] = Field(
        default_factory=list,
        description="Books written by this author",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "first_name": "Frank",
                "last_name": "Herbert",
                "bio": "American science-fiction author best known for Dune.",
                "books": [
                    {"id": 1, "title": "Dune", "year": 1965, "isbn": "9780441013593"}
                ],
            }
        },
    )
