"""
Request Validation

Explicit validation functions, one per request shape. Each returns a list
of FieldError; an empty list means the body is valid.

Rules:
- Author: first_name and last_name required (non-blank, ≤ 100 chars),
  bio ≤ 250 chars
- Book: title required (≤ 500), isbn required (≤ 20), summary ≤ 500,
  image ≤ 255, year between 1 and 9999, price ≥ 0

Usage:
    errors = validate_book(book_data)
    if errors:
        raise ValidationFailed("Invalid book data", errors)
"""

from bookstore.schemas import (
    AuthorCreate,
    AuthorUpdate,
    BookCreate,
    BookUpdate,
    FieldError,
)

NAME_MAX_LENGTH = 100
BIO_MAX_LENGTH = 250
TITLE_MAX_LENGTH = 500
ISBN_MAX_LENGTH = 20
SUMMARY_MAX_LENGTH = 500
IMAGE_MAX_LENGTH = 255
MIN_YEAR = 1
MAX_YEAR = 9999


def _required_text(
    errors: list[FieldError],
    field: str,
    value: str | None,
    max_length: int,
) -> None:
    if value is None or not value.strip():
        errors.append(FieldError(field=field, message=f"{field} is required"))
    elif len(value) > max_length:
        errors.append(
            FieldError(
                field=field,
                message=f"{field} must be at most {max_length} characters",
            )
        )


def _optional_text(
    errors: list[FieldError],
    field: str,
    value: str | None,
    max_length: int,
) -> None:
    if value is not None and len(value) > max_length:
        errors.append(
            FieldError(
                field=field,
                message=f"{field} must be at most {max_length} characters",
            )
        )


def validate_author(data: AuthorCreate | AuthorUpdate) -> list[FieldError]:
    """Validate an author body (create and full-replacement update)."""
    errors: list[FieldError] = []
    _required_text(errors, "first_name", data.first_name, NAME_MAX_LENGTH)
    _required_text(errors, "last_name", data.last_name, NAME_MAX_LENGTH)
    _optional_text(errors, "bio", data.bio, BIO_MAX_LENGTH)
    return errors


def validate_book(data: BookCreate | BookUpdate) -> list[FieldError]:
    """
    Validate a book body (create and full-replacement update).

    Whether author_id points at an existing author is a database question
    and is checked by the router, not here.
    """
    errors: list[FieldError] = []
    _required_text(errors, "title", data.title, TITLE_MAX_LENGTH)
    _required_text(errors, "isbn", data.isbn, ISBN_MAX_LENGTH)
    _optional_text(errors, "summary", data.summary, SUMMARY_MAX_LENGTH)
    _optional_text(errors, "image", data.image, IMAGE_MAX_LENGTH)

    if data.year is not None and not MIN_YEAR <= data.year <= MAX_YEAR:
        errors.append(
            FieldError(
                field="year",
                message=f"year must be between {MIN_YEAR} and {MAX_YEAR}",
            )
        )

    if data.price is not None and data.price < 0:
        errors.append(FieldError(field="price", message="price cannot be negative"))

    if data.author_id is not None and data.author_id < 1:
        errors.append(
            FieldError(field="author_id", message="author_id must be a positive integer")
        )

    return errors
