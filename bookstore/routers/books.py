"""
Books Router

CRUD endpoints for books. Same shape as the authors router, plus:
- PUT and DELETE check that the book exists before doing anything else
- a non-null author_id must reference an existing author
"""

from fastapi import APIRouter, Body, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from bookstore.dependencies import AppLogger, Authors, Books
from bookstore.repositories import AuthorRepository, FailureReason
from bookstore.routers.errors import (
    ValidationFailed,
    bad_request,
    internal_error,
    not_found,
)
from bookstore.schemas import (
    BookCreate,
    BookResponse,
    BookUpdate,
    ErrorResponse,
    FieldError,
)
from bookstore.services.mapping import book_from_create, book_from_update, book_to_response
from bookstore.services.validation import validate_book

LOCATION = "Books"

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        500: {"model": ErrorResponse, "description": "Unexpected server error"},
    },
)


def check_book(data: BookCreate, authors: AuthorRepository) -> list[FieldError]:
    """Field rules plus the author reference, which needs the database."""
    errors = validate_book(data)
    if data.author_id is not None and data.author_id > 0 and not authors.exists(data.author_id):
        errors.append(
            FieldError(
                field="author_id",
                message=f"Author with id {data.author_id} does not exist",
            )
        )
    return errors


@router.get(
    "",
    response_model=list[BookResponse],
    summary="List all books",
    description="Get every book in the catalog.",
)
def list_books(books: Books, logger: AppLogger) -> list[BookResponse] | JSONResponse:
    location = f"{LOCATION} - list_books"
    try:
        logger.info(f"{location}: Attempted to retrieve all books")
        response = [book_to_response(book) for book in books.find_all()]
        logger.info(f"{location}: Successfully returned {len(response)} books")
        return response
    except Exception as exc:
        return internal_error(logger, f"{location}: {exc}")


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
    responses={404: {"model": ErrorResponse, "description": "Book not found"}},
)
def get_book(
    book_id: int,
    books: Books,
    logger: AppLogger,
) -> BookResponse | JSONResponse:
    location = f"{LOCATION} - get_book"
    try:
        logger.info(f"{location}: Attempted call for id {book_id}")
        book = books.find_by_id(book_id)
        if book is None:
            logger.warning(f"{location}: Failed to retrieve record with id {book_id}")
            raise not_found(f"Book with id {book_id} not found")

        response = book_to_response(book)
        logger.info(f"{location}: Successfully got record with id {book_id}")
        return response
    except HTTPException:
        raise
    except Exception as exc:
        return internal_error(logger, f"{location}: {exc}")


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    responses={400: {"model": ErrorResponse, "description": "Invalid book data"}},
)
def create_book(
    request: Request,
    response: Response,
    books: Books,
    authors: Authors,
    logger: AppLogger,
    book_data: BookCreate | None = Body(default=None),
) -> BookResponse | JSONResponse:
    location = f"{LOCATION} - create_book"
    try:
        logger.info(f"{location}: Create a new book attempted")
        if book_data is None:
            logger.warning(f"{location}: Empty book creation attempted")
            raise bad_request("Book data is required")

        errors = check_book(book_data, authors)
        if errors:
            logger.warning(f"{location}: Invalid request submitted")
            raise ValidationFailed("Invalid book data", errors)

        result = books.create(book_from_create(book_data))
        if not result.ok:
            return internal_error(logger, f"{location}: Creation failed - {result.message}")

        book = result.entity
        response.headers["Location"] = request.url_for("get_book", book_id=book.id).path
        logger.info(f"{location}: Creation successful - {book!r}")
        return book_to_response(book)
    except HTTPException:
        raise
    except Exception as exc:
        return internal_error(logger, f"{location}: {exc}")


@router.put(
    "/{book_id}",
    response_model=None,
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace a book",
    description="Full replacement: fields left out of the body are cleared.",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid book data or id mismatch"},
        404: {"model": ErrorResponse, "description": "Book not found"},
    },
)
def update_book(
    book_id: int,
    books: Books,
    authors: Authors,
    logger: AppLogger,
    book_data: BookUpdate | None = Body(default=None),
) -> JSONResponse | None:
    location = f"{LOCATION} - update_book"
    try:
        logger.info(f"{location}: Update attempted with book id {book_id}")
        if book_id < 1 or book_data is None or book_id != book_data.id:
            logger.warning(f"{location}: Update attempted with bad data")
            raise bad_request("Book id in path and body must match")

        if not books.exists(book_id):
            logger.warning(f"{location}: Book record not found with id {book_id}")
            raise not_found(f"Book with id {book_id} not found")

        errors = check_book(book_data, authors)
        if errors:
            logger.warning(f"{location}: Invalid book information for update")
            raise ValidationFailed("Invalid book data", errors)

        result = books.update(book_from_update(book_data))
        if result.failure == FailureReason.NOT_FOUND:
            logger.warning(f"{location}: Book record disappeared with id {book_id}")
            raise not_found(f"Book with id {book_id} not found")
        if not result.ok:
            return internal_error(logger, f"{location}: Update failed - {result.message}")

        logger.info(f"{location}: Book record with id {book_id} is updated")
        return None
    except HTTPException:
        raise
    except Exception as exc:
        return internal_error(logger, f"{location}: {exc}")


@router.delete(
    "/{book_id}",
    response_model=None,
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid book id"},
        404: {"model": ErrorResponse, "description": "Book not found"},
    },
)
def delete_book(
    book_id: int,
    books: Books,
    logger: AppLogger,
) -> JSONResponse | None:
    location = f"{LOCATION} - delete_book"
    try:
        logger.info(f"{location}: Delete attempted on record with id {book_id}")
        if book_id < 1:
            logger.warning(f"{location}: Delete failed with bad data - id {book_id}")
            raise bad_request("Book id must be a positive integer")

        book = books.find_by_id(book_id) if books.exists(book_id) else None
        if book is None:
            logger.warning(f"{location}: Delete failed, no record found with id {book_id}")
            raise not_found(f"Book with id {book_id} not found")

        result = books.delete(book)
        if not result.ok:
            return internal_error(logger, f"{location}: Delete failed with book id {book_id} - {result.message}")

        logger.info(f"{location}: Delete successful, book record with id {book_id}")
        return None
    except HTTPException:
        raise
    except Exception as exc:
        return internal_error(logger, f"{location}: {exc}")
