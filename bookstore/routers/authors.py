"""
Authors Router

CRUD endpoints for authors.

Every handler logs an attempt before acting and the outcome after, and
turns any unexpected fault into the generic 500 response.
"""

from fastapi import APIRouter, Body, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from bookstore.dependencies import AppLogger, Authors
from bookstore.routers.errors import (
    ValidationFailed,
    bad_request,
    internal_error,
    not_found,
)
from bookstore.schemas import AuthorCreate, AuthorResponse, AuthorUpdate, ErrorResponse
from bookstore.services.mapping import (
    author_from_create,
    author_from_update,
    author_to_response,
)
from bookstore.services.validation import validate_author

LOCATION = "Authors"

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        500: {"model": ErrorResponse, "description": "Unexpected server error"},
    },
)


@router.get(
    "",
    response_model=list[AuthorResponse],
    summary="List all authors",
    description="Get every author in the catalog.",
)
def list_authors(authors: Authors, logger: AppLogger) -> list[AuthorResponse] | JSONResponse:
    location = f"{LOCATION} - list_authors"
    try:
        logger.info(f"{location}: Attempted to get all authors")
        response = [author_to_response(author) for author in authors.find_all()]
        logger.info(f"{location}: Successfully got {len(response)} authors")
        return response
    except Exception as exc:
        return internal_error(logger, f"{location}: {exc}")


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Get an author by ID",
    responses={404: {"model": ErrorResponse, "description": "Author not found"}},
)
def get_author(
    author_id: int,
    authors: Authors,
    logger: AppLogger,
) -> AuthorResponse | JSONResponse:
    location = f"{LOCATION} - get_author"
    try:
        logger.info(f"{location}: Attempted to get author with id {author_id}")
        author = authors.find_by_id(author_id)
        if author is None:
            logger.warning(f"{location}: Author not found with id {author_id}")
            raise not_found(f"Author with id {author_id} not found")

        response = author_to_response(author)
        logger.info(f"{location}: Successfully got author with id {author_id}")
        return response
    except HTTPException:
        raise
    except Exception as exc:
        return internal_error(logger, f"{location}: {exc}")


@router.post(
    "",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    responses={400: {"model": ErrorResponse, "description": "Invalid author data"}},
)
def create_author(
    request: Request,
    response: Response,
    authors: Authors,
    logger: AppLogger,
    author_data: AuthorCreate | None = Body(default=None),
) -> AuthorResponse | JSONResponse:
    location = f"{LOCATION} - create_author"
    try:
        logger.info(f"{location}: Attempted to save a new author")
        if author_data is None:
            logger.warning(f"{location}: Attempted to save an empty author")
            raise bad_request("Author data is required")

        errors = validate_author(author_data)
        if errors:
            logger.warning(f"{location}: Attempted to save an invalid author")
            raise ValidationFailed("Invalid author data", errors)

        result = authors.create(author_from_create(author_data))
        if not result.ok:
            return internal_error(logger, f"{location}: Author creation failed - {result.message}")

        author = result.entity
        response.headers["Location"] = request.url_for("get_author", author_id=author.id).path
        logger.info(f"{location}: Author created with id {author.id}")
        return author_to_response(author)
    except HTTPException:
        raise
    except Exception as exc:
        return internal_error(logger, f"{location}: {exc}")


@router.put(
    "/{author_id}",
    response_model=None,
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace an author",
    description="Full replacement: fields left out of the body are cleared.",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid author data or id mismatch"},
    },
)
def update_author(
    author_id: int,
    authors: Authors,
    logger: AppLogger,
    author_data: AuthorUpdate | None = Body(default=None),
) -> JSONResponse | None:
    location = f"{LOCATION} - update_author"
    logger.info(f"{location}: Update attempted with author id {author_id}")
    try:
        if author_id < 1 or author_data is None or author_id != author_data.id:
            logger.warning(f"{location}: Trying to update an invalid author")
            raise bad_request("Author id in path and body must match")

        errors = validate_author(author_data)
        if errors:
            logger.warning(f"{location}: Invalid author information for update")
            raise ValidationFailed("Invalid author data", errors)

        result = authors.update(author_from_update(author_data))
        if not result.ok:
            return internal_error(logger, f"{location}: Update failed - {result.message}")

        logger.info(f"{location}: Author with id {author_id} updated")
        return None
    except HTTPException:
        raise
    except Exception as exc:
        return internal_error(logger, f"{location}: {exc}")


@router.delete(
    "/{author_id}",
    response_model=None,
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
    description="Delete an author. Their books stay in the catalog without an author.",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid author id"},
        404: {"model": ErrorResponse, "description": "Author not found"},
    },
)
def delete_author(
    author_id: int,
    authors: Authors,
    logger: AppLogger,
) -> JSONResponse | None:
    location = f"{LOCATION} - delete_author"
    logger.info(f"{location}: Delete attempted on author with id {author_id}")
    try:
        if author_id < 1:
            logger.warning(f"{location}: Invalid author id {author_id} for deletion")
            raise bad_request("Author id must be a positive integer")

        author = authors.find_by_id(author_id) if authors.exists(author_id) else None
        if author is None:
            logger.warning(f"{location}: There is no author with id {author_id} for deletion")
            raise not_found(f"Author with id {author_id} not found")

        result = authors.delete(author)
        if not result.ok:
            return internal_error(logger, f"{location}: Author deletion failed - {result.message}")

        logger.info(f"{location}: Author deleted with id {author_id}")
        return None
    except HTTPException:
        raise
    except Exception as exc:
        return internal_error(logger, f"{location}: {exc}")
