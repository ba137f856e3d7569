"""
Router Error Helpers

Every handler turns failures into the same few responses:
- ValidationFailed → 400 with field-level errors
- bad_request / not_found → 400 / 404 with a short detail
- internal_error → 500 with a generic message; the real cause is only
  logged

The exception handlers at the bottom are registered in main.py.
"""

import logging

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookstore.schemas import ErrorResponse, FieldError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong, please contact the administrator."


class ValidationFailed(HTTPException):
    """400 carrying a list of field-level errors."""

    def __init__(self, detail: str, errors: list[FieldError]) -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
        self.errors = errors


def bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def internal_error(logger: logging.Logger, message: str) -> JSONResponse:
    """Log `message` and answer with the generic 500 body."""
    logger.error(message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": GENERIC_ERROR_MESSAGE},
    )


# =============================================================================
# Exception Handlers
# =============================================================================
def validation_failed_handler(request: Request, exc: ValidationFailed) -> JSONResponse:
    body = ErrorResponse(detail=exc.detail, errors=exc.errors)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Report malformed JSON and wrong field types as 400, in the same shape
    as ValidationFailed, instead of FastAPI's default 422.
    """
    errors = []
    for error in exc.errors():
        # loc starts with where the value came from: "body", "path", "query"
        location = [str(part) for part in error.get("loc", ())[1:]]
        errors.append(
            FieldError(
                field=".".join(location) or "body",
                message=error.get("msg", "Invalid value"),
            )
        )

    logger.warning(f"{request.method} {request.url.path}: rejected malformed request")
    body = ErrorResponse(detail="Invalid request", errors=errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(),
    )
