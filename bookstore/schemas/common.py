"""
Shared Schemas

Error payloads returned by every router.
"""

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    """A single field-level validation failure."""

    field: str = Field(
        ...,
        description="Name of the offending field (dotted for nested values)",
        examples=["title"],
    )
    message: str = Field(
        ...,
        description="Human readable reason",
        examples=["Title is required"],
    )


class ErrorResponse(BaseModel):
    """
    Body of every 4xx/5xx response.

    `errors` is only present for validation failures.
    """

    detail: str = Field(..., examples=["Invalid book data"])
    errors: list[FieldError] | None = Field(default=None)
