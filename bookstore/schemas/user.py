"""
User / Login Schemas

SECURITY: the login response never contains the submitted credentials.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Body of POST /api/users."""

    username: str = Field(
        ...,
        min_length=1,
        description="Login name",
        examples=["admin@bookstore.com"],
    )

    password: str = Field(
        ...,
        min_length=1,
        description="Plain text password",
        examples=["P@ssword1"],
    )


class TokenResponse(BaseModel):
    """Successful login response."""

    token: str = Field(
        ...,
        description="Signed JWT, valid for a few minutes",
    )
