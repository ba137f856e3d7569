"""
Security Service

Handles password hashing and JWT token operations.

Security Features:
==================
1. Password hashing with bcrypt (passlib)
2. Login token signing with a symmetric key, HS256 only
3. Token decoding with issuer/audience/expiry checks

Token Claims:
=============
- sub: the user's email
- jti: a fresh random UUID per token
- uid: the internal user id
- roles: flattened list of role names
- iss / aud: configured issuer and audience
- exp: issuance time + ACCESS_TOKEN_EXPIRE_MINUTES (5 by default)
"""

import logging
import uuid
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from bookstore.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

# -------------------------------------------------------------------------
# Password Hashing Configuration
# -------------------------------------------------------------------------
# deprecated="auto" means old hashes are automatically upgraded
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Example:
        >>> hashed = hash_password("P@ssword1")
        >>> hashed.startswith("$2b$")
        True
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Uses constant-time comparison to prevent timing attacks.
    """
    return pwd_context.verify(plain_password, hashed_password)


# -------------------------------------------------------------------------
# JWT Token Configuration
# -------------------------------------------------------------------------
ALGORITHM = "HS256"


def create_access_token(
    email: str,
    user_id: int,
    roles: Iterable[str],
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed login token.

    Args:
        email: Token subject
        user_id: Internal user id, stored in the uid claim
        roles: Role names granted to the user
        expires_delta: Optional custom lifetime (defaults to settings)

    Returns:
        Encoded JWT token string

    Example:
        >>> token = create_access_token("admin@bookstore.com", 1, ["Administrator"])
        >>> token.count(".") == 2  # JWT format: header.payload.signature
        True
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    claims: dict[str, Any] = {
        "sub": email,
        "jti": str(uuid.uuid4()),
        "uid": user_id,
        "roles": list(roles),
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "exp": datetime.now(UTC) + expires_delta,
    }

    return jwt.encode(claims, settings.jwt_key, algorithm=ALGORITHM)


def decode_token(token: str) -> dict | None:
    """
    Decode and validate a login token.

    Returns:
        Decoded payload if valid, None if invalid, expired, or issued for
        another issuer/audience
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_key,
            algorithms=[ALGORITHM],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        return None
