"""
Users Router

Login endpoint: username + password in, signed JWT out.

Security:
=========
- Passwords are checked against bcrypt hashes, never logged
- Tokens are short-lived (5 minutes by default), signed with HS256
- A failed login answers 401 with a generic message; the submitted
  credentials are never sent back
- Login attempts are rate limited per client IP
"""

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse

from bookstore.config import get_settings
from bookstore.dependencies import AppLogger, Identity
from bookstore.routers.errors import internal_error
from bookstore.schemas import ErrorResponse, LoginRequest, TokenResponse
from bookstore.services.rate_limiter import limiter
from bookstore.services.security import create_access_token

settings = get_settings()

LOCATION = "Users"

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={
        401: {"model": ErrorResponse, "description": "Invalid username or password"},
        429: {"model": ErrorResponse, "description": "Too many login attempts"},
    },
)


@router.post(
    "",
    response_model=TokenResponse,
    summary="Login",
    description="""
    Authenticate with username and password to receive a JWT.

    The token carries the user's email (`sub`), id (`uid`) and roles
    (`roles`), and expires after a few minutes.

    **Usage:**
    ```
    Authorization: Bearer <token>
    ```
    """,
)
@limiter.limit(settings.login_rate_limit)
def login(
    request: Request,
    credentials: LoginRequest,
    identity: Identity,
    logger: AppLogger,
) -> TokenResponse | JSONResponse:
    location = f"{LOCATION} - login"
    try:
        logger.info(f"{location}: Login attempted for {credentials.username}")
        if not identity.check_password_sign_in(credentials.username, credentials.password):
            logger.warning(f"{location}: Login failed for {credentials.username}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid username or password",
                headers={"WWW-Authenticate": "Bearer"},
            )

        user = identity.find_by_username(credentials.username)
        token = create_access_token(
            email=user.email,
            user_id=user.id,
            roles=identity.get_roles(user),
        )

        logger.info(f"{location}: User logged in: {user.username}")
        return TokenResponse(token=token)
    except HTTPException:
        raise
    except Exception as exc:
        return internal_error(logger, f"{location}: {exc}")
