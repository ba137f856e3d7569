"""
Application Configuration Module

Pydantic Settings for type-safe configuration management.

Values are read from environment variables (case-insensitive) and fall back
to a local .env file, then to the defaults declared below. Invalid values
fail at startup, not in the middle of a request.

PATTERN: Settings Singleton
===========================
A single Settings instance is cached with @lru_cache, so the .env file is
read once and every module shares the same configuration.

Usage:
    from bookstore.config import get_settings

    settings = get_settings()
    print(settings.app_name)
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    SECURITY NOTE:
    ==============
    jwt_key has a validator: placeholder values and short keys raise at
    startup, which prevents deploying with an insecure signing key.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="BookStore API",
        description="Application name displayed in docs and logs"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (SQL echo, auto-reload)"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=8000,
        description="Port to bind the server to"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )

    # -------------------------------------------------------------------------
    # Database Settings
    # -------------------------------------------------------------------------
    database_url: str = Field(
        default="sqlite:///./bookstore.db",
        description="SQLAlchemy connection URL"
    )
    db_pool_size: int = Field(
        default=5,
        description="Number of permanent database connections (not used for SQLite)"
    )
    db_max_overflow: int = Field(
        default=10,
        description="Maximum additional connections during high load (not used for SQLite)"
    )

    # -------------------------------------------------------------------------
    # JWT Settings
    # -------------------------------------------------------------------------
    jwt_key: str = Field(
        default="REPLACE_WITH_YOUR_GENERATED_SECRET_KEY",
        description="Symmetric key used to sign login tokens (HS256)"
    )
    jwt_issuer: str = Field(
        default="http://localhost:8000",
        description="Value of the iss claim"
    )
    jwt_audience: str | None = Field(
        default=None,
        description="Value of the aud claim (defaults to the issuer)"
    )
    access_token_expire_minutes: int = Field(
        default=5,
        gt=0,
        description="Lifetime of a login token in minutes"
    )

    # -------------------------------------------------------------------------
    # HTTP Settings
    # -------------------------------------------------------------------------
    allowed_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins"
    )
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable rate limiting on the login endpoint"
    )
    login_rate_limit: str = Field(
        default="10/minute",
        description="slowapi limit string applied to login attempts"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite."""
        return self.database_url.startswith("sqlite")

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log_level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("jwt_key")
    @classmethod
    def validate_jwt_key(cls, v: str) -> str:
        """
        Validate that jwt_key is not a placeholder value.

        The application refuses to start if JWT_KEY is not properly set.

        Raises:
            ValueError: If the key is a placeholder or too short
        """
        placeholder_indicators = [
            "REPLACE_WITH",
            "change-me",
            "your-secret",
            "generate-with",
        ]

        for indicator in placeholder_indicators:
            if indicator.lower() in v.lower():
                raise ValueError(
                    "JWT_KEY contains a placeholder value. "
                    "Generate a secure key with: openssl rand -hex 32"
                )

        if len(v) < 32:
            raise ValueError(
                "JWT_KEY must be at least 32 characters long. "
                "Generate a secure key with: openssl rand -hex 32"
            )

        return v

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        valid_envs = {"development", "staging", "production"}
        if v.lower() not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return v.lower()

    @model_validator(mode="after")
    def default_audience_to_issuer(self) -> "Settings":
        """Tokens are issued for the issuer itself unless told otherwise."""
        if not self.jwt_audience:
            self.jwt_audience = self.jwt_issuer
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    The first call creates the Settings instance (loading .env and running
    validators); later calls return the cached instance.
    """
    return Settings()
