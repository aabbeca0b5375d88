# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.JWT_ISSUER)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every value has a development default, so the API starts without
    a .env file. Override anything per environment.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    HTTPS_REDIRECT: bool = Field(
        default=True,
        description="Redirect plain HTTP requests to HTTPS"
    )

    # -------------------------------------------------------------------------
    # Token Validation
    # -------------------------------------------------------------------------
    # Tokens are issued elsewhere; this service only verifies them.

    JWT_SECRET_KEY: str = Field(
        default="SuperSecretKey12345",
        min_length=16,
        description="Shared symmetric key used to verify token signatures"
    )

    JWT_ALGORITHM: str = Field(
        default="HS256",
        description="Signing algorithm accepted for bearer tokens"
    )

    JWT_ISSUER: str = Field(
        default="TechHive",
        description="Required 'iss' claim"
    )

    JWT_AUDIENCE: str = Field(
        default="TechHiveUsers",
        description="Required 'aud' claim"
    )

    # Comma-separated, parsed by auth_public_paths_list
    AUTH_PUBLIC_PATHS: str = Field(
        default="/health,/docs,/redoc,/openapi.json",
        description="Paths served without a bearer token (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Request Pipeline
    # -------------------------------------------------------------------------

    LOG_BODY_MAX_CHARS: int = Field(
        default=500,
        ge=0,
        description="Max characters of a response body written to the log"
    )

    INTERNAL_ERROR_MESSAGE: str = Field(
        default="An unexpected error occurred. Please try again later.",
        description="Generic message returned by the global error handler"
    )

    # -------------------------------------------------------------------------
    # User Store
    # -------------------------------------------------------------------------

    DEFAULT_PAGE_SIZE: int = Field(
        default=10,
        ge=1,
        description="Page size used when the client sends none (or a non-positive one)"
    )

    SEED_USERS: bool = Field(
        default=True,
        description="Populate the in-memory store with the demo users on startup"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def auth_public_paths_list(self) -> list[str]:
        """
        Parse AUTH_PUBLIC_PATHS string into a list.

        Example: "/health, /docs" -> ["/health", "/docs"]
        """
        return [path.strip() for path in self.AUTH_PUBLIC_PATHS.split(",") if path.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
