# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Builds a fresh application (and store) per test
# - Mints signed tokens for the auth middleware
# =============================================================================

import os
import time

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("HTTPS_REDIRECT", "false")

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from app.config import Settings
from app.main import create_app

SECRET = "SuperSecretKey12345"
ISSUER = "TechHive"
AUDIENCE = "TechHiveUsers"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings for a plain-HTTP test application with the seed users."""
    return Settings(
        HTTPS_REDIRECT=False,
        SEED_USERS=True,
        JWT_SECRET_KEY=SECRET,
        JWT_ISSUER=ISSUER,
        JWT_AUDIENCE=AUDIENCE,
    )


@pytest.fixture
def app(test_settings):
    """A fresh application; each test gets its own store."""
    return create_app(test_settings)


@pytest.fixture
def client(app):
    """HTTP client for the test application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_token():
    """
    Factory for signed tokens.

    Usage:
        make_token()                        # valid for an hour
        make_token(expires_in=-10)          # expired
        make_token(iss="Someone")           # wrong issuer
    """
    def _make_token(
        expires_in: int = 3600,
        secret: str = SECRET,
        **claims,
    ) -> str:
        now = int(time.time())
        payload = {
            "sub": "tester",
            "iss": ISSUER,
            "aud": AUDIENCE,
            "iat": now,
            "exp": now + expires_in,
        }
        payload.update(claims)
        payload = {key: value for key, value in payload.items() if value is not None}
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make_token


@pytest.fixture
def auth_headers(make_token):
    """Authorization header carrying a valid token."""
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def sample_user_payload():
    """Sample create request body."""
    return {"name": "Dana", "email": "dana@x.com"}
