# =============================================================================
# app/auth/tokens.py - Bearer Token Verification
# =============================================================================
# Verifies HS256 JWTs signed with the shared secret.
#
# Checks, all mandatory:
# - signature against JWT_SECRET_KEY
# - iss == JWT_ISSUER
# - aud == JWT_AUDIENCE
# - exp present and in the future (no clock skew allowed)
#
# Usage:
#   from app.auth.tokens import verify_token
#   payload = verify_token(token, settings)
# =============================================================================

import logging

from jose import jwt, JWTError, ExpiredSignatureError

from app.auth.models import TokenPayload
from app.config import Settings

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class TokenValidationError(Exception):
    """
    Raised when a bearer token is missing, malformed or fails verification.

    The message is safe to return to the client.
    """

    def __init__(self, message: str, expired: bool = False):
        super().__init__(message)
        self.message = message
        self.expired = expired


def extract_bearer_token(authorization: str | None) -> str:
    """
    Pull the token out of an Authorization header value.

    The scheme is case-sensitive: only "Bearer <token>" is accepted.

    Raises:
        TokenValidationError: If the header is absent or not a Bearer header
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise TokenValidationError("Unauthorized: missing or invalid token.")

    return authorization[len(BEARER_PREFIX):].strip()


def verify_token(token: str, settings: Settings) -> TokenPayload:
    """
    Verify a JWT and return its claims.

    Args:
        token: Raw JWT (without the "Bearer " prefix)
        settings: Provides the key, algorithm, issuer and audience

    Returns:
        TokenPayload: The verified claims

    Raises:
        TokenValidationError: If the signature, issuer, audience or
            expiry check fails, or the token cannot be parsed
    """
    try:
        claims = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
            options={
                "require_exp": True,
                "require_iss": True,
                "require_aud": True,
                "leeway": 0,
            },
        )
    except ExpiredSignatureError:
        logger.warning("JWT token has expired")
        raise TokenValidationError("Unauthorized: token has expired.", expired=True)
    except JWTError as e:
        logger.warning(f"JWT validation failed: {e}")
        raise TokenValidationError("Unauthorized: invalid token.")

    try:
        return TokenPayload(**claims)
    except ValueError as e:
        logger.warning(f"JWT claims have an unexpected shape: {e}")
        raise TokenValidationError("Unauthorized: invalid token.")
