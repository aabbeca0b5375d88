# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides JWT bearer-token verification.
# The AuthMiddleware (app/middleware/auth.py) is the only caller in the
# request pipeline.
#
# Usage:
#   from app.auth import verify_token, TokenValidationError
#
#   try:
#       payload = verify_token(token, settings)
#   except TokenValidationError as e:
#       ...  # 401 with e.message
# =============================================================================

from app.auth.models import TokenPayload
from app.auth.tokens import (
    TokenValidationError,
    extract_bearer_token,
    verify_token,
)

__all__ = [
    "TokenPayload",
    "TokenValidationError",
    "extract_bearer_token",
    "verify_token",
]
