# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from typing import Optional

from pydantic import BaseModel


class TokenPayload(BaseModel):
    """
    Decoded bearer token claims.

    Only the claims this service checks are declared; anything else in
    the token is ignored.
    """
    sub: Optional[str] = None  # Subject, if the issuer sets one
    iss: str  # Issuer (must be "TechHive")
    aud: str | list[str]  # Audience (must include "TechHiveUsers")
    exp: int  # Expiration timestamp
    iat: Optional[int] = None  # Issued at timestamp

    model_config = {"frozen": True}
