# =============================================================================
# core/validation.py - User Input Validation
# =============================================================================
# A single pure function shared by create and update.
# Rules are checked in order and the first failure wins.
# =============================================================================

NAME_REQUIRED = "name is required"
EMAIL_REQUIRED = "email is required"
EMAIL_MALFORMED = "email is malformed"


def validate_user(name: str | None, email: str | None) -> str | None:
    """
    Check a name/email pair.

    Rules:
    1. name must be non-empty after trimming
    2. email must be non-empty after trimming
    3. email must contain '@', but not as its first or last character

    Nothing beyond that: this is not an RFC 5322 validator.

    Args:
        name: Raw name from the request (may be None)
        email: Raw email from the request (may be None)

    Returns:
        The error message for the first failed rule, or None if valid

    Example:
        validate_user("Dana", "a@b")  # None
        validate_user("Dana", "@b")   # "email is malformed"
    """
    if name is None or not name.strip():
        return NAME_REQUIRED

    if email is None or not email.strip():
        return EMAIL_REQUIRED

    email = email.strip()
    if "@" not in email or email.startswith("@") or email.endswith("@"):
        return EMAIL_MALFORMED

    return None
