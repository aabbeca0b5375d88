# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Pydantic schemas for data validation
# - services/: User operations on top of the store
# - validation.py: Name/email rules
#
# Routers stay thin: HTTP parsing happens in app/, the rules live here.
# =============================================================================
