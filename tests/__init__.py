# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the User Management API:
# - test_validation.py: Name/email rules
# - test_user_store.py: In-memory store and id assignment
# - test_user_service.py: Pagination and business rules
# - test_auth.py: Token verification and the auth middleware
# - test_middleware.py: Request logging and the global error handler
# - test_users_api.py: CRUD endpoints end to end
#
# Run tests with: poetry run pytest
# =============================================================================
