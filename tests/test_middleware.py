# =============================================================================
# tests/test_middleware.py - Pipeline Middleware Tests
# =============================================================================
# Tests for:
# - RequestLoggingMiddleware (entry/exit lines, truncation, body, headers
#   and background tasks passed through)
# - ErrorHandlingMiddleware (generic 500 for unhandled faults)
# - HTTPS redirection
#
# Run with: poetry run pytest tests/test_middleware.py -v
# =============================================================================

import logging

import pytest
from fastapi import BackgroundTasks
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from app.middleware.request_logging import body_snippet

LOGGER_NAME = "app.middleware.request_logging"


# =============================================================================
# Request Logging
# =============================================================================

class TestBodySnippet:
    """Tests for body_snippet()."""

    def test_short_body_untouched(self):
        assert body_snippet(b'{"status":200}', 500) == '{"status":200}'

    def test_exact_limit_untouched(self):
        assert body_snippet(b"x" * 500, 500) == "x" * 500

    def test_long_body_truncated(self):
        snippet = body_snippet(b"x" * 501, 500)
        assert snippet == "x" * 500 + "..."

    def test_invalid_utf8_does_not_raise(self):
        assert body_snippet(b"\xff\xfe", 500)


@pytest.fixture
def passthrough_app(app):
    """Test app with routes whose responses carry more than a body."""
    app.state.background_runs = []

    async def cookies():
        response = JSONResponse({"status": 200, "message": "cookies set"})
        response.set_cookie("a", "1")
        response.set_cookie("b", "2")
        return response

    async def with_task(background_tasks: BackgroundTasks):
        background_tasks.add_task(app.state.background_runs.append, "done")
        return {"status": 200, "message": "queued"}

    app.add_api_route("/api/cookies", cookies, methods=["GET"])
    app.add_api_route("/api/with-task", with_task, methods=["GET"])
    return app


class TestRequestLoggingMiddleware:
    """Tests for the logging stage."""

    def test_entry_precedes_exit(self, client, auth_headers, caplog):
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        client.get("/api/users/1", headers=auth_headers)

        messages = [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME]
        assert messages[0] == "Request: GET /api/users/1"
        assert messages[1].startswith("Response: 200 ")
        assert '"name":"Alice Johnson"' in messages[1]

    def test_long_body_logged_truncated_but_delivered_whole(
        self, client, auth_headers, caplog
    ):
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        for i in range(20):
            client.post(
                "/api/users",
                json={"name": f"User {i}", "email": f"user{i}@example.com"},
                headers=auth_headers,
            )
        caplog.clear()

        response = client.get("/api/users?pageSize=50", headers=auth_headers)

        assert len(response.text) > 500
        assert response.json()["data"]["totalItems"] == 23

        exit_line = [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME][-1]
        logged_body = exit_line[len("Response: 200 "):]
        assert logged_body == response.text[:500] + "..."

    def test_rejected_requests_are_not_logged(self, client, caplog):
        """Auth runs before logging, so a 401 never reaches this stage."""
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        client.get("/api/users")

        assert [r for r in caplog.records if r.name == LOGGER_NAME] == []

    def test_headers_preserved(self, client, auth_headers):
        response = client.get("/api/users/1", headers=auth_headers)

        assert response.headers["content-type"] == "application/json"
        assert int(response.headers["content-length"]) == len(response.content)

    def test_repeated_headers_preserved(self, passthrough_app, auth_headers):
        """Buffering the body keeps every header line, duplicates included."""
        with TestClient(passthrough_app) as client:
            response = client.get("/api/cookies", headers=auth_headers)

        assert response.status_code == 200
        cookies = response.headers.get_list("set-cookie")
        assert len(cookies) == 2
        assert cookies[0].startswith("a=1")
        assert cookies[1].startswith("b=2")
        assert response.json() == {"status": 200, "message": "cookies set"}

    def test_background_tasks_still_run(self, passthrough_app, auth_headers):
        with TestClient(passthrough_app) as client:
            response = client.get("/api/with-task", headers=auth_headers)

        assert response.status_code == 200
        assert passthrough_app.state.background_runs == ["done"]


# =============================================================================
# Global Error Handler
# =============================================================================

@pytest.fixture
def faulty_app(app):
    """Test app with a route that fails outside any handler safety net."""

    async def explode():
        raise RuntimeError("database password is hunter2")

    app.add_api_route("/api/explode", explode, methods=["GET"])
    return app


class TestErrorHandlingMiddleware:
    """Tests for the outermost stage."""

    def test_unhandled_fault_is_generic_500(self, faulty_app, auth_headers, test_settings):
        with TestClient(faulty_app) as client:
            response = client.get("/api/explode", headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {
            "status": 500,
            "message": test_settings.INTERNAL_ERROR_MESSAGE,
        }
        assert "hunter2" not in response.text

    def test_fault_logged_by_logging_stage(self, faulty_app, auth_headers, caplog):
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        with TestClient(faulty_app) as client:
            client.get("/api/explode", headers=auth_headers)

        messages = [r.getMessage() for r in caplog.records if r.name == LOGGER_NAME]
        assert messages[0] == "Request: GET /api/explode"
        assert messages[1] == "Request failed: GET /api/explode (RuntimeError)"

    def test_unknown_route_is_enveloped(self, client, auth_headers):
        response = client.get("/api/nothing-here", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["status"] == 404

    def test_wrong_method_is_enveloped(self, client, auth_headers):
        response = client.patch("/api/users", json={}, headers=auth_headers)

        assert response.status_code == 405
        assert response.json() == {"status": 405, "message": "Method Not Allowed"}
        assert "GET" in response.headers["allow"]


# =============================================================================
# HTTPS Redirection
# =============================================================================

class TestHttpsRedirect:
    """Tests for the innermost redirect stage."""

    def test_plain_http_redirected(self, auth_headers):
        app = create_app(Settings(HTTPS_REDIRECT=True))

        with TestClient(app) as client:
            response = client.get("/api/users", headers=auth_headers, follow_redirects=False)

        assert response.status_code in (307, 308)
        assert response.headers["location"].startswith("https://")

    def test_https_served(self, auth_headers):
        app = create_app(Settings(HTTPS_REDIRECT=True))

        with TestClient(app, base_url="https://testserver") as client:
            response = client.get("/api/users", headers=auth_headers)

        assert response.status_code == 200

    def test_auth_checked_before_redirect(self):
        app = create_app(Settings(HTTPS_REDIRECT=True))

        with TestClient(app) as client:
            response = client.get("/api/users", follow_redirects=False)

        assert response.status_code == 401
