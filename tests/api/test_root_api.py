"""Tests for the root and health routes."""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import app, create_app


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def client():
    """Create a test client for the module-level app."""
    return TestClient(app)


@pytest.fixture
def custom_settings():
    return Settings(
        _env_file=None,
        environment="testing",
        app_version="9.9.9",
        welcome_message="Hello from the test suite",
    )


# =============================================================================
# GET /
# =============================================================================


class TestRoot:
    def test_returns_welcome_message(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == app.state.settings.welcome_message

    def test_default_message(self):
        assert (
            Settings(_env_file=None).welcome_message
            == "Welcome to Node.js ESM Best Practices!"
        )

    def test_content_type_is_html(self, client):
        response = client.get("/")

        assert response.headers["content-type"] == "text/html; charset=utf-8"

    def test_message_comes_from_app_settings(self, custom_settings):
        client = TestClient(create_app(custom_settings))

        response = client.get("/")

        assert response.text == "Hello from the test suite"

    def test_post_not_allowed(self, client):
        response = client.post("/")

        assert response.status_code == 405

    def test_unknown_path_is_404(self, client):
        response = client.get("/does-not-exist")

        assert response.status_code == 404


# =============================================================================
# GET /health
# =============================================================================


class TestHealth:
    def test_health(self, custom_settings):
        client = TestClient(create_app(custom_settings))

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "version": "9.9.9",
            "environment": "testing",
        }

    def test_openapi_lists_routes(self, client):
        response = client.get("/openapi.json")

        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/" in paths
        assert "/health" in paths


class TestLifespan:
    def test_startup_logs_listening_address(self, caplog):
        caplog.set_level("INFO", logger="app.main")
        settings = Settings(_env_file=None, port=4321)

        with TestClient(create_app(settings)) as client:
            client.get("/")

        messages = [r.getMessage() for r in caplog.records if r.name == "app.main"]
        assert "Server is running on http://localhost:4321" in messages
        assert "Server shutting down" in messages
