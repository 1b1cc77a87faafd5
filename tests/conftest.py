"""
Pytest configuration and shared fixtures for Teams webhook tests
"""

import pytest
from unittest.mock import MagicMock

from teams_webhook.config import Config
from teams_webhook.models import Card, TextBlock


WEBHOOK_URL = "https://example.webhook.office.com/webhookb2/test"


@pytest.fixture(autouse=True)
def reset_config_singleton():
    """
    Reset the Config singleton around each test.

    Config caches its instance at class level, so tests that construct
    it directly would otherwise leak state into each other.
    """
    Config._instance = None
    yield
    Config._instance = None


@pytest.fixture
def webhook_url() -> str:
    """Webhook URL used by client tests."""
    return WEBHOOK_URL


@pytest.fixture
def hello_card() -> Card:
    """Card with a single text block."""
    card = Card()
    card.add_element(TextBlock("Hello text block"))
    return card


@pytest.fixture
def make_response():
    """Factory for mock HTTP responses."""

    def _make(status_code: int, text: str = ""):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        response.content = text.encode()
        return response

    return _make


@pytest.fixture
def mock_transport(make_response):
    """Mock HTTP transport answering every request with 200."""
    transport = MagicMock()
    transport.request.return_value = make_response(200, "1")
    return transport


@pytest.fixture
def mock_environment(monkeypatch):
    """
    Mock environment variables for testing.

    To override specific variables in a test:
        def test_something(mock_environment, monkeypatch):
            monkeypatch.setenv("SPECIFIC_VAR", "override_value")
    """
    env_vars = {
        "TEAMS_WEBHOOK_URL": WEBHOOK_URL,
        "TEAMS_HTTP_TIMEOUT": "5",
    }

    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)

    return env_vars


@pytest.fixture
def mock_ulid():
    """Mock ULID generator for consistent tracking IDs."""
    mock = MagicMock()
    mock.return_value = "01JCK3Q7H8ZVXN3BARC9GWAEZM"
    return mock
