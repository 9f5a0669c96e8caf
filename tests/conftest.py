"""
Pytest configuration and shared fixtures for helperkit tests.
"""

import json
import tempfile
from pathlib import Path

import httpx
import pytest

from helperkit.core.config import CloudProvider, ConfigManager, HelperKitSettings, WebHelperOptions
from helperkit.logging import logging_manager
from helperkit.web import AsyncWebHelpers


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler=None):
        self.requests = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if handler is None:
                return httpx.Response(200, json={"ok": True})
            return handler(request)

        super().__init__(record)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def echo_handler(request: httpx.Request) -> httpx.Response:
    """Return the request body unchanged as a JSON response."""
    return httpx.Response(
        200,
        content=request.content,
        headers={"Content-Type": "application/json"},
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def config_dir(temp_dir):
    """Create a temporary config directory."""
    config_dir = temp_dir / ".config" / "helperkit"
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture
def config_file(config_dir):
    """Create a temporary config file path."""
    return config_dir / "config.toml"


@pytest.fixture
def empty_settings(clean_environment):
    """Environment settings with nothing set."""
    return HelperKitSettings(_env_file=None)


@pytest.fixture
def config_manager(config_file, empty_settings):
    """Create a ConfigManager isolated from the process environment."""
    return ConfigManager(config_file, settings=empty_settings)


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove HELPERKIT_* variables for the duration of a test."""
    for var in (
        "HELPERKIT_CLOUD_PROVIDER",
        "HELPERKIT_CLOUD_AUTH_KEY",
        "HELPERKIT_CLOUD_HEADER_NAME",
        "HELPERKIT_HTTP_BASE_URL",
        "HELPERKIT_HTTP_TIMEOUT",
        "HELPERKIT_LOGGING_LEVEL",
        "HELPERKIT_LOGGING_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def aws_options():
    return WebHelperOptions(provider=CloudProvider.AWS, authentication_key="aws-key")


@pytest.fixture
def recording_transport():
    return RecordingTransport()


@pytest.fixture
def make_helpers():
    """Build AsyncWebHelpers over a MockTransport without using the factory."""

    def _make(options, handler=None, **client_kwargs):
        transport = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=transport, **client_kwargs)
        return AsyncWebHelpers(client, options, owns_transport=True), transport

    return _make


@pytest.fixture
def sample_payload():
    return {"name": "widget", "count": 3, "tags": ["a", "b"]}


@pytest.fixture
def json_response():
    def _make(data, status_code=200):
        return httpx.Response(
            status_code,
            content=json.dumps(data).encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )

    return _make


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers installed by configure_logging during a test."""
    yield
    logging_manager.reset()


# Pytest hooks
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow tests")
    config.addinivalue_line("markers", "windows: Tests requiring a Windows COM runtime")
