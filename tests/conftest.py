"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import logging

import httpx
import pytest
import structlog

from http_retry.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.MAX_RETRIES = 5
    """
    return Settings(
        _env_file=None,

        # === Application ===
        APP_NAME="HTTP Retry (Test)",
        APP_VERSION="0.1.0",
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === HTTP Transport ===
        HTTP_BASE_URL="https://api.example.com",
        HTTP_TIMEOUT=5.0,

        # === Retry ===
        MAX_RETRIES=3,
        RETRY_DELAYS=[],  # No real sleeping in tests
        RETRY_LOG_PRINT=False,

        # === Monitoring ===
        PROMETHEUS_ENABLED=False,  # Disable metrics in tests unless explicitly needed
    )


@pytest.fixture
def make_request():
    """Factory fixture to create httpx requests.

    Usage:
        def test_something(make_request):
            request = make_request("POST", "https://api.example.com/orders")
    """
    def _make_request(
        method: str = "GET",
        url: str = "https://api.example.com/items",
        **kwargs,
    ) -> httpx.Request:
        return httpx.Request(method, url, **kwargs)

    return _make_request


@pytest.fixture
def restore_logging():
    """Restore root logging handlers and structlog defaults after a test
    that reconfigures logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()
