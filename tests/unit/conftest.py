"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without a network.
"""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from http_retry.http.client import HTTPClient


@pytest.fixture
def mock_client():
    """Mock HTTPClient whose fetch() returns a 200 response for the request it gets."""
    client = MagicMock(spec=HTTPClient)

    async def fetch(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"ok": True}, request=request)

    client.fetch = AsyncMock(side_effect=fetch)
    return client


@pytest.fixture
def mock_sleep(monkeypatch):
    """Replace asyncio.sleep in the retry interceptor with an AsyncMock."""
    sleep = AsyncMock(return_value=None)
    monkeypatch.setattr("http_retry.retry.interceptor.asyncio.sleep", sleep)
    return sleep
