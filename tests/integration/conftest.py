"""Integration test fixtures (scripted transports and wired clients).

Builds real HTTPClient + HttpxTransport + RetryInterceptor stacks on top of
httpx.MockTransport, so no network is needed.
"""

from typing import Callable, Sequence

import httpx
import pytest

from http_retry.http.client import HTTPClient
from http_retry.http.httpx_transport import HttpxTransport
from http_retry.retry.interceptor import RetryInterceptor


class ScriptedBackend:
    """Answers each request with the next scripted outcome.

    An outcome is a status code, an httpx.Response factory, or an exception
    class/instance to raise. The last outcome repeats once the script runs out.
    """

    def __init__(self, outcomes: Sequence):
        self.outcomes = list(outcomes)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self.outcomes)) - 1
        outcome = self.outcomes[index]
        if isinstance(outcome, int):
            return httpx.Response(outcome, json={"call": len(self.requests)})
        if isinstance(outcome, type) and issubclass(outcome, Exception):
            raise outcome(f"fail {len(self.requests)}", request=request)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome(request)

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def scripted_backend():
    """Factory for ScriptedBackend instances."""
    return ScriptedBackend


@pytest.fixture
def make_client():
    """Factory for a client wired to a backend with retries installed.

    Usage:
        client = make_client(backend, max_retries=2, retry_delays=[])
    """
    clients: list[HTTPClient] = []

    def _make_client(
        backend: Callable[[httpx.Request], httpx.Response],
        interceptors_after: Sequence = (),
        **retry_options,
    ) -> HTTPClient:
        transport = HttpxTransport(
            base_url="https://api.example.com",
            transport=httpx.MockTransport(backend),
        )
        client = HTTPClient(transport)
        retry_options.setdefault("retry_delays", [])
        retry_options.setdefault("metrics_enabled", False)
        client.interceptors.append(RetryInterceptor(client, **retry_options))
        client.interceptors.extend(interceptors_after)
        clients.append(client)
        return client

    return _make_client
