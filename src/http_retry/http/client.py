"""
HTTP client with an error interceptor pipeline.

The HTTPClient sends requests through a BaseTransport. When the transport
fails, the error runs through the installed interceptors in order; each one
forwards it, resolves the request with a response, or rejects it. If every
interceptor forwards, the final error is raised to the caller.

Usage:
    client = HTTPClient(HttpxTransport(base_url="https://api.example.com"))
    client.interceptors.append(RetryInterceptor(client))
    response = await client.get("/items")
"""

from typing import Any, Optional

import httpx
import structlog

from http_retry.http.base_transport import BaseTransport
from http_retry.http.exceptions import HTTPRequestError
from http_retry.http.interceptors import (
    ErrorHandler,
    HandlerAction,
    HandlerNotCompletedError,
    Interceptor,
)


logger = structlog.get_logger(__name__)


class HTTPClient:
    """
    Async HTTP client routing failures through error interceptors.

    Attributes:
        transport: Transport used to put requests on the wire
        interceptors: Ordered error interceptors (first = consulted first)
    """

    def __init__(
        self,
        transport: BaseTransport,
        interceptors: Optional[list[Interceptor]] = None,
    ):
        self.transport = transport
        self.interceptors: list[Interceptor] = list(interceptors or [])

    def build_request(self, method: str, url: str, **kwargs: Any) -> httpx.Request:
        """Build a request through the transport (base URL, timeout, headers)."""
        return self.transport.build_request(method, url, **kwargs)

    async def fetch(self, request: httpx.Request) -> httpx.Response:
        """
        Send a request and run its failure through the interceptor chain.

        The same request object may be fetched again by an interceptor
        (resubmission); per-request state travels in request.extensions.

        A request object stands for one logical call. Its retry ledger is
        not reset when fetch returns, so fetching it again continues from
        the recorded attempt count; build a new request for a new call.

        Args:
            request: Request to send

        Returns:
            Response from the transport or from an interceptor's resolve()

        Raises:
            Exception: The error rejected by an interceptor, or the error
                forwarded past the last interceptor
        """
        try:
            return await self.transport.send(request)
        except HTTPRequestError as e:
            return await self._handle_error(e)

    async def _handle_error(self, error: Exception) -> httpx.Response:
        for interceptor in self.interceptors:
            handler = ErrorHandler()
            await interceptor.on_error(error, handler)

            if not handler.is_completed:
                raise HandlerNotCompletedError(
                    f"{type(interceptor).__name__}.on_error returned without "
                    f"completing its handler"
                )

            if handler.action is HandlerAction.RESOLVE:
                return handler.response
            if handler.action is HandlerAction.REJECT:
                raise handler.error
            error = handler.error

        raise error

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        return await self.fetch(self.build_request(method, url, **kwargs))

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PUT", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", url, **kwargs)

    async def aclose(self) -> None:
        """Close the underlying transport."""
        await self.transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"transport={self.transport!r}, "
            f"interceptors={[type(i).__name__ for i in self.interceptors]})"
        )
