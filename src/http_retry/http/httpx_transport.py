"""
httpx transport implementation.

Sends requests through a persistent httpx AsyncClient. Supports:
- Connection pooling (lazily created client)
- Mapping of httpx exceptions to the HTTPRequestError taxonomy
- Optional status validation (status >= 400 raises ResponseStatusError)
- Cooperative cancellation through a CancelToken on the request
"""

import asyncio
from typing import Optional

import httpx
import structlog

from http_retry.http.base_transport import BaseTransport
from http_retry.http.cancel import CancelToken
from http_retry.http.exceptions import (
    ConnectionFailedError,
    HTTPRequestError,
    RequestCancelledError,
    RequestTimeoutError,
    ResponseStatusError,
    TransportError,
)
from http_retry.models.enums import ErrorKind


logger = structlog.get_logger(__name__)


class HttpxTransport(BaseTransport):
    """
    Transport backed by httpx.AsyncClient.

    The client is created on first use and reused afterwards. Pass an
    httpx transport (e.g. httpx.MockTransport) to run without a network.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 30.0,
        connection_limits: Optional[httpx.Limits] = None,
        validate_status: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize httpx transport.

        Args:
            base_url: Base URL prepended to relative request URLs
            timeout: Default timeout in seconds
            connection_limits: httpx connection pool limits (default: 10 max connections)
            validate_status: Raise ResponseStatusError for status >= 400
            transport: Low-level httpx transport override (mostly for tests)
        """
        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0
            )

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.validate_status = validate_status
        self._connection_limits = connection_limits
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        logger.info(
            "httpx transport initialized",
            base_url=self.base_url,
            timeout=timeout,
            validate_status=validate_status,
            connection_limits=str(connection_limits)
        )

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                limits=self._connection_limits,
                transport=self._transport,
                follow_redirects=True
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client

    def build_request(self, method: str, url: str, **kwargs) -> httpx.Request:
        """Build a request with the client's base URL, headers and timeout applied."""
        return self._get_client().build_request(method, url, **kwargs)

    async def send(self, request: httpx.Request) -> httpx.Response:
        token = CancelToken.of(request)
        if token is not None and token.is_cancelled:
            raise RequestCancelledError(request, token.reason)

        try:
            if token is None:
                response = await self._send(request)
            else:
                response = await self._send_cancellable(request, token)
        except HTTPRequestError:
            raise
        except httpx.TimeoutException as e:
            logger.warning("Request timeout", url=str(request.url), error=str(e))
            raise RequestTimeoutError(
                f"Request timeout after {self.timeout}s",
                request=request,
                kind=_timeout_kind(e),
                error=e,
            ) from e
        except (httpx.NetworkError, httpx.RemoteProtocolError) as e:
            logger.warning("Network error", url=str(request.url), error=str(e))
            raise ConnectionFailedError(
                f"Network error: {type(e).__name__}",
                request=request,
                error=e,
            ) from e
        except httpx.HTTPError as e:
            logger.error(
                "Unexpected transport error",
                url=str(request.url),
                error=str(e),
                error_type=type(e).__name__
            )
            raise TransportError(
                f"Transport error: {type(e).__name__}",
                request=request,
                kind=ErrorKind.OTHER,
                error=e,
            ) from e

        if self.validate_status and response.is_error:
            # Read the body so callers can inspect it after the stream is gone
            await response.aread()
            logger.debug(
                "Unsuccessful response",
                url=str(request.url),
                status_code=response.status_code
            )
            raise ResponseStatusError(request, response)

        return response

    async def _send(self, request: httpx.Request) -> httpx.Response:
        return await self._get_client().send(request)

    async def _send_cancellable(
        self, request: httpx.Request, token: CancelToken
    ) -> httpx.Response:
        """Race the send against the cancel token."""
        send_task = asyncio.ensure_future(self._send(request))
        cancel_task = asyncio.ensure_future(token.wait())
        try:
            done, _ = await asyncio.wait(
                {send_task, cancel_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
        except asyncio.CancelledError:
            send_task.cancel()
            cancel_task.cancel()
            raise

        if send_task in done:
            cancel_task.cancel()
            return send_task.result()

        send_task.cancel()
        logger.info("Request cancelled in flight", url=str(request.url))
        raise RequestCancelledError(request, token.reason)

    async def close(self) -> None:
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed httpx client connection")

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"base_url={self.base_url}, "
            f"timeout={self.timeout}s)"
        )


def _timeout_kind(exc: httpx.TimeoutException) -> ErrorKind:
    if isinstance(exc, httpx.ConnectTimeout):
        return ErrorKind.CONNECT_TIMEOUT
    if isinstance(exc, (httpx.WriteTimeout, httpx.PoolTimeout)):
        return ErrorKind.SEND_TIMEOUT
    return ErrorKind.RECEIVE_TIMEOUT
