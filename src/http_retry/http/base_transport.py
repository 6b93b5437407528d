"""
Abstract base transport for sending HTTP requests.

Defines the interface the HTTPClient uses to put a request on the wire.
This abstraction allows swapping the network backend (httpx, a test double,
a recording proxy) without changing the interceptor pipeline.
"""

from abc import ABC, abstractmethod

import httpx
import structlog


logger = structlog.get_logger(__name__)


class BaseTransport(ABC):
    """
    Abstract base class for HTTP transports.

    Responsibilities:
    - Send a request and return the response
    - Map every failure to an HTTPRequestError subclass carrying the request

    Does NOT handle:
    - Retries (that's RetryInterceptor's job)
    - Request construction (that's HTTPClient.build_request's job)

    Implementations must send the request object they are given, not a copy:
    per-request state lives in request.extensions and must survive resubmission.
    """

    @abstractmethod
    async def send(self, request: httpx.Request) -> httpx.Response:
        """
        Send a request and return its response.

        Args:
            request: Request to send

        Returns:
            Response from the server

        Raises:
            RequestCancelledError: The request's CancelToken fired
            ResponseStatusError: Server returned an unsuccessful status
            RequestTimeoutError: Connect/send/receive timeout
            ConnectionFailedError: Network-level failure
            TransportError: Any other transport failure
        """
        pass

    def build_request(self, method: str, url: str, **kwargs) -> httpx.Request:
        """
        Build a request suitable for this transport.

        Default implementation builds a plain httpx.Request; `url` must be
        absolute. Subclasses with a base URL or default headers override.
        """
        return httpx.Request(method, url, **kwargs)

    async def close(self) -> None:
        """
        Release connections held by the transport.

        Default implementation does nothing. Subclasses holding persistent
        connections should override.
        """
        logger.debug("Closing transport", transport_class=self.__class__.__name__)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
