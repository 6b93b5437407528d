"""
Custom exceptions for the HTTP client layer.

Every failure surfaced by a transport is an HTTPRequestError carrying the
request that failed and an ErrorKind. Error interceptors (the retry stage in
particular) rely on that to find the request and to classify the failure.
"""

from typing import Optional

import httpx

from http_retry.models.enums import ErrorKind


class HTTPRequestError(Exception):
    """
    Base exception for all failed HTTP requests.

    Attributes:
        request: The httpx.Request that failed (same object on every retry)
        kind: Classification of the failure
        response: Response received from the server, if any
        error: Underlying cause (httpx exception, etc.), if any
    """
    def __init__(
        self,
        message: str,
        request: httpx.Request,
        kind: ErrorKind = ErrorKind.OTHER,
        response: Optional[httpx.Response] = None,
        error: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.request = request
        self.kind = kind
        self.response = response
        self.error = error

    @property
    def status_code(self) -> Optional[int]:
        """Status code of the attached response (None without a response)."""
        if self.response is None:
            return None
        return self.response.status_code

    def __str__(self) -> str:
        if self.error is not None:
            return f"{self.message}: {self.error}"
        return self.message


class RequestCancelledError(HTTPRequestError):
    """
    Raised when the caller cancelled the request through its CancelToken.

    Never retried by the default evaluator.
    """
    def __init__(
        self,
        request: httpx.Request,
        reason: Optional[str] = None,
    ):
        super().__init__(
            "Request cancelled" + (f" ({reason})" if reason else ""),
            request=request,
            kind=ErrorKind.CANCEL,
        )
        self.reason = reason


class ResponseStatusError(HTTPRequestError):
    """
    Raised when the server answered with an unsuccessful status code.

    Retried iff the status code is classified retryable.
    """
    def __init__(
        self,
        request: httpx.Request,
        response: httpx.Response,
        error: Optional[BaseException] = None,
    ):
        super().__init__(
            f"HTTP {response.status_code} error",
            request=request,
            kind=ErrorKind.RESPONSE,
            response=response,
            error=error,
        )


class TransportError(HTTPRequestError):
    """
    Raised when the request failed below the HTTP layer.

    Includes network errors, timeouts, protocol errors, etc.
    Retried by default (connection-level failures are assumed transient).
    """
    pass


class RequestTimeoutError(TransportError):
    """
    Raised when connecting, sending or receiving exceeded the timeout.

    The kind tells which phase timed out.
    """
    pass


class ConnectionFailedError(TransportError):
    """Raised when the connection could not be established or was dropped."""
    def __init__(
        self,
        message: str,
        request: httpx.Request,
        error: Optional[BaseException] = None,
    ):
        super().__init__(
            message,
            request=request,
            kind=ErrorKind.CONNECTION,
            error=error,
        )
