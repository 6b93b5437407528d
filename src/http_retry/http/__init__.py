"""
HTTP client, transports and error interceptor pipeline.

Components:
- HTTPClient: Sends requests and routes failures through interceptors
- Interceptor / ErrorHandler: Error pipeline stage and its resolution handle
- BaseTransport: Abstract transport interface
- HttpxTransport: Transport backed by httpx.AsyncClient
- CancelToken: Cooperative per-request cancellation
- status_codes: Retryable status code table
- exceptions: HTTPRequestError taxonomy
"""

from http_retry.http.base_transport import BaseTransport
from http_retry.http.cancel import CancelToken
from http_retry.http.client import HTTPClient
from http_retry.http.exceptions import (
    ConnectionFailedError,
    HTTPRequestError,
    RequestCancelledError,
    RequestTimeoutError,
    ResponseStatusError,
    TransportError,
)
from http_retry.http.httpx_transport import HttpxTransport
from http_retry.http.interceptors import (
    ErrorHandler,
    HandlerAlreadyCompletedError,
    HandlerNotCompletedError,
    Interceptor,
)
from http_retry.http.status_codes import RETRYABLE_STATUSES, is_retryable

__all__ = [
    "BaseTransport",
    "CancelToken",
    "HTTPClient",
    "HttpxTransport",
    "Interceptor",
    "ErrorHandler",
    "HandlerAlreadyCompletedError",
    "HandlerNotCompletedError",
    "HTTPRequestError",
    "RequestCancelledError",
    "ResponseStatusError",
    "TransportError",
    "RequestTimeoutError",
    "ConnectionFailedError",
    "RETRYABLE_STATUSES",
    "is_retryable",
]
