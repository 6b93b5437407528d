"""
Cooperative cancellation for in-flight requests.

A CancelToken is attached to a request through its extensions. The transport
aborts the send when the token fires, and the retry stage aborts a pending
backoff wait, so a cancelled request is never resubmitted.
"""

import asyncio
from typing import Optional

import httpx
import structlog


logger = structlog.get_logger(__name__)

CANCEL_TOKEN_KEY = "http_retry.cancel_token"


class CancelToken:
    """
    One-shot cancellation signal shared by the caller and the pipeline.

    Usage:
        token = CancelToken()
        token.attach(request)
        ...
        token.cancel("user navigated away")
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.reason: Optional[str] = None

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self, reason: Optional[str] = None) -> None:
        """Fire the token. Later calls are ignored."""
        if self._event.is_set():
            return
        self.reason = reason
        self._event.set()
        logger.debug("Cancel token fired", reason=reason)

    async def wait(self) -> None:
        """Suspend until the token is cancelled."""
        await self._event.wait()

    async def wait_for(self, timeout: float) -> bool:
        """
        Wait up to `timeout` seconds for cancellation.

        Returns:
            True if the token fired before the timeout, False otherwise
        """
        if self.is_cancelled:
            return True
        try:
            await asyncio.wait_for(self._event.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            return False
        return True

    def attach(self, request: httpx.Request) -> httpx.Request:
        """Attach this token to a request and return the request."""
        request.extensions[CANCEL_TOKEN_KEY] = self
        return request

    @staticmethod
    def of(request: httpx.Request) -> Optional["CancelToken"]:
        """Get the token attached to a request, if any."""
        return request.extensions.get(CANCEL_TOKEN_KEY)
