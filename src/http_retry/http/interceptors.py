"""
Error interceptor chain primitives.

When a transport fails, the HTTPClient hands the error to each installed
interceptor in turn together with an ErrorHandler. The interceptor decides
the outcome by completing the handler exactly once:

- next(error):  pass an error on to the following interceptor
- resolve(response): finish the request successfully with this response
- reject(error): finish the request with this error, skipping the rest of the chain
"""

from enum import Enum
from typing import Optional

import httpx


class HandlerAlreadyCompletedError(RuntimeError):
    """Raised when an interceptor completes its ErrorHandler more than once."""
    pass


class HandlerNotCompletedError(RuntimeError):
    """Raised when an interceptor returns without completing its ErrorHandler."""
    pass


class HandlerAction(str, Enum):
    NEXT = "next"
    RESOLVE = "resolve"
    REJECT = "reject"


class ErrorHandler:
    """
    Resolution handle for one interceptor invocation.

    Holds the pending outcome of the original caller's request. Exactly one
    of next/resolve/reject must be called per invocation.
    """

    def __init__(self) -> None:
        self.action: Optional[HandlerAction] = None
        self.error: Optional[Exception] = None
        self.response: Optional[httpx.Response] = None

    @property
    def is_completed(self) -> bool:
        return self.action is not None

    def _complete(self, action: HandlerAction) -> None:
        if self.action is not None:
            raise HandlerAlreadyCompletedError(
                f"Handler already completed with '{self.action.value}', "
                f"cannot {action.value}"
            )
        self.action = action

    def next(self, error: Exception) -> None:
        """Forward the error to the next interceptor in the chain."""
        self._complete(HandlerAction.NEXT)
        self.error = error

    def resolve(self, response: httpx.Response) -> None:
        """Complete the request successfully with the given response."""
        self._complete(HandlerAction.RESOLVE)
        self.response = response

    def reject(self, error: Exception) -> None:
        """Complete the request with the given error."""
        self._complete(HandlerAction.REJECT)
        self.error = error


class Interceptor:
    """
    Base class for error interceptors.

    Subclasses override `on_error`. The default implementation forwards
    the error unchanged, so `await super().on_error(error, handler)` is
    the way to give up.

    Example:
        >>> class LoggingInterceptor(Interceptor):
        ...     async def on_error(self, error, handler):
        ...         logger.warning("Request failed", error=str(error))
        ...         await super().on_error(error, handler)
    """

    async def on_error(self, error: Exception, handler: ErrorHandler) -> None:
        """
        Handle a failed request.

        Args:
            error: Error raised by the transport or forwarded by the previous interceptor
            handler: Resolution handle to complete exactly once
        """
        handler.next(error)
