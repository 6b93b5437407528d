"""
Per-request retry state.

The attempt count and the retry opt-out flag live in the request's
`extensions` dict under namespaced keys, so the state travels with the
request object through every resubmission and is dropped with it. Nothing
clears it in between, so a request must not be reused for a second logical
call. Other pipeline stages using extensions are unaffected.
"""

import httpx


ATTEMPT_KEY = "http_retry.attempt"
DISABLE_RETRY_KEY = "http_retry.disable_retry"


class RetryLedger:
    """
    View over the retry state stored on one request.

    The attempt count starts at 0 and only moves forward; it is written
    once per scheduled retry. A request is in flight at most once at a
    time, so no locking is needed.

    Attributes:
        request: Request whose extensions hold the state
    """

    def __init__(self, request: httpx.Request):
        self.request = request

    @property
    def attempt(self) -> int:
        """Number of retries already scheduled for this request."""
        return self.request.extensions.get(ATTEMPT_KEY, 0)

    @attempt.setter
    def attempt(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"attempt must be >= 0, got {value}")
        if value < self.attempt:
            raise ValueError(
                f"attempt must not decrease (current {self.attempt}, got {value})"
            )
        self.request.extensions[ATTEMPT_KEY] = value

    @property
    def retry_disabled(self) -> bool:
        """Whether retries are switched off for this request."""
        return bool(self.request.extensions.get(DISABLE_RETRY_KEY, False))

    @retry_disabled.setter
    def retry_disabled(self, value: bool) -> None:
        self.request.extensions[DISABLE_RETRY_KEY] = bool(value)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"attempt={self.attempt}, "
            f"retry_disabled={self.retry_disabled})"
        )


def disable_retry(request: httpx.Request, disabled: bool = True) -> httpx.Request:
    """
    Opt a single request out of retries.

    Usage:
        request = client.build_request("POST", "/payments", json=payload)
        await client.fetch(disable_retry(request))
    """
    RetryLedger(request).retry_disabled = disabled
    return request
