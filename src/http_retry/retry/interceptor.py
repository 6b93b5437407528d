"""
Retry interceptor: resubmits failed requests.

Installed as an error interceptor on an HTTPClient. For every failure it:

1. Gives up right away if retries are disabled for the request or the
   request was cancelled
2. Computes the next attempt number from the request's ledger
3. Gives up if the attempt budget is spent (evaluator not consulted)
4. Awaits the evaluator; gives up if it declines (or raises)
5. Records the attempt, logs, waits the backoff delay
6. Resubmits the same request through the client and completes the
   original handler with the outcome

Giving up forwards the triggering error unchanged to the next interceptor.
A cancellation during the backoff wait is a give-up too: the fresh
RequestCancelledError goes to the next interceptor instead of the
triggering error.

The resubmission goes through HTTPClient.fetch, so a new failure runs the
whole interceptor chain again, including this interceptor. The attempt
count stored on the request is the recursion depth and is bounded by
max_retries; the nested chain settles the final outcome and this level
only relays it to its own handler.
"""

import asyncio
from typing import TYPE_CHECKING, Callable, Optional, Sequence

import httpx
import structlog

from http_retry.http.cancel import CancelToken
from http_retry.http.exceptions import HTTPRequestError, RequestCancelledError
from http_retry.http.interceptors import ErrorHandler, Interceptor
from http_retry.models.enums import ErrorKind, GiveUpReason
from http_retry.monitoring.metrics import (
    http_retries_total,
    http_retry_delay_seconds,
    http_retry_give_ups_total,
)
from http_retry.retry.backoff import BackoffSchedule
from http_retry.retry.evaluator import RetryEvaluator, default_retry_evaluator, evaluate
from http_retry.retry.ledger import RetryLedger
from http_retry.retry.policy import DEFAULT_MAX_RETRIES, DEFAULT_RETRY_DELAYS, RetryPolicy

if TYPE_CHECKING:
    from http_retry.http.client import HTTPClient

logger = structlog.get_logger(__name__)


class RetryInterceptor(Interceptor):
    """
    Error interceptor that retries transient failures.

    Attributes:
        client: Client used to resubmit requests (the one this interceptor is installed on)
        max_retries: Upper bound on resubmissions per request
        retry_delays: Delay in seconds before each attempt (last one repeats)
        log_print: Optional sink receiving one formatted line per retry
        metrics_enabled: Record Prometheus metrics
    """

    def __init__(
        self,
        client: "HTTPClient",
        max_retries: int = DEFAULT_MAX_RETRIES,
        retry_delays: Sequence[float] = DEFAULT_RETRY_DELAYS,
        retry_evaluator: Optional[RetryEvaluator] = None,
        log_print: Optional[Callable[[str], None]] = None,
        metrics_enabled: bool = True,
    ):
        """
        Initialize retry interceptor.

        Args:
            client: Client used to resubmit requests
            max_retries: Upper bound on resubmissions per request
            retry_delays: Delay in seconds per attempt; empty means no wait
            retry_evaluator: Sync or async predicate (error, attempt) -> retry?
                Defaults to default_retry_evaluator.
            log_print: Optional sink receiving one formatted line per retry
            metrics_enabled: Record Prometheus metrics
        """
        self.client = client
        self.policy = RetryPolicy(
            max_retries=max_retries,
            retry_delays=tuple(retry_delays),
            evaluator=retry_evaluator or default_retry_evaluator,
        )
        self.log_print = log_print
        self.metrics_enabled = metrics_enabled
        self._schedule = self.policy.schedule

        logger.info(
            "RetryInterceptor initialized",
            max_retries=self.policy.max_retries,
            retry_delays=list(self.policy.retry_delays),
            custom_evaluator=retry_evaluator is not None,
        )

    @classmethod
    def from_policy(
        cls,
        client: "HTTPClient",
        policy: RetryPolicy,
        log_print: Optional[Callable[[str], None]] = None,
        metrics_enabled: bool = True,
    ) -> "RetryInterceptor":
        return cls(
            client,
            max_retries=policy.max_retries,
            retry_delays=policy.retry_delays,
            retry_evaluator=policy.evaluator,
            log_print=log_print,
            metrics_enabled=metrics_enabled,
        )

    @property
    def max_retries(self) -> int:
        return self.policy.max_retries

    @property
    def retry_delays(self) -> tuple[float, ...]:
        return self.policy.retry_delays

    @property
    def schedule(self) -> BackoffSchedule:
        return self._schedule

    async def on_error(self, error: Exception, handler: ErrorHandler) -> None:
        if not isinstance(error, HTTPRequestError):
            # No request attached, nothing to resubmit
            self._give_up(error, handler, GiveUpReason.NOT_RETRYABLE_ERROR)
            return

        request = error.request
        ledger = RetryLedger(request)

        if ledger.retry_disabled:
            self._give_up(error, handler, GiveUpReason.RETRY_DISABLED)
            return

        if error.kind is ErrorKind.CANCEL:
            # Terminal whatever the evaluator would say
            self._give_up(error, handler, GiveUpReason.CANCELLED)
            return

        attempt = ledger.attempt + 1
        if attempt > self.policy.max_retries:
            self._give_up(error, handler, GiveUpReason.BUDGET_EXHAUSTED, attempt=attempt)
            return

        try:
            should_retry = await evaluate(self.policy.evaluator, error, attempt)
        except Exception as eval_error:
            logger.error(
                "Retry evaluator raised, giving up",
                url=str(request.url),
                attempt=attempt,
                error_type=type(eval_error).__name__,
                error=str(eval_error),
            )
            self._give_up(eval_error, handler, GiveUpReason.EVALUATOR_ERROR, attempt=attempt)
            return

        if not should_retry:
            self._give_up(error, handler, GiveUpReason.EVALUATOR_REJECTED, attempt=attempt)
            return

        ledger.attempt = attempt
        delay = self._schedule.delay_for(attempt)
        self._log_retry(error, attempt, delay)

        if delay > 0:
            try:
                await self._wait(request, delay)
            except RequestCancelledError as cancelled:
                logger.info(
                    "Request cancelled during retry backoff",
                    url=str(request.url),
                    attempt=attempt,
                )
                self._give_up(cancelled, handler, GiveUpReason.CANCELLED, attempt=attempt)
                return

        try:
            response = await self.client.fetch(request)
        except Exception as final_error:
            handler.reject(final_error)
            return
        handler.resolve(response)

    async def _wait(self, request: httpx.Request, delay: float) -> None:
        """Sleep for the backoff delay, aborting early if the request is cancelled."""
        token = CancelToken.of(request)
        if token is None:
            await asyncio.sleep(delay)
            return
        if await token.wait_for(delay):
            raise RequestCancelledError(request, token.reason)

    def _give_up(
        self,
        error: Exception,
        handler: ErrorHandler,
        reason: GiveUpReason,
        attempt: Optional[int] = None,
    ) -> None:
        logger.debug(
            "Not retrying request",
            reason=reason.value,
            attempt=attempt,
            max_retries=self.policy.max_retries,
            error_type=type(error).__name__,
        )
        if self.metrics_enabled:
            http_retry_give_ups_total.labels(reason=reason.value).inc()
        handler.next(error)

    def _log_retry(self, error: HTTPRequestError, attempt: int, delay: float) -> None:
        delay_ms = round(delay * 1000)
        url = str(error.request.url)

        logger.warning(
            "Request failed, retrying",
            url=url,
            attempt=attempt,
            max_retries=self.policy.max_retries,
            delay_ms=delay_ms,
            error_kind=error.kind.value,
            status_code=error.status_code,
            error=str(error),
        )
        if self.metrics_enabled:
            http_retries_total.labels(error_kind=error.kind.value).inc()
            http_retry_delay_seconds.observe(delay)

        if self.log_print is None:
            return
        try:
            self.log_print(
                f"[{url}] An error occurred during request, trying again "
                f"(attempt: {attempt}/{self.policy.max_retries}, "
                f"wait {delay_ms} ms, "
                f"error: {error})"
            )
        except Exception as sink_error:
            logger.warning(
                "Retry log sink failed",
                error_type=type(sink_error).__name__,
                error=str(sink_error),
            )
