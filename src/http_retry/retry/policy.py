"""
Retry policy configuration.

This module defines the RetryPolicy dataclass: how many times a request may
be resubmitted, how long to wait before each resubmission, and which
evaluator decides whether a failure is worth retrying.
"""

from dataclasses import dataclass, field
from typing import Optional

from http_retry.config import Settings
from http_retry.retry.backoff import BackoffSchedule
from http_retry.retry.evaluator import RetryEvaluator, default_retry_evaluator


DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAYS: tuple[float, ...] = (1.0, 3.0, 5.0)


@dataclass(frozen=True)
class RetryPolicy:
    """
    Immutable retry configuration shared by every request of one interceptor.

    Attributes:
        max_retries: Upper bound on resubmissions per request (0 = never retry)
        retry_delays: Delay in seconds before each attempt; the last one
            repeats once exhausted, empty means no delay
        evaluator: Predicate deciding whether a failure should be retried
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delays: tuple[float, ...] = DEFAULT_RETRY_DELAYS
    evaluator: RetryEvaluator = field(default=default_retry_evaluator)

    def __post_init__(self) -> None:
        """Validate policy invariants."""
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        # Normalize lists to tuples so the policy stays hashable and immutable
        object.__setattr__(self, "retry_delays", tuple(float(d) for d in self.retry_delays))
        if any(d < 0 for d in self.retry_delays):
            raise ValueError("retry_delays must all be >= 0")

    @property
    def schedule(self) -> BackoffSchedule:
        return BackoffSchedule(self.retry_delays)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        evaluator: Optional[RetryEvaluator] = None,
    ) -> "RetryPolicy":
        """Build a policy from MAX_RETRIES and RETRY_DELAYS."""
        return cls(
            max_retries=settings.MAX_RETRIES,
            retry_delays=tuple(settings.RETRY_DELAYS),
            evaluator=evaluator or default_retry_evaluator,
        )
