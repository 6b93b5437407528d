"""
Automatic retry of failed HTTP requests.

A RetryInterceptor installed on an HTTPClient resubmits requests that fail
with transient errors, waiting a configured delay before each attempt:

1. **Ledger**: attempt count and opt-out flag stored on the request itself
2. **Evaluator**: pluggable (sync or async) decision per failure
3. **Backoff**: explicit delay list, last delay repeats
4. **Interceptor**: ties the above together and resubmits

Main Components:
    - RetryInterceptor: Error interceptor performing the retries
    - RetryPolicy: Immutable retry configuration
    - RetryLedger / disable_retry: Per-request retry state
    - BackoffSchedule: Attempt number -> delay
    - default_retry_evaluator / build_status_evaluator: Retry decisions

Usage:
    >>> from http_retry.retry import RetryInterceptor
    >>> client.interceptors.append(RetryInterceptor(client, max_retries=3))
    >>> response = await client.get("/items")
"""

from http_retry.retry.backoff import BackoffSchedule
from http_retry.retry.evaluator import (
    RetryEvaluator,
    build_status_evaluator,
    default_retry_evaluator,
)
from http_retry.retry.interceptor import RetryInterceptor
from http_retry.retry.ledger import RetryLedger, disable_retry
from http_retry.retry.policy import RetryPolicy

__all__ = [
    "RetryInterceptor",
    "RetryPolicy",
    "RetryLedger",
    "disable_retry",
    "BackoffSchedule",
    "RetryEvaluator",
    "build_status_evaluator",
    "default_retry_evaluator",
]
