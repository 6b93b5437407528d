"""
Retry evaluators.

An evaluator decides whether a failed request should be retried. It is
called with the error and the 1-indexed attempt number the retry would
become, and may be sync or async:

    async def refresh_then_retry(error, attempt):
        if error.status_code == 401:
            await credentials.refresh()
            return True
        return await default_retry_evaluator(error, attempt)

Evaluators shared by one RetryInterceptor run concurrently for different
in-flight requests. Side effects inside an evaluator (such as refreshing a
shared token) are not serialized by the retry stage; guarding them is up
to the evaluator.
"""

import inspect
from typing import Awaitable, Callable, Union

from http_retry.http.exceptions import HTTPRequestError
from http_retry.http.status_codes import is_retryable
from http_retry.models.enums import ErrorKind


RetryEvaluator = Callable[[Exception, int], Union[bool, Awaitable[bool]]]


def build_status_evaluator(
    is_retryable_status: Callable[[int], bool],
) -> RetryEvaluator:
    """
    Build the default retry policy around a status classifier.

    The policy:
    - Cancellation is never retried
    - A response with a status code is retried iff the classifier says so
    - A response without a status code, or any other failure, is retried

    Args:
        is_retryable_status: Status classifier (status code -> retryable)

    Returns:
        Evaluator implementing the policy
    """
    def evaluate(error: Exception, attempt: int) -> bool:
        if isinstance(error, HTTPRequestError):
            if error.kind is ErrorKind.CANCEL:
                return False
            if error.kind is ErrorKind.RESPONSE:
                status_code = error.status_code
                return is_retryable_status(status_code) if status_code is not None else True
        return True

    return evaluate


default_retry_evaluator: RetryEvaluator = build_status_evaluator(is_retryable)


async def evaluate(evaluator: RetryEvaluator, error: Exception, attempt: int) -> bool:
    """Run an evaluator, awaiting the result if it is awaitable."""
    result = evaluator(error, attempt)
    if inspect.isawaitable(result):
        result = await result
    return bool(result)
