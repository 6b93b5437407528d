"""
Monitoring and metrics for the HTTP retry layer.

Exports Prometheus metrics for retry observability.
"""

from http_retry.monitoring.metrics import (
    http_retries_total,
    http_retry_delay_seconds,
    http_retry_give_ups_total,
)

__all__ = [
    "http_retries_total",
    "http_retry_give_ups_total",
    "http_retry_delay_seconds",
]
