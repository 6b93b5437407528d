"""Prometheus metrics for the HTTP retry layer.

These metrics are registered on the default prometheus_client registry and
exposed by whatever /metrics endpoint the host application serves.
Alert rules should be configured for:
- http_retries_total (high retry rate indicates an unstable upstream)
- http_retry_give_ups_total{reason="budget_exhausted"} (retries not enough)
"""

from prometheus_client import Counter, Histogram

# === Retry Metrics ===

http_retries_total = Counter(
    "http_retries_total",
    "Total resubmissions scheduled by error kind",
    ["error_kind"],
)
"""
Resubmissions scheduled by the retry stage.

Labels:
- error_kind: response, connection, connect_timeout, send_timeout, receive_timeout, other

Alert thresholds:
- WARN: retry rate > 10% of total requests
- CRITICAL: retry rate > 30% of total requests
"""

http_retry_give_ups_total = Counter(
    "http_retry_give_ups_total",
    "Total failures forwarded without retry by reason",
    ["reason"],
)
"""
Failures the retry stage stopped retrying.

Labels:
- reason: retry_disabled, cancelled, not_retryable_error, budget_exhausted,
  evaluator_rejected, evaluator_error
"""

http_retry_delay_seconds = Histogram(
    "http_retry_delay_seconds",
    "Backoff delay scheduled before a resubmission",
    buckets=[0.0, 0.1, 0.5, 1.0, 3.0, 5.0, 10.0, 30.0],
)
"""
Scheduled backoff delays. A spike in the last bucket means requests keep
running past the end of the configured delay list.
"""
