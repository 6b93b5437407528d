"""
HTTP Retry: transparent retries for an async httpx client.

Failed requests are classified, retried with a configurable backoff
schedule and resubmitted as the same request object, so callers see a
single outcome per request.

Architecture: HTTPClient + error interceptor chain + RetryInterceptor over an httpx transport
"""

__version__ = "0.1.0"
