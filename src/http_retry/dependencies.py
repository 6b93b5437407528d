"""
Factories for shared HTTP client instances.

Provides singleton instances of expensive resources (transport with its
connection pool, client with the retry stage installed) built from Settings.
"""

from functools import lru_cache

import httpx

from http_retry.config import Settings, settings
from http_retry.http.base_transport import BaseTransport
from http_retry.http.client import HTTPClient
from http_retry.http.httpx_transport import HttpxTransport
from http_retry.logging_config import configure_logging, make_log_print
from http_retry.retry.interceptor import RetryInterceptor
from http_retry.retry.policy import RetryPolicy


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.
    
    Returns:
        Settings instance
    """
    return settings


def build_transport(settings: Settings) -> BaseTransport:
    """Build an httpx transport from settings."""
    return HttpxTransport(
        base_url=settings.HTTP_BASE_URL,
        timeout=settings.HTTP_TIMEOUT,
        connection_limits=httpx.Limits(
            max_keepalive_connections=settings.HTTP_MAX_KEEPALIVE_CONNECTIONS,
            max_connections=settings.HTTP_MAX_CONNECTIONS,
            keepalive_expiry=30.0,
        ),
    )


def build_http_client(settings: Settings, transport: BaseTransport | None = None) -> HTTPClient:
    """
    Build a client with a RetryInterceptor installed.
    
    Args:
        settings: Application settings (MAX_RETRIES, RETRY_DELAYS, ...)
        transport: Transport to use (default: built from settings)
    
    Returns:
        HTTPClient whose failures are retried per settings
    """
    client = HTTPClient(transport or build_transport(settings))
    client.interceptors.append(
        RetryInterceptor.from_policy(
            client,
            RetryPolicy.from_settings(settings),
            log_print=make_log_print() if settings.RETRY_LOG_PRINT else None,
            metrics_enabled=settings.PROMETHEUS_ENABLED,
        )
    )
    return client


@lru_cache()
def get_transport() -> BaseTransport:
    """
    Get singleton transport with connection pooling.
    
    Returns:
        HttpxTransport instance
    """
    return build_transport(get_settings())


@lru_cache()
def get_http_client() -> HTTPClient:
    """
    Get singleton HTTP client sharing the singleton transport.

    First use also configures logging from LOG_LEVEL, ENVIRONMENT, APP_NAME
    and APP_VERSION.
    
    Returns:
        HTTPClient with retries enabled
    """
    settings = get_settings()
    configure_logging(
        settings.LOG_LEVEL,
        settings.ENVIRONMENT,
        app_name=settings.APP_NAME,
        app_version=settings.APP_VERSION,
    )
    return build_http_client(settings, get_transport())
