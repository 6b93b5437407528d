"""
HTTP status code classification for retries.

A pure lookup table: a status code is retryable when a repeated request
has a reasonable chance of succeeding (timeouts, throttling, gateway and
origin failures, including the non-standard codes used by common proxies
and CDNs).
"""

RETRYABLE_STATUSES: frozenset[int] = frozenset({
    408,  # Request Timeout
    429,  # Too Many Requests
    440,  # Login Time-out (IIS)
    460,  # Client closed connection (AWS ELB)
    499,  # Client Closed Request (nginx)
    500,  # Internal Server Error
    502,  # Bad Gateway
    503,  # Service Unavailable
    504,  # Gateway Timeout
    520,  # Web Server Returned an Unknown Error (Cloudflare)
    521,  # Web Server Is Down (Cloudflare)
    522,  # Connection Timed Out (Cloudflare)
    523,  # Origin Is Unreachable (Cloudflare)
    524,  # A Timeout Occurred (Cloudflare)
    525,  # SSL Handshake Failed (Cloudflare)
    527,  # Railgun Error (Cloudflare)
    598,  # Network read timeout error
    599,  # Network connect timeout error
})


def is_retryable(status_code: int) -> bool:
    """
    Check whether a response with this status code should be retried.

    Args:
        status_code: HTTP status code of the failed response

    Returns:
        True if the code is in RETRYABLE_STATUSES
    """
    return status_code in RETRYABLE_STATUSES
