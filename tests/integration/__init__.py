"""
Integration tests for the HTTP retry layer.

Test components together over an in-process transport:
- HTTPClient + HttpxTransport + RetryInterceptor end to end
- Interceptor chains around the retry stage
- Concurrent requests with independent attempt counts
"""
