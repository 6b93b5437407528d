"""
Unit tests for the HTTP retry layer.

Test individual components in isolation:
- Error taxonomy and status classification
- Error handler pipeline and HTTPClient dispatch
- Retry ledger, backoff schedule, evaluator, policy
- RetryInterceptor decisions (with a mocked client)
- Settings, logging, client factories
"""
