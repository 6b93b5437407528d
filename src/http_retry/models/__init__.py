"""
Shared data models for the HTTP retry layer.

Components:
- ErrorKind: classification of transport failures
- GiveUpReason: why a request stopped being retried
"""

from http_retry.models.enums import ErrorKind, GiveUpReason

__all__ = [
    "ErrorKind",
    "GiveUpReason",
]
