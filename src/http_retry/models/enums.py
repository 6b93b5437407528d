"""
Enumerations for the HTTP retry layer.

All enums are closed taxonomies - no values outside these sets are permitted.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """
    Classification of a failed HTTP request.
    
    Produced by the transport when it maps a low-level failure, consumed
    by retry evaluators to decide whether the failure is transient.
    """
    
    CANCEL = "cancel"
    RESPONSE = "response"
    CONNECT_TIMEOUT = "connect_timeout"
    SEND_TIMEOUT = "send_timeout"
    RECEIVE_TIMEOUT = "receive_timeout"
    CONNECTION = "connection"
    OTHER = "other"


class GiveUpReason(str, Enum):
    """
    Why the retry stage stopped retrying a request.
    
    Used for log events and metrics labels only. Giving up always forwards
    the triggering error, never an exception built from these values.
    """
    
    RETRY_DISABLED = "retry_disabled"
    CANCELLED = "cancelled"
    NOT_RETRYABLE_ERROR = "not_retryable_error"
    BUDGET_EXHAUSTED = "budget_exhausted"
    EVALUATOR_REJECTED = "evaluator_rejected"
    EVALUATOR_ERROR = "evaluator_error"
