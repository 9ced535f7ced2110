"""
RetryEx - Retry Logic.

Fixed-delay retries with failure handlers and observable outcome state.
"""

from .config import DEFAULT_RETRY_COUNT, DEFAULT_RETRY_DELAY_MS, RetryConfig
from .retrier import Retrier, RetryOutcome, RetryStatus
from .decorator import with_retry

__all__ = [
    "DEFAULT_RETRY_COUNT",
    "DEFAULT_RETRY_DELAY_MS",
    "RetryConfig",
    "Retrier",
    "RetryOutcome",
    "RetryStatus",
    "with_retry",
]
