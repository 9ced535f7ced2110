"""
Retry decorator built on Retrier.
"""

import functools
from typing import Callable, ParamSpec, TypeVar

from .config import DEFAULT_RETRY_COUNT, DEFAULT_RETRY_DELAY_MS, RetryConfig
from .retrier import FailureHandler, Retrier

P = ParamSpec("P")
T = TypeVar("T")


def with_retry(
    attempt_limit: int = DEFAULT_RETRY_COUNT,
    delay_ms: int = DEFAULT_RETRY_DELAY_MS,
    on_failure: FailureHandler | None = None,
    config: RetryConfig | None = None,
) -> Callable[[Callable[P, T]], Callable[P, T | None]]:
    """
    Decorator for synchronous functions with retry logic.

    Each call runs through a fresh Retrier, so decorated functions share no
    state between calls.

    Args:
        attempt_limit: Maximum number of attempts per call
        delay_ms: Delay between attempts in milliseconds
        on_failure: Optional callback(exception) called after each failed attempt
        config: Retry configuration overriding attempt_limit and delay_ms

    Returns:
        Decorated function returning the result, or None when all attempts failed.
        A function that itself returns None looks the same as an exhausted one;
        use a Retrier directly when the two must be told apart.
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T | None]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T | None:
            retrier: Retrier[None, T] = Retrier(
                lambda: func(*args, **kwargs),
                attempt_limit=attempt_limit,
                delay_ms=delay_ms,
                on_failure=on_failure,
                config=config,
            )
            return retrier.run()

        return wrapper

    return decorator
