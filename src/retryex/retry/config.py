"""
Retry configuration and default options.
"""

from dataclasses import dataclass

from ..exceptions import ConfigurationError

DEFAULT_RETRY_COUNT = 3
DEFAULT_RETRY_DELAY_MS = 1000


@dataclass
class RetryConfig:
    """
    Configuration for retry behavior.

    Attributes:
        attempt_limit: Maximum number of attempts, first one included (default: 3)
        delay_ms: Fixed delay between attempts in milliseconds (default: 1000)
    """

    attempt_limit: int = DEFAULT_RETRY_COUNT
    delay_ms: int = DEFAULT_RETRY_DELAY_MS

    def __post_init__(self) -> None:
        if self.delay_ms < 0:
            raise ConfigurationError(
                f"delay_ms must be non-negative, got {self.delay_ms}",
                field="delay_ms",
            )

    @property
    def delay_seconds(self) -> float:
        """Delay between attempts in seconds, as expected by time.sleep."""
        return self.delay_ms / 1000

    def should_delay(self, attempt: int) -> bool:
        """Check if the given zero-based attempt must wait before running.

        There is no wait before the first attempt, and none at all when only
        one attempt is allowed.
        """
        return attempt > 0 and self.attempt_limit > 1

    @classmethod
    def no_retry(cls) -> "RetryConfig":
        """Preset for a single attempt."""
        return cls(attempt_limit=1)

    @classmethod
    def no_delay(cls, attempt_limit: int = DEFAULT_RETRY_COUNT) -> "RetryConfig":
        """Preset for back-to-back attempts."""
        return cls(attempt_limit=attempt_limit, delay_ms=0)
