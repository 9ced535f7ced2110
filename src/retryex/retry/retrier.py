"""
Resilient invocation of a unit of work.

The retrier calls the work up to ``attempt_limit`` times with a fixed delay
between attempts. Failures raised by the work are handed to an optional
failure handler and never propagate to the caller; exhaustion is reported
through the outcome state rather than raised.
"""

import logging
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from .config import DEFAULT_RETRY_COUNT, DEFAULT_RETRY_DELAY_MS, RetryConfig
from ..exceptions import UninitializedWorkError

logger = logging.getLogger(__name__)

P = TypeVar("P")
R = TypeVar("R")

FailureHandler = Callable[[Exception], None]

# Marks "no parameters given" so that None stays a legal parameter value.
_UNSET: Any = object()


class RetryStatus(str, Enum):
    """Outcome of the most recent run."""

    NOT_RUN = "not_run"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class RetryOutcome(Generic[R]):
    """Immutable record of a single run."""

    status: RetryStatus = RetryStatus.NOT_RUN
    result: R | None = None
    attempts: int = 0

    @property
    def completed(self) -> bool:
        return self.status is not RetryStatus.NOT_RUN

    @property
    def successful(self) -> bool | None:
        """True/False once run, None before the first run."""
        if self.status is RetryStatus.NOT_RUN:
            return None
        return self.status is RetryStatus.SUCCEEDED

    @property
    def completed_with_success(self) -> bool | None:
        return self.successful


class Retrier(Generic[P, R]):
    """
    Retry a callable with a fixed delay, routing failures to a handler.

    Example:
        retrier = Retrier(
            fetch_page,
            parameters="https://example.com",
            attempt_limit=5,
            delay_ms=200,
            on_failure=lambda e: log.warning(f"fetch failed: {e}"),
        )
        page = retrier.run()
        if not retrier.successful:
            ...

    The work is called as ``work(parameters)`` when parameters were given and
    as ``work()`` otherwise. A Retrier is meant for a single owner; it does not
    guard against concurrent ``run()`` calls.
    """

    def __init__(
        self,
        work: Callable[..., R] | None = None,
        parameters: P = _UNSET,
        attempt_limit: int = DEFAULT_RETRY_COUNT,
        delay_ms: int = DEFAULT_RETRY_DELAY_MS,
        on_failure: FailureHandler | None = None,
        auto_run: bool = False,
        sync_properties: bool = True,
        config: RetryConfig | None = None,
    ):
        """
        Initialize the retrier.

        Args:
            work: Callable to be tried and retried
            parameters: Value passed to ``work``; omit to call it without arguments
            attempt_limit: Maximum number of attempts
            delay_ms: Delay between attempts in milliseconds
            on_failure: Callback receiving the exception of each failed attempt
            auto_run: Run immediately, before the constructor returns
            sync_properties: Store the arguments on the instance; when False
                they are only used for the auto run
            config: Retry configuration; when given it replaces attempt_limit
                and delay_ms (e.g. RetryConfig.no_retry())

        Raises:
            ConfigurationError: If delay_ms is negative
            UninitializedWorkError: If auto_run is set without work
        """
        if config is None:
            config = RetryConfig(attempt_limit=attempt_limit, delay_ms=delay_ms)

        self.work: Callable[..., R] | None = None
        self.parameters: P = _UNSET
        self.on_failure: FailureHandler | None = None
        self.config = RetryConfig()
        self._outcome: RetryOutcome[R] = RetryOutcome()

        if sync_properties:
            self.work = work
            self.parameters = parameters
            self.on_failure = on_failure
            self.config = config

        if auto_run:
            if work is None:
                raise UninitializedWorkError()
            self._outcome = self._resilient_retry(work, parameters, on_failure, config)

    # --- Configuration ---

    @property
    def attempt_limit(self) -> int:
        return self.config.attempt_limit

    @attempt_limit.setter
    def attempt_limit(self, value: int) -> None:
        self.config = replace(self.config, attempt_limit=value)

    @property
    def delay_ms(self) -> int:
        return self.config.delay_ms

    @delay_ms.setter
    def delay_ms(self, value: int) -> None:
        self.config = replace(self.config, delay_ms=value)

    @property
    def has_parameters(self) -> bool:
        """Whether work will be called with parameters."""
        return self.parameters is not _UNSET

    def clear_parameters(self) -> None:
        """Call work without arguments on subsequent runs."""
        self.parameters = _UNSET

    # --- State of the last run ---

    @property
    def outcome(self) -> RetryOutcome[R]:
        return self._outcome

    @property
    def result(self) -> R | None:
        return self._outcome.result

    @property
    def status(self) -> RetryStatus:
        return self._outcome.status

    @property
    def completed(self) -> bool:
        return self._outcome.completed

    @property
    def successful(self) -> bool | None:
        return self._outcome.successful

    @property
    def completed_with_success(self) -> bool | None:
        return self._outcome.completed_with_success

    @property
    def attempts(self) -> int:
        return self._outcome.attempts

    # --- Execution ---

    def run(
        self,
        attempt_limit: int | None = None,
        delay_ms: int | None = None,
    ) -> R | None:
        """
        Run the work until it succeeds or the attempts are exhausted.

        Args:
            attempt_limit: Override the configured attempt limit for this call
            delay_ms: Override the delay for this call. When only attempt_limit
                is overridden the delay falls back to DEFAULT_RETRY_DELAY_MS

        Returns:
            The work's result, or None when every attempt failed

        Raises:
            UninitializedWorkError: If no work callable is configured
            ConfigurationError: If the delay_ms override is negative
        """
        if self.work is None:
            raise UninitializedWorkError()

        config = self.config
        if attempt_limit is not None:
            config = RetryConfig(
                attempt_limit=attempt_limit,
                delay_ms=DEFAULT_RETRY_DELAY_MS if delay_ms is None else delay_ms,
            )
        elif delay_ms is not None:
            config = replace(config, delay_ms=delay_ms)

        self._outcome = self._resilient_retry(
            self.work, self.parameters, self.on_failure, config
        )
        return self._outcome.result

    def _resilient_retry(
        self,
        work: Callable[..., R],
        parameters: P,
        on_failure: FailureHandler | None,
        config: RetryConfig,
    ) -> RetryOutcome[R]:
        for attempt in range(config.attempt_limit):
            if config.should_delay(attempt):
                time.sleep(config.delay_seconds)

            try:
                if parameters is _UNSET:
                    result = work()
                else:
                    result = work(parameters)
            except Exception as e:
                if on_failure is None:
                    logger.warning(
                        f"Attempt {attempt + 1}/{config.attempt_limit} failed: {e}"
                    )
                    continue

                logger.debug(f"Attempt {attempt + 1}/{config.attempt_limit} failed: {e}")
                try:
                    on_failure(e)
                except Exception:
                    # Handler errors must not end the loop early
                    logger.debug("Failure handler raised, ignoring", exc_info=True)
                continue

            if attempt > 0:
                logger.info(f"Succeeded on attempt {attempt + 1}/{config.attempt_limit}")
            return RetryOutcome(
                status=RetryStatus.SUCCEEDED, result=result, attempts=attempt + 1
            )

        logger.warning(f"All {config.attempt_limit} attempts failed")
        return RetryOutcome(
            status=RetryStatus.FAILED, attempts=max(config.attempt_limit, 0)
        )
