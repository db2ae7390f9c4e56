"""Bounded exponential-backoff retry for upstream calls.

Wraps one unit of work (typically one rate-limited catalog request) and
retries it on transient failures:

    policy = RetryPolicy(retries=3, min_wait=1.0, factor=2.0)
    record = await policy.run(lambda: catalog.fetch_anime(21))

With the defaults the work is attempted at most 4 times, waiting 1, 2 and
4 seconds between attempts. After the last attempt the original exception
propagates unchanged.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from animelog.domain.catalog import CatalogUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_RETRIES = 3
DEFAULT_MIN_WAIT_SECONDS = 1.0
DEFAULT_FACTOR = 2.0


class RetryPolicy:
    """Retry a coroutine factory with ``min_wait * factor ** n`` backoff."""

    def __init__(
        self,
        retries: int = DEFAULT_RETRIES,
        min_wait: float = DEFAULT_MIN_WAIT_SECONDS,
        factor: float = DEFAULT_FACTOR,
        retry_on: tuple[type[BaseException], ...] = (CatalogUnavailableError,),
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize the retry policy.

        Parameters
        ----------
        retries
            Number of retries after the first attempt (default 3)
        min_wait
            Wait before the first retry, in seconds (default 1.0)
        factor
            Multiplier applied to the wait for each further retry (default 2)
        retry_on
            Exception types considered transient. Anything else propagates
            on the first occurrence.
        sleep
            Awaitable used to wait between attempts (injectable for tests)
        """
        if retries < 0:
            msg = "Retries cannot be negative"
            raise ValueError(msg)

        self._retries = retries
        self._min_wait = min_wait
        self._factor = factor
        self._retry_on = retry_on
        self._sleep = sleep

    @property
    def max_attempts(self) -> int:
        return self._retries + 1

    def delays(self) -> list[float]:
        """Waits between consecutive attempts, in order."""
        return [self._min_wait * self._factor**i for i in range(self._retries)]

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        description: str = "upstream call",
    ) -> T:
        """Execute ``operation`` under this policy.

        Parameters
        ----------
        operation
            Zero-argument callable returning a fresh awaitable per attempt
        description
            Label used in retry log lines

        Returns
        -------
        The result of the first successful attempt

        Raises
        ------
        Exception
            The last exception raised by ``operation`` once retries are
            exhausted, or the first non-retryable one
        """
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self._min_wait, exp_base=self._factor),
            retry=retry_if_exception_type(self._retry_on),
            before_sleep=self._log_retry(description),
            sleep=self._sleep,
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                result = await operation()
        return result

    def _log_retry(self, description: str) -> Callable[[RetryCallState], None]:
        def before_sleep(retry_state: RetryCallState) -> None:
            delay = retry_state.next_action.sleep if retry_state.next_action else 0
            error = retry_state.outcome.exception() if retry_state.outcome else None
            logger.warning(
                "Retrying %s after %.1fs (attempt %d/%d failed: %s)",
                description,
                delay,
                retry_state.attempt_number,
                self.max_attempts,
                error,
            )

        return before_sleep
