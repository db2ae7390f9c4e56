"""Process-wide rate limiter for outbound catalog requests.

Admits at most one caller per fixed interval. Callers that arrive while
the current slot is taken queue on an ``asyncio.Lock`` and are released
one interval apart, in arrival order.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 1.0


class RateLimiter:
    """Fixed-interval limiter: one admission per ``interval`` seconds.

    The limiter only delays; it never rejects. It spaces the moment a call
    may *start*, so a previously admitted call can still be in flight when
    the next one is admitted.

    Examples
    --------
    >>> limiter = RateLimiter(interval=1.0)
    >>> async with limiter:
    ...     response = await client.get("/anime/1")
    """

    def __init__(
        self,
        interval: float = DEFAULT_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if interval < 0:
            msg = "Rate limit interval cannot be negative"
            raise ValueError(msg)

        self._interval = interval
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock()
        self._next_slot: float | None = None
        logger.info("RateLimiter initialized: 1 request / %.3f seconds", interval)

    @property
    def interval(self) -> float:
        return self._interval

    async def acquire(self) -> None:
        """Wait until the caller may start its request."""
        # asyncio.Lock wakes its waiters in FIFO order.
        async with self._lock:
            if self._next_slot is not None:
                while (now := self._clock()) < self._next_slot:
                    wait_time = self._next_slot - now
                    logger.debug(
                        "Rate limit reached. Waiting for %.3f seconds.",
                        wait_time,
                    )
                    await self._sleep(wait_time)
            self._next_slot = self._clock() + self._interval

    async def __aenter__(self) -> RateLimiter:
        await self.acquire()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None
