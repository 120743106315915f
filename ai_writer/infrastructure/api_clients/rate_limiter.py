"""Rate limiting and request de-duplication utilities for API clients."""

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional
import logging

logger = logging.getLogger(__name__)


@dataclass
class RateLimitConfig:
    """Configuration for rate limiting."""
    min_interval: float = 2.0  # seconds between completed requests


class RateLimiter:
    """Minimum-interval limiter measured from request completion.

    Unlike a sliding window, a request that arrives too early is not delayed;
    the caller is told to drop it.
    """

    def __init__(
        self,
        config: Optional[RateLimitConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config or RateLimitConfig()
        self.clock = clock
        self.last_completed_at: Optional[float] = None

    def ready(self) -> bool:
        """Check whether enough time has passed since the last completion."""
        if self.last_completed_at is None:
            return True
        elapsed = self.clock() - self.last_completed_at
        return elapsed >= self.config.min_interval

    def remaining(self) -> float:
        """Seconds until the next request would be allowed."""
        if self.last_completed_at is None:
            return 0.0
        elapsed = self.clock() - self.last_completed_at
        return max(0.0, self.config.min_interval - elapsed)

    def mark_completed(self) -> None:
        """Record that a request just finished."""
        self.last_completed_at = self.clock()


class SingleFlight:
    """Share one in-flight coroutine among every concurrent caller.

    The slot is checked and filled within a single scheduling turn, so no lock
    is needed on one event loop. Waiters are shielded: cancelling a caller
    never cancels the shared task.
    """

    def __init__(self):
        self.pending: Optional[asyncio.Task] = None

    @property
    def in_flight(self) -> bool:
        return self.pending is not None

    def start(
        self,
        factory: Callable[[], Awaitable[Any]],
        on_done: Optional[Callable[[], None]] = None,
    ) -> asyncio.Task:
        """Launch a new shared task; the slot must be empty."""
        if self.pending is not None:
            raise RuntimeError("a request is already in flight")

        async def run():
            try:
                return await factory()
            finally:
                self.pending = None
                if on_done is not None:
                    on_done()

        self.pending = asyncio.ensure_future(run())
        return self.pending

    async def join(self) -> Any:
        """Wait for the in-flight task and return its result."""
        task = self.pending
        if task is None:
            raise RuntimeError("no request in flight")
        logger.debug("Joining in-flight request")
        return await asyncio.shield(task)
