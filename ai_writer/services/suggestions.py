"""Inline sentence-completion suggestions with storm protection."""

import time
from typing import Callable, Optional

from ai_writer.infrastructure.api_clients.rate_limiter import RateLimitConfig, RateLimiter, SingleFlight
from ai_writer.infrastructure.logging import get_logger
from ai_writer.models.writing import GenerationOutcome, Tone, WritingType
from ai_writer.services.generation_client import GenerationClient

logger = get_logger(__name__)

SUGGESTION_PROMPT = "Continue this sentence: {text}"
DEFAULT_MIN_INTERVAL = 2.0


class RequestCoordinator:
    """Coordinate suggestion requests triggered while the user types.

    At most one external suggestion call is in flight: callers arriving during
    that window share its result. Once it completes, new requests within the
    minimum interval are dropped and answered with an empty string.
    ``get_suggestion_result`` exposes the shared outcome instead, with
    ``None`` standing for a dropped request.
    """

    def __init__(
        self,
        client: GenerationClient,
        min_interval: float = DEFAULT_MIN_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self.limiter = RateLimiter(RateLimitConfig(min_interval=min_interval), clock=clock)
        self.flight = SingleFlight()

    @property
    def last_completed_at(self) -> Optional[float]:
        return self.limiter.last_completed_at

    @property
    def in_flight(self) -> bool:
        return self.flight.in_flight

    async def get_suggestion_result(self, text: str) -> Optional[GenerationOutcome]:
        if self.flight.in_flight:
            return await self.flight.join()

        if not self.limiter.ready():
            logger.debug(
                "Suggestion request dropped by rate limit",
                retry_in=round(self.limiter.remaining(), 3),
            )
            return None

        prompt = SUGGESTION_PROMPT.format(text=text)
        self.flight.start(
            lambda: self.client.generate_result(prompt, WritingType.SUGGESTION, Tone.FORMAL),
            on_done=self.limiter.mark_completed,
        )
        return await self.flight.join()

    async def get_suggestion(self, text: str) -> str:
        """Suggestion text, the sentinel message on failure, or "" when dropped."""
        outcome = await self.get_suggestion_result(text)
        if outcome is None:
            return ""
        return outcome.display_text
