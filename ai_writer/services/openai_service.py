"""OpenAI-backed text generation capability."""

from typing import Optional, Protocol, runtime_checkable

from openai import AsyncOpenAI, OpenAIError

from ai_writer.infrastructure.config import ApplicationConfig
from ai_writer.infrastructure.error_handling import GenerationError, handle_service_errors
from ai_writer.infrastructure.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class TextGenerator(Protocol):
    """Anything that turns a prompt into text, or raises."""

    async def complete(self, prompt: str) -> str:
        ...


class OpenAIService:
    """Service for OpenAI LLM interactions.

    The whole rendered prompt is sent as a single user message; one attempt
    per call, no retries.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        config: Optional[ApplicationConfig] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.config = config or ApplicationConfig()
        self.api_key = api_key or self.config.openai_api_key
        if client is not None:
            self.client = client
        elif self.api_key:
            self.client = AsyncOpenAI(
                api_key=self.api_key,
                timeout=self.config.request_timeout,
                max_retries=0,
            )
        else:
            self.client = None
        self.available = self.client is not None

    @handle_service_errors("OpenAI Service")
    async def complete(self, prompt: str) -> str:
        """Generate text for a prompt."""
        if not self.available:
            raise GenerationError("OpenAI API key is not configured")

        try:
            response = await self.client.chat.completions.create(
                model=self.config.openai_model,
                messages=[
                    {"role": "user", "content": prompt}
                ],
                max_tokens=self.config.openai_max_tokens,
                temperature=self.config.openai_temperature,
            )
        except OpenAIError as e:
            raise GenerationError(f"OpenAI request failed: {e}", cause=e) from e

        if not response.choices:
            raise GenerationError("OpenAI response contained no choices")

        text = response.choices[0].message.content or ""

        logger.debug(
            "OpenAI completion received",
            model=self.config.openai_model,
            chars=len(text),
            tokens_used=response.usage.total_tokens if response.usage else 0,
        )
        return text
