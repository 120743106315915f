"""Writing session workflow: generate, improve prompts, suggest, remember."""

from typing import Optional

from ai_writer.infrastructure.config import ApplicationConfig
from ai_writer.infrastructure.database import init_database
from ai_writer.infrastructure.error_handling import EmptyContentError, GenerationError
from ai_writer.infrastructure.logging import get_logger
from ai_writer.models.writing import GenerationOutcome, GenerationRequest, Tone, WritingType
from ai_writer.services.generation_client import GenerationClient
from ai_writer.services.history import HistoryService
from ai_writer.services.openai_service import OpenAIService, TextGenerator
from ai_writer.services.prompt_templates import build_improvement_prompt
from ai_writer.services.response_sanitizer import ResponseSanitizer
from ai_writer.services.suggestions import RequestCoordinator

logger = get_logger(__name__)


class WritingWorkflow:
    """Everything one writing session needs, constructed once per session."""

    def __init__(
        self,
        client: GenerationClient,
        history: Optional[HistoryService] = None,
        coordinator: Optional[RequestCoordinator] = None,
        sanitizer: Optional[ResponseSanitizer] = None,
    ):
        self.client = client
        self.history = history
        self.coordinator = coordinator or RequestCoordinator(client)
        self.sanitizer = sanitizer or ResponseSanitizer()

    async def generate(self, request: GenerationRequest) -> GenerationOutcome:
        """Generate writing for a request and remember successful results."""
        if request.is_blank:
            raise EmptyContentError("Please enter some text before generating")

        logger.info("Generating content", writing_type=request.type.value, tone=request.tone.value)
        outcome = await self.client.generate_result(request.content, request.type, request.tone)

        if outcome.success and self.history is not None:
            await self.history.add(outcome.text, request.type, request.tone)
        return outcome

    async def improve_prompt(self, request: GenerationRequest) -> str:
        """Turn a rough prompt into a detailed markdown prompt.

        Returns an empty string when the model answered with nothing but
        filler; the caller should then keep the original prompt.
        """
        if request.is_blank:
            raise EmptyContentError("Please enter a prompt to improve")

        improvement_prompt = build_improvement_prompt(request.type, request.tone, request.content)
        outcome = await self.client.generate_result(
            improvement_prompt,
            WritingType.SUGGESTION,
            Tone.PROFESSIONAL,
        )
        if not outcome.success:
            raise GenerationError(f"Failed to improve prompt: {outcome.error}")

        cleaned = self.sanitizer.sanitize(outcome.text)
        if not cleaned:
            logger.warning("Improved prompt was empty after sanitization")
        return cleaned

    async def suggest(self, text: str) -> str:
        return await self.coordinator.get_suggestion(text)

    async def suggest_result(self, text: str) -> Optional[GenerationOutcome]:
        """Like ``suggest`` but keeps failures apart; ``None`` means rate limited."""
        return await self.coordinator.get_suggestion_result(text)

    async def close(self) -> None:
        if self.history is not None:
            await self.history.db.close()


async def create_writing_workflow(
    config: Optional[ApplicationConfig] = None,
    generator: Optional[TextGenerator] = None,
) -> WritingWorkflow:
    """Build a workflow wired to the configured generator and history store."""
    config = config or ApplicationConfig()
    client = GenerationClient(generator or OpenAIService(config=config))

    db = await init_database(config)
    history = HistoryService(db, key=config.history_key)
    coordinator = RequestCoordinator(client, min_interval=config.suggestion_min_interval)

    return WritingWorkflow(client, history=history, coordinator=coordinator)
