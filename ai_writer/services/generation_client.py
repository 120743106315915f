"""Client that renders prompts and calls the text generation capability."""

from typing import Optional

from ai_writer.infrastructure.logging import get_logger
from ai_writer.models.writing import GenerationOutcome, ToneLike, WritingTypeLike, tone_value, type_value
from ai_writer.services.openai_service import OpenAIService, TextGenerator
from ai_writer.services.prompt_templates import build_prompt

logger = get_logger(__name__)


class GenerationClient:
    """Generate text for a (prompt, type, tone) triple.

    Failures of the underlying capability are never raised to the caller:
    ``generate_result`` reports them as a failed ``GenerationOutcome`` and
    ``generate`` turns that into the fixed sentinel message.
    """

    def __init__(self, generator: Optional[TextGenerator] = None):
        self.generator = generator or OpenAIService()

    async def generate_result(
        self,
        prompt: str,
        writing_type: WritingTypeLike,
        tone: ToneLike,
    ) -> GenerationOutcome:
        full_prompt = build_prompt(writing_type, tone, prompt)

        try:
            raw = await self.generator.complete(full_prompt)
        except Exception as e:
            logger.error(
                "AI generation failed",
                writing_type=type_value(writing_type),
                tone=tone_value(tone),
                error=str(e),
            )
            return GenerationOutcome.failed(str(e) or type(e).__name__)

        text = (raw or "").strip()
        if not text:
            logger.warning("AI generation returned no content", writing_type=type_value(writing_type))
            return GenerationOutcome.no_content()

        logger.info(
            "AI generation completed",
            writing_type=type_value(writing_type),
            tone=tone_value(tone),
            chars=len(text),
        )
        return GenerationOutcome.ok(text)

    async def generate(
        self,
        prompt: str,
        writing_type: WritingTypeLike,
        tone: ToneLike,
    ) -> str:
        """Generate text, falling back to a sentinel message on failure."""
        outcome = await self.generate_result(prompt, writing_type, tone)
        return outcome.display_text
