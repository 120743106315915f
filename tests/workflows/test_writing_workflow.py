"""End-to-end tests for the writing workflow."""

from __future__ import annotations

import asyncio

import pytest

from ai_writer.infrastructure.error_handling import EmptyContentError, GenerationError
from ai_writer.models.writing import FAILURE_MESSAGE, GenerationRequest, Tone, WritingType
from ai_writer.services.generation_client import GenerationClient
from ai_writer.services.prompt_templates import build_improvement_prompt, build_prompt
from ai_writer.workflows.writing import WritingWorkflow, create_writing_workflow


def _run(config, generator, body):
    async def scenario():
        workflow = await create_writing_workflow(config, generator=generator)
        try:
            return await body(workflow)
        finally:
            await workflow.close()

    return asyncio.run(scenario())


def test_generate_email_and_save_to_history(app_config, fake_generator_cls) -> None:
    generator = fake_generator_cls(reply="Dear all,\nQ3 results are in.\nBest,\nSam")
    request = GenerationRequest("quarterly update", WritingType.EMAIL, Tone.FORMAL)

    async def body(workflow):
        outcome = await workflow.generate(request)
        return outcome, await workflow.history.list_items()

    outcome, items = _run(app_config, generator, body)

    assert outcome.success is True
    assert outcome.display_text != FAILURE_MESSAGE
    assert len(items) == 1
    assert items[0].content == outcome.text
    assert items[0].type is WritingType.EMAIL
    assert items[0].tone is Tone.FORMAL
    assert generator.prompts == [build_prompt(WritingType.EMAIL, Tone.FORMAL, "quarterly update")]


def test_failed_generation_shows_sentinel_and_skips_history(app_config, fake_generator_cls) -> None:
    generator = fake_generator_cls(error=RuntimeError("quota"))
    request = GenerationRequest("quarterly update", WritingType.EMAIL, Tone.FORMAL)

    async def body(workflow):
        outcome = await workflow.generate(request)
        return outcome, await workflow.history.list_items()

    outcome, items = _run(app_config, generator, body)

    assert outcome.display_text == FAILURE_MESSAGE
    assert items == []


@pytest.mark.parametrize("content", ["", "   "])
def test_blank_requests_are_rejected(fake_generator_cls, content: str) -> None:
    generator = fake_generator_cls()
    workflow = WritingWorkflow(GenerationClient(generator))
    request = GenerationRequest(content, WritingType.BLOG, Tone.CASUAL)

    with pytest.raises(EmptyContentError):
        asyncio.run(workflow.generate(request))
    with pytest.raises(EmptyContentError):
        asyncio.run(workflow.improve_prompt(request))
    assert generator.calls == 0


def test_improve_prompt_sanitizes_model_output(fake_generator_cls) -> None:
    generator = fake_generator_cls(
        reply="Sure! Here's an improved version:\n\n# Remote Work Guide\n- Audience: new hires\nLet me know if you want changes."
    )
    workflow = WritingWorkflow(GenerationClient(generator))
    request = GenerationRequest("remote work tips", WritingType.BLOG, Tone.FRIENDLY)

    improved = asyncio.run(workflow.improve_prompt(request))

    assert improved == "# Remote Work Guide\n- Audience: new hires"
    expected_inner = build_improvement_prompt(WritingType.BLOG, Tone.FRIENDLY, "remote work tips")
    assert generator.prompts == [build_prompt(WritingType.SUGGESTION, Tone.PROFESSIONAL, expected_inner)]


def test_improve_prompt_returns_empty_when_only_filler(fake_generator_cls) -> None:
    workflow = WritingWorkflow(GenerationClient(fake_generator_cls(reply="Here is your prompt. Hope this helps!")))
    request = GenerationRequest("story idea", WritingType.STORY, Tone.CASUAL)

    assert asyncio.run(workflow.improve_prompt(request)) == ""


def test_improve_prompt_raises_on_capability_failure(fake_generator_cls) -> None:
    workflow = WritingWorkflow(GenerationClient(fake_generator_cls(error=ConnectionError("offline"))))
    request = GenerationRequest("story idea", WritingType.STORY, Tone.CASUAL)

    with pytest.raises(GenerationError):
        asyncio.run(workflow.improve_prompt(request))


def test_suggest_uses_session_coordinator(app_config, fake_generator_cls) -> None:
    generator = fake_generator_cls(reply="tomorrow morning.")

    async def body(workflow):
        first = await workflow.suggest("See you")
        second = await workflow.suggest("See you at")
        return first, second

    first, second = _run(app_config, generator, body)

    assert first == "tomorrow morning."
    assert second == ""
    assert generator.calls == 1


def test_suggest_result_reports_failure(fake_generator_cls) -> None:
    workflow = WritingWorkflow(GenerationClient(fake_generator_cls(error=RuntimeError("quota"))))

    outcome = asyncio.run(workflow.suggest_result("See you"))

    assert outcome is not None
    assert outcome.success is False
    assert outcome.display_text == FAILURE_MESSAGE
