"""Tests for prompt templating."""

from __future__ import annotations

import pytest

from ai_writer.models.writing import Tone, WritingType
from ai_writer.services.prompt_templates import (
    BLOG_GUIDANCE,
    EMAIL_GUIDANCE,
    GENERIC_GUIDANCE,
    OUTPUT_INSTRUCTION,
    STORY_GUIDANCE,
    build_improvement_prompt,
    build_prompt,
    system_prompt,
)


@pytest.mark.parametrize("writing_type", list(WritingType))
@pytest.mark.parametrize("tone", list(Tone))
def test_build_prompt_is_deterministic(writing_type: WritingType, tone: Tone) -> None:
    first = build_prompt(writing_type, tone, "quarterly update")
    second = build_prompt(writing_type, tone, "quarterly update")
    assert first == second


@pytest.mark.parametrize("writing_type", list(WritingType))
def test_build_improvement_prompt_is_deterministic(writing_type: WritingType) -> None:
    first = build_improvement_prompt(writing_type, Tone.CASUAL, "a note")
    second = build_improvement_prompt(writing_type, Tone.CASUAL, "a note")
    assert first == second


def test_build_prompt_embeds_content_verbatim_and_quoted() -> None:
    content = 'Launch plan: "Phase 1" & beyond\nsecond line'
    prompt = build_prompt(WritingType.EMAIL, Tone.FORMAL, content)

    assert prompt.endswith(f'Write about: "{content}"')
    assert prompt.startswith("You are an assistant helping write a formal email.")
    assert "\n\nWrite about:" in prompt


def test_system_prompts_differ_per_type() -> None:
    prompts = {system_prompt(writing_type, Tone.FRIENDLY) for writing_type in WritingType}
    assert len(prompts) == len(WritingType)


def test_system_prompt_interpolates_tone() -> None:
    assert "casual blog post" in system_prompt(WritingType.BLOG, Tone.CASUAL)
    assert "professional story" in system_prompt(WritingType.STORY, Tone.PROFESSIONAL)


def test_plain_string_values_match_enum_values() -> None:
    assert build_prompt("story", "friendly", "x") == build_prompt(WritingType.STORY, Tone.FRIENDLY, "x")


def test_unknown_type_falls_back_to_generic_system_prompt() -> None:
    prompt = build_prompt("poem", Tone.FORMAL, "autumn")
    assert "formal content" in prompt
    assert prompt.endswith('Write about: "autumn"')


@pytest.mark.parametrize(
    ("writing_type", "guidance"),
    [
        (WritingType.EMAIL, EMAIL_GUIDANCE),
        (WritingType.BLOG, BLOG_GUIDANCE),
        (WritingType.STORY, STORY_GUIDANCE),
        (WritingType.SUGGESTION, GENERIC_GUIDANCE),
        ("newsletter", GENERIC_GUIDANCE),
    ],
)
def test_improvement_prompt_uses_type_guidance(writing_type, guidance: str) -> None:
    prompt = build_improvement_prompt(writing_type, Tone.FORMAL, "draft text")
    assert guidance in prompt


def test_improvement_prompt_structure() -> None:
    prompt = build_improvement_prompt(WritingType.BLOG, Tone.FRIENDLY, "remote work tips")

    assert prompt.startswith("Improve this friendly blog prompt to be more detailed and effective.")
    assert 'Current prompt: "remote work tips"' in prompt
    assert "H2 for major sections" in prompt
    assert "Tables for structured data" in prompt
    assert prompt.endswith(OUTPUT_INSTRUCTION)


def test_guidance_blocks_cover_their_type() -> None:
    assert "greeting and sign-off" in EMAIL_GUIDANCE
    assert "Blockquotes" in BLOG_GUIDANCE
    assert "scene breaks" in STORY_GUIDANCE
    assert "Dialogue formatting" in STORY_GUIDANCE
    assert "italics" in STORY_GUIDANCE
