"""Request and result models for the content generation pipeline."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

NO_CONTENT_MESSAGE = "⚠️ No content was generated."
FAILURE_MESSAGE = "⚠️ Failed to generate content. Please try again."


class WritingType(str, Enum):
    """Kinds of text the assistant can write."""

    EMAIL = "email"
    BLOG = "blog"
    STORY = "story"
    SUGGESTION = "suggestion"


class Tone(str, Enum):
    """Tones a piece of writing can take."""

    FORMAL = "formal"
    CASUAL = "casual"
    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"


# Templates accept plain strings too so unknown values degrade to defaults.
WritingTypeLike = Union[WritingType, str]
ToneLike = Union[Tone, str]


def type_value(writing_type: WritingTypeLike) -> str:
    """Return the raw string value of a writing type."""
    if isinstance(writing_type, WritingType):
        return writing_type.value
    return str(writing_type)


def tone_value(tone: ToneLike) -> str:
    """Return the raw string value of a tone."""
    if isinstance(tone, Tone):
        return tone.value
    return str(tone)


@dataclass(frozen=True)
class GenerationRequest:
    """A request to generate or improve a piece of writing."""

    content: str
    type: WritingType = WritingType.EMAIL
    tone: Tone = Tone.FORMAL

    @property
    def is_blank(self) -> bool:
        return not self.content.strip()


@dataclass(frozen=True)
class GenerationOutcome:
    """Explicit success/failure result of a generation call.

    ``text`` holds the trimmed model output on success. On failure it is
    empty and ``error`` describes what went wrong; ``display_text`` then
    yields the fixed sentinel message shown to the user.
    """

    text: str
    success: bool
    error: Optional[str] = None
    empty: bool = False

    @classmethod
    def ok(cls, text: str) -> "GenerationOutcome":
        return cls(text=text, success=True)

    @classmethod
    def no_content(cls) -> "GenerationOutcome":
        return cls(text="", success=False, error="empty response", empty=True)

    @classmethod
    def failed(cls, error: str) -> "GenerationOutcome":
        return cls(text="", success=False, error=error)

    @property
    def display_text(self) -> str:
        """Text to show the user; never empty."""
        if self.success:
            return self.text
        if self.empty:
            return NO_CONTENT_MESSAGE
        return FAILURE_MESSAGE
