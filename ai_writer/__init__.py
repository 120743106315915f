"""AI Writer

Generate emails, blog posts and stories in a chosen tone, refine prompts
before generating, and keep a local history of results.
"""

__version__ = "0.1.0"

from ai_writer.models.writing import GenerationOutcome, GenerationRequest, Tone, WritingType
from ai_writer.models.history import HistoryItem

__all__ = [
    "GenerationOutcome",
    "GenerationRequest",
    "Tone",
    "WritingType",
    "HistoryItem",
]
