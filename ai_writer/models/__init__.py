"""Data models for the AI Writer."""

from .writing import (
    FAILURE_MESSAGE,
    NO_CONTENT_MESSAGE,
    GenerationOutcome,
    GenerationRequest,
    Tone,
    WritingType,
)
from .history import HistoryItem, HistoryList

__all__ = [
    "FAILURE_MESSAGE",
    "NO_CONTENT_MESSAGE",
    "GenerationOutcome",
    "GenerationRequest",
    "Tone",
    "WritingType",
    "HistoryItem",
    "HistoryList",
]
