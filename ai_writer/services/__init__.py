"""Business logic services for the AI Writer."""

from .generation_client import GenerationClient
from .history import HistoryService
from .openai_service import OpenAIService, TextGenerator
from .response_sanitizer import ResponseSanitizer, sanitize
from .suggestions import RequestCoordinator

__all__ = [
    "GenerationClient",
    "HistoryService",
    "OpenAIService",
    "TextGenerator",
    "ResponseSanitizer",
    "sanitize",
    "RequestCoordinator",
]
