"""Error types and unified error handling utilities for the AI Writer."""

import functools
import logging
from typing import Any, Callable, Optional, TypeVar, cast

F = TypeVar('F', bound=Callable[..., Any])
logger = logging.getLogger(__name__)


class AIWriterError(Exception):
    """Base class for all AI Writer errors."""


class GenerationError(AIWriterError):
    """The text generation capability failed or returned nothing usable."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class EmptyContentError(AIWriterError):
    """A generation or improvement request was submitted with blank content."""


class ExportError(AIWriterError):
    """Content could not be exported."""


def handle_service_errors(
    service_name: str,
    log_level: str = "error",
    reraise: bool = True
) -> Callable[[F], F]:
    """
    Decorator for service-level error handling of async methods.

    Args:
        service_name: Name of the service for logging context
        log_level: Logging level ('error', 'warning', 'info')
        reraise: Whether to re-raise the exception after logging

    Usage:
        @handle_service_errors("OpenAI Service")
        async def complete(self, prompt: str) -> str:
            # Service logic here
            return text
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                error_message = f"Error in {service_name}.{func.__name__}: {str(e)}"

                log_func = getattr(logger, log_level, logger.error)
                log_func(error_message, exc_info=True)

                if reraise:
                    raise
                return None

        return cast(F, wrapper)
    return decorator
