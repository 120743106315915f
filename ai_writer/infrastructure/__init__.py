"""Infrastructure layer for configuration, logging and persistence."""

from .config import ApplicationConfig, load_config
from .database import Database, init_database
from .error_handling import (
    AIWriterError,
    EmptyContentError,
    ExportError,
    GenerationError,
    handle_service_errors,
)
from .logging import setup_logging

__all__ = [
    "ApplicationConfig",
    "load_config",
    "Database",
    "init_database",
    "AIWriterError",
    "EmptyContentError",
    "ExportError",
    "GenerationError",
    "handle_service_errors",
    "setup_logging",
]
