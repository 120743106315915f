"""Configuration management for the AI Writer."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApplicationConfig(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="AI_WRITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # OpenAI Configuration
    openai_api_key: str = Field(
        default="",
        description="OpenAI API key for text generation"
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="OpenAI model used for generation"
    )
    openai_max_tokens: int = Field(
        default=2048,
        description="Maximum tokens for OpenAI API calls"
    )
    openai_temperature: float = Field(
        default=0.7,
        description="Temperature setting for OpenAI API calls"
    )
    request_timeout: int = Field(
        default=30,
        description="HTTP request timeout in seconds"
    )

    # Suggestions
    suggestion_min_interval_ms: int = Field(
        default=2000,
        description="Minimum delay between completed suggestion requests"
    )

    # History
    database_url: str = Field(
        default="sqlite:///ai_writer.db",
        description="Database connection URL for the history store"
    )
    history_key: str = Field(
        default="ai-writer-history",
        description="Key under which the serialized history list is stored"
    )

    # Export
    export_dir: str = Field(
        default="exports",
        description="Directory for exported text and PDF files"
    )
    pdf_page_size: str = Field(
        default="A4",
        description="PDF page size: A4 or Letter"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="text",
        description="Log format: structured or text"
    )
    log_to_file: bool = Field(
        default=False,
        description="Also write logs to logs/ai_writer.log"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ("structured", "text"):
            raise ValueError("log_format must be 'structured' or 'text'")
        return v

    @field_validator("suggestion_min_interval_ms")
    @classmethod
    def validate_min_interval(cls, v):
        if v < 0:
            raise ValueError("suggestion_min_interval_ms must not be negative")
        return v

    @field_validator("pdf_page_size")
    @classmethod
    def validate_page_size(cls, v):
        """Normalize the PDF page size name."""
        sizes = {"a4": "A4", "letter": "Letter"}
        if v.lower() not in sizes:
            raise ValueError("pdf_page_size must be A4 or Letter")
        return sizes[v.lower()]

    @property
    def suggestion_min_interval(self) -> float:
        """Minimum suggestion interval in seconds."""
        return self.suggestion_min_interval_ms / 1000.0

    @property
    def openai_available(self) -> bool:
        """Check whether an OpenAI key is configured."""
        return bool(self.openai_api_key)


def load_config() -> ApplicationConfig:
    """Load application configuration from environment and files."""
    return ApplicationConfig()


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent


def get_logs_dir() -> Path:
    """Get the logs directory."""
    logs_dir = get_project_root() / "logs"
    logs_dir.mkdir(exist_ok=True)
    return logs_dir
