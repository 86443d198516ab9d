"""Application configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables
and provides type-safe access throughout the application.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file. The fill column is not a
    setting; it is fixed by the filler.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Commenter
    commenter_type: str = Field(
        default="language_table",
        description="Commenter strategy to use: 'language_table' or 'plain'.",
    )
    default_language: str = Field(
        default="text",
        description="Language assumed when a request names neither a language nor a file.",
    )
    comment_prefix_overrides: dict[str, str] = Field(
        default_factory=dict,
        description="Language to line comment prefix entries merged over the built-in table.",
    )

    # Action
    action_name: str = Field(
        default="XFillParagraph",
        description="Command name recorded for each paragraph fill edit.",
    )

    # API server
    api_host: str = Field(
        default="0.0.0.0",
        description="Host interface for the uvicorn server.",
    )
    api_port: int = Field(
        default=8000,
        description="Port for the uvicorn server.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_dir: Path = Field(
        default=Path("./logs"),
        description="Directory for info.log and error.log.",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    @field_validator("comment_prefix_overrides")
    @classmethod
    def normalize_override_languages(cls, v: dict[str, str]) -> dict[str, str]:
        """Lowercase the language keys of the override table."""
        return {language.strip().lower(): prefix for language, prefix in v.items()}

    def configure_logging(self) -> None:
        """Configure global logging based on settings."""
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=level,
        )

        logger.setLevel(level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.configure_logging()
    return _settings
