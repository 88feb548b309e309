"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./locallibrary.db"

    # API (constants, not from env)
    CATALOG_PREFIX: str = "/catalog"
    PROJECT_NAME: str = "Local Library"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Book form policy
    BOOK_TITLE_MIN_LENGTH: int = 3
    BOOK_TITLE_MAX_LENGTH: int = 100
    BOOK_SUMMARY_MAX_LENGTH: int = 500
    BOOK_ISBN_MAX_LENGTH: int = 20

    @model_validator(mode="after")
    def validate_book_policy(self) -> "Settings":
        """Validate book form length bounds."""
        if self.BOOK_TITLE_MIN_LENGTH < 0:
            msg = "BOOK_TITLE_MIN_LENGTH cannot be negative"
            raise ValueError(msg)
        if self.BOOK_TITLE_MIN_LENGTH > self.BOOK_TITLE_MAX_LENGTH:
            msg = "BOOK_TITLE_MIN_LENGTH cannot exceed BOOK_TITLE_MAX_LENGTH"
            raise ValueError(msg)
        if self.BOOK_SUMMARY_MAX_LENGTH < 1:
            msg = "BOOK_SUMMARY_MAX_LENGTH must be positive"
            raise ValueError(msg)
        if self.BOOK_ISBN_MAX_LENGTH < 1:
            msg = "BOOK_ISBN_MAX_LENGTH must be positive"
            raise ValueError(msg)
        return self


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    # Configure structlog
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
