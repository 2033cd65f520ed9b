"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Path constants - calculated once at module load
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
DEFAULT_UPLOADS_DIR = PROJECT_ROOT / "uploads"

GenerationKind = Literal["mcq", "learning_path", "flashcards", "summary"]


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite:///./learnflow.db"

    SECRET_KEY: str = "change-me-in-production"  # noqa: S105

    # API (constants, not from env)
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "LearnFlow API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Auth
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7
    AUTH_COOKIE_NAME: str = "authToken"
    COOKIE_SECURE: bool = False
    ALLOW_USER_REGISTRATIONS: bool = True
    RATE_LIMIT_ENABLED: bool = True

    # Admin setup (for first-time initialization)
    ADMIN_EMAIL: str | None = None
    ADMIN_PASSWORD: str | None = None
    ADMIN_FIRST_NAME: str = "Super"
    ADMIN_LAST_NAME: str = "Admin"

    # Reference data
    SEED_REFERENCE_DATA: bool = True

    # Uploads
    UPLOADS_DIR: Path = DEFAULT_UPLOADS_DIR
    MAX_RESOURCE_UPLOAD_SIZE: int = 10 * 1024 * 1024
    MAX_MCQ_UPLOAD_SIZE: int = 20 * 1024 * 1024

    # AI configuration
    AI_PROVIDER: (
        Literal["ollama"] | Literal["openai"] | Literal["anthropic"] | Literal["google"] | None
    ) = None
    AI_MODEL_NAME: str | None = None
    # Per-kind model overrides; kinds left unset use AI_MODEL_NAME
    AI_MCQ_MODEL_NAME: str | None = None
    AI_LEARNING_PATH_MODEL_NAME: str | None = None
    AI_FLASHCARDS_MODEL_NAME: str | None = None
    AI_SUMMARY_MODEL_NAME: str | None = None

    # ollama
    OPENAI_BASE_URL: str | None = None
    # openai
    OPENAI_API_KEY: str | None = None
    # anthropic
    ANTHROPIC_API_KEY: str | None = None
    # google
    GEMINI_API_KEY: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ai_enabled(self) -> bool:
        """Whether AI features are backed by a model provider."""
        return self.AI_PROVIDER is not None

    def model_name_for(self, kind: GenerationKind) -> str | None:
        """Model for one kind of generated content, falling back to ``AI_MODEL_NAME``."""
        overrides = {
            "mcq": self.AI_MCQ_MODEL_NAME,
            "learning_path": self.AI_LEARNING_PATH_MODEL_NAME,
            "flashcards": self.AI_FLASHCARDS_MODEL_NAME,
            "summary": self.AI_SUMMARY_MODEL_NAME,
        }
        return overrides[kind] or self.AI_MODEL_NAME

    @field_validator("ADMIN_PASSWORD", mode="after")
    @classmethod
    def strip_admin_password(cls, value: str | None) -> str | None:
        """Strip whitespace from admin password."""
        return value.strip() if value is not None else None

    @field_validator("ADMIN_EMAIL", mode="after")
    @classmethod
    def normalize_admin_email(cls, value: str | None) -> str | None:
        """Lower-case the admin email so it matches stored users."""
        return value.strip().lower() if value else None

    @model_validator(mode="after")
    def validate_ai_provider_config(self) -> "Settings":
        """Validate AI provider configuration."""
        if self.AI_PROVIDER is not None and self.AI_MODEL_NAME is None:
            msg = f"AI_MODEL_NAME is required when AI_PROVIDER is '{self.AI_PROVIDER}'"
            raise ValueError(msg)

        if self.AI_PROVIDER == "ollama" and not self.OPENAI_BASE_URL:
            msg = "OPENAI_BASE_URL is required when AI_PROVIDER is 'ollama'"
            raise ValueError(msg)
        if self.AI_PROVIDER == "openai" and not self.OPENAI_API_KEY:
            msg = "OPENAI_API_KEY is required when AI_PROVIDER is 'openai'"
            raise ValueError(msg)
        if self.AI_PROVIDER == "anthropic" and not self.ANTHROPIC_API_KEY:
            msg = "ANTHROPIC_API_KEY is required when AI_PROVIDER is 'anthropic'"
            raise ValueError(msg)
        if self.AI_PROVIDER == "google" and not self.GEMINI_API_KEY:
            msg = "GEMINI_API_KEY is required when AI_PROVIDER is 'google'"
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
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Development: Console output with colors
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
