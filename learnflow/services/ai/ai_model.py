"""
Model selection for generated study material.

All kinds share the configured provider. Each kind may name its own model,
so a small local model can write summaries while a larger one writes quizzes.
"""

from functools import lru_cache

import structlog
from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from learnflow.config import GenerationKind, Settings, get_settings
from learnflow.exceptions import ServiceError

structlog_logger = structlog.get_logger(__name__)


def build_model(model_name: str, settings: Settings) -> Model:
    """
    Build a model for the configured provider.

    Provider credentials are checked by the settings validator.

    Raises:
        ServiceError: If AI is disabled
    """
    match settings.AI_PROVIDER:
        case "ollama":
            assert settings.OPENAI_BASE_URL is not None
            return OpenAIChatModel(
                model_name, provider=OllamaProvider(base_url=settings.OPENAI_BASE_URL)
            )
        case "openai":
            assert settings.OPENAI_API_KEY is not None
            openai = OpenAIProvider(
                api_key=settings.OPENAI_API_KEY, base_url=settings.OPENAI_BASE_URL
            )
            return OpenAIChatModel(model_name, provider=openai)
        case "anthropic":
            assert settings.ANTHROPIC_API_KEY is not None
            return AnthropicModel(
                model_name, provider=AnthropicProvider(api_key=settings.ANTHROPIC_API_KEY)
            )
        case "google":
            assert settings.GEMINI_API_KEY is not None
            return GoogleModel(model_name, provider=GoogleProvider(api_key=settings.GEMINI_API_KEY))
        case _:
            raise ServiceError("AI generation is disabled; set AI_PROVIDER to enable it")


@lru_cache
def get_ai_model(kind: GenerationKind) -> Model:
    """Cached model for one generation kind, built on first use."""
    settings = get_settings()
    model_name = settings.model_name_for(kind)
    if model_name is None:
        raise ServiceError(f"No AI model configured for {kind} generation")

    structlog_logger.info(
        "ai_model_selected", kind=kind, provider=settings.AI_PROVIDER, model=model_name
    )
    return build_model(model_name, settings)
