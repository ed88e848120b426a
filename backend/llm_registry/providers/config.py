"""Explicit configuration consumed by the model registry builders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from llm_registry.core.config import Settings


@dataclass(frozen=True)
class RegistryConfig:
    """Provider signals and registry options, captured once at startup.

    Builders take this struct instead of reading the environment so every
    provider combination can be constructed from plain values in tests.
    """

    openai_api_key: str | None = None
    google_api_key: str | None = None
    anthropic_api_key: str | None = None
    xai_api_key: str | None = None
    openrouter_api_key: str | None = None
    ollama_base_url: str | None = None
    openai_compatible_data: str | None = None
    default_model: str | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> RegistryConfig:
        return cls(
            openai_api_key=settings.OPENAI_API_KEY,
            google_api_key=settings.GOOGLE_GENERATIVE_AI_API_KEY,
            anthropic_api_key=settings.ANTHROPIC_API_KEY,
            xai_api_key=settings.XAI_API_KEY,
            openrouter_api_key=settings.OPENROUTER_API_KEY,
            ollama_base_url=settings.OLLAMA_BASE_URL,
            openai_compatible_data=settings.OPENAI_COMPATIBLE_DATA,
            default_model=settings.DEFAULT_MODEL,
        )
