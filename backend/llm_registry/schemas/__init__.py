"""Pydantic schemas."""

from llm_registry.schemas.models import ChatModel, ModelEntry, ProviderModels, ResolvedModel
from llm_registry.schemas.providers import CompatibleModelConfig, CompatibleProviderConfig

__all__ = [
    "ChatModel",
    "CompatibleModelConfig",
    "CompatibleProviderConfig",
    "ModelEntry",
    "ProviderModels",
    "ResolvedModel",
]
