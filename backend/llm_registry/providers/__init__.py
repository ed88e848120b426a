"""LLM model handles and the model registry."""

from .base import ModelHandle
from .config import RegistryConfig
from .registry import ModelRegistry, build_registry, get_registry

__all__ = ["ModelHandle", "ModelRegistry", "RegistryConfig", "build_registry", "get_registry"]
