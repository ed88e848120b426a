"""Model registry: the single source of truth for all available LLM models.

The registry is built once at startup from a RegistryConfig and is read-only
afterwards. Callers select a model with `resolve`, which never fails: an
unknown selection resolves to the fallback model.
"""

import logging
from collections.abc import Callable, Mapping
from functools import lru_cache
from types import MappingProxyType

from llm_registry.core.config import settings
from llm_registry.core.exceptions import ConfigurationError
from llm_registry.providers.base import ModelHandle
from llm_registry.providers.catalog import (
    Catalog,
    build_static_catalog,
    static_unsupported_models,
)
from llm_registry.providers.compatible import (
    build_compatible_catalog,
    parse_compatible_providers,
)
from llm_registry.providers.config import RegistryConfig
from llm_registry.schemas.models import ChatModel, ModelEntry, ProviderModels

logger = logging.getLogger(__name__)

PREFERRED_MODEL: tuple[str, str] = ("openai", "gpt-4.1")
LOCAL_PROVIDER: str = "ollama"

FallbackHook = Callable[[ChatModel, ModelHandle], None]


def merge_catalogs(static: Catalog, dynamic: Catalog) -> Catalog:
    """Overlay the static catalog on the dynamic one, provider by provider.

    A provider defined in both keeps the static models only.
    """
    for provider in sorted(dynamic.keys() & static.keys()):
        logger.warning(
            "OpenAI-compatible provider '%s' is shadowed by the built-in provider "
            "of the same name; its models are ignored",
            provider,
        )
    return {**dynamic, **static}


class ModelRegistry:
    """Read-only view over the merged provider -> model -> handle mapping.

    Args:
        static: First-party catalog built from presence-gated providers.
        dynamic: Catalog built from OpenAI-compatible provider definitions.
        unsupported: Handles that do not support tool calling.
        default_model: Optional "provider/model" preferred as fallback.
        on_fallback: Called with the selection and the fallback handle
            whenever `resolve` receives an unknown selection.

    Raises:
        ConfigurationError: If no model is available at all.
    """

    def __init__(
        self,
        static: Catalog,
        dynamic: Catalog | None = None,
        unsupported: frozenset[ModelHandle] = frozenset(),
        default_model: str | None = None,
        on_fallback: FallbackHook | None = None,
    ) -> None:
        merged = merge_catalogs(static, dynamic or {})
        self._models: Mapping[str, Mapping[str, ModelHandle]] = MappingProxyType(
            {provider: MappingProxyType(dict(models)) for provider, models in merged.items()}
        )
        self._unsupported = frozenset(unsupported)
        self._on_fallback = on_fallback
        self._fallback = self._resolve_fallback(static, default_model)

    @property
    def models(self) -> Mapping[str, Mapping[str, ModelHandle]]:
        """Provider -> model name -> handle, in registry order."""
        return self._models

    @property
    def fallback_model(self) -> ModelHandle:
        return self._fallback

    def get(self, provider: str, model: str) -> ModelHandle | None:
        """Return the registered handle, or None."""
        return self._models.get(provider, {}).get(model)

    def is_tool_call_unsupported(self, handle: ModelHandle) -> bool:
        """Return True if the handle is known not to support tool calling."""
        return handle in self._unsupported

    def _resolve_fallback(self, static: Catalog, default_model: str | None) -> ModelHandle:
        configured = (default_model or "").strip()
        if "/" in configured:
            provider, _, model = configured.partition("/")
            found = self.get(provider, model)
            if found is not None:
                return found
            logger.warning(
                "Configured default model '%s' is not available, choosing another",
                configured,
            )
        elif configured:
            logger.warning(
                "Configured default model '%s' is not of the form 'provider/model'",
                configured,
            )

        preferred_provider, preferred_model = PREFERRED_MODEL
        preferred = static.get(preferred_provider, {}).get(preferred_model)
        if preferred is not None:
            return preferred

        for models in self._models.values():
            for handle in models.values():
                return handle

        local = static.get(LOCAL_PROVIDER, {})
        if local:
            return next(iter(local.values()))

        raise ConfigurationError(
            message=(
                "No models are available. Please configure at least one provider "
                "in the environment."
            ),
            code="NO_MODELS_CONFIGURED",
        )

    def resolve(self, model: ChatModel | None = None) -> ModelHandle:
        """Return the handle for a selection, or the fallback model.

        An unknown provider or model name never raises; it is logged and
        reported to the `on_fallback` hook.
        """
        if model is None:
            return self._fallback
        found = self.get(model.provider, model.model)
        if found is not None:
            return found
        logger.warning(
            "Unknown model '%s/%s', falling back to default '%s/%s'",
            model.provider,
            model.model,
            self._fallback.provider,
            self._fallback.model_name,
        )
        if self._on_fallback is not None:
            self._on_fallback(model, self._fallback)
        return self._fallback

    def models_info(self) -> list[ProviderModels]:
        """Return every provider and its models for the /models API endpoint."""
        return [
            ProviderModels(
                provider=provider,
                models=[
                    ModelEntry(
                        name=name,
                        is_tool_call_unsupported=self.is_tool_call_unsupported(handle),
                    )
                    for name, handle in models.items()
                ],
            )
            for provider, models in self._models.items()
        ]


def build_registry(
    config: RegistryConfig,
    on_fallback: FallbackHook | None = None,
) -> ModelRegistry:
    """Build the registry from explicit configuration.

    Raises:
        ConfigurationError: If neither a built-in provider nor a compatible
            provider is configured.
    """
    static = build_static_catalog(config)
    compatible = build_compatible_catalog(
        parse_compatible_providers(config.openai_compatible_data)
    )
    registry = ModelRegistry(
        static=static,
        dynamic=compatible.providers,
        unsupported=static_unsupported_models(static) | compatible.unsupported,
        default_model=config.default_model,
        on_fallback=on_fallback,
    )
    logger.info(
        "Model registry ready: providers=%s, default=%s/%s",
        list(registry.models),
        registry.fallback_model.provider,
        registry.fallback_model.model_name,
    )
    return registry


@lru_cache
def get_registry() -> ModelRegistry:
    """Return the process-wide registry, building it from settings on first use."""
    return build_registry(RegistryConfig.from_settings(settings))
