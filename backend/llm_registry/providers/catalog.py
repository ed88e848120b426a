"""First-party model catalog, gated by which providers are configured."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from llm_registry.providers.anthropic import AnthropicModelHandle
from llm_registry.providers.base import ModelHandle
from llm_registry.providers.config import RegistryConfig
from llm_registry.providers.google import GoogleModelHandle
from llm_registry.providers.openai import (
    OllamaModelHandle,
    OpenAIModelHandle,
    OpenRouterModelHandle,
    XAIModelHandle,
)

logger = logging.getLogger(__name__)

Catalog = dict[str, dict[str, ModelHandle]]

# (provider, model_name, api_model_id, signal value) -> handle
HandleFactory = Callable[[str, str, str, str], ModelHandle]


def is_present(value: object) -> bool:
    """Return True if value is a string with at least one non-whitespace character."""
    return isinstance(value, str) and len(value.strip()) > 0


@dataclass(frozen=True)
class StaticProvider:
    """A first-party provider and the fixed list of models it exposes.

    `models` maps the user-facing model name to the id sent to the API.
    """

    key: str
    signal: Callable[[RegistryConfig], str | None]
    factory: HandleFactory
    models: Mapping[str, str]


def _keyed(handle_cls: type) -> HandleFactory:
    def factory(provider: str, name: str, api_id: str, value: str) -> ModelHandle:
        return handle_cls(provider, name, api_id, api_key=value)

    return factory


def ollama_base_url(value: str) -> str:
    """Normalise OLLAMA_BASE_URL to the OpenAI-compatible "/v1" endpoint.

    Ollama's native API lives under "/api"; that form is rewritten to "/v1".
    """
    url = value.strip().rstrip("/")
    if url.endswith("/api"):
        rewritten = url[: -len("/api")] + "/v1"
        logger.warning(
            "OLLAMA_BASE_URL '%s' points at the native Ollama API, using '%s' instead",
            url,
            rewritten,
        )
        return rewritten
    return url


def _ollama(provider: str, name: str, api_id: str, value: str) -> ModelHandle:
    return OllamaModelHandle(provider, name, api_id, base_url=ollama_base_url(value))


STATIC_PROVIDERS: tuple[StaticProvider, ...] = (
    StaticProvider(
        key="openai",
        signal=lambda c: c.openai_api_key,
        factory=_keyed(OpenAIModelHandle),
        models={
            "gpt-4.1": "gpt-4.1",
            "gpt-4.1-mini": "gpt-4.1-mini",
            "o4-mini": "o4-mini",
            "o3": "o3",
            "gpt-5": "gpt-5",
            "gpt-5-mini": "gpt-5-mini",
            "gpt-5-nano": "gpt-5-nano",
        },
    ),
    StaticProvider(
        key="google",
        signal=lambda c: c.google_api_key,
        factory=_keyed(GoogleModelHandle),
        models={
            "gemini-2.5-flash-lite": "gemini-2.5-flash-lite",
            "gemini-2.5-flash": "gemini-2.5-flash",
            "gemini-2.5-pro": "gemini-2.5-pro",
        },
    ),
    StaticProvider(
        key="anthropic",
        signal=lambda c: c.anthropic_api_key,
        factory=_keyed(AnthropicModelHandle),
        models={
            "claude-4-sonnet": "claude-4-sonnet-20250514",
            "claude-4-opus": "claude-4-opus-20250514",
            "claude-3-7-sonnet": "claude-3-7-sonnet-20250219",
        },
    ),
    StaticProvider(
        key="xai",
        signal=lambda c: c.xai_api_key,
        factory=_keyed(XAIModelHandle),
        models={
            "grok-4": "grok-4",
            "grok-3": "grok-3",
            "grok-3-mini": "grok-3-mini",
        },
    ),
    # Local models
    StaticProvider(
        key="ollama",
        signal=lambda c: c.ollama_base_url,
        factory=_ollama,
        models={
            "gemma3:1b": "gemma3:1b",
            "gemma3:4b": "gemma3:4b",
            "gemma3:12b": "gemma3:12b",
        },
    ),
    StaticProvider(
        key="openRouter",
        signal=lambda c: c.openrouter_api_key,
        factory=_keyed(OpenRouterModelHandle),
        models={
            "gpt-oss-20b:free": "openai/gpt-oss-20b:free",
            "qwen3-8b:free": "qwen/qwen3-8b:free",
            "qwen3-14b:free": "qwen/qwen3-14b:free",
            "qwen3-coder:free": "qwen/qwen3-coder:free",
            "deepseek-r1:free": "deepseek/deepseek-r1-0528:free",
            "deepseek-v3:free": "deepseek/deepseek-chat-v3-0324:free",
            "gemini-2.0-flash-exp:free": "google/gemini-2.0-flash-exp:free",
        },
    ),
)

# Models known to reject or ignore tool calling.
STATIC_TOOL_CALL_UNSUPPORTED: tuple[tuple[str, str], ...] = (
    ("openai", "o4-mini"),
    ("ollama", "gemma3:1b"),
    ("ollama", "gemma3:4b"),
    ("ollama", "gemma3:12b"),
    ("openRouter", "gpt-oss-20b:free"),
    ("openRouter", "qwen3-8b:free"),
    ("openRouter", "qwen3-14b:free"),
    ("openRouter", "deepseek-r1:free"),
    ("openRouter", "gemini-2.0-flash-exp:free"),
)


def build_static_catalog(
    config: RegistryConfig,
    providers: tuple[StaticProvider, ...] = STATIC_PROVIDERS,
) -> Catalog:
    """Build handles for every first-party provider whose signal is present.

    Providers without a signal are left out entirely, so their constructors
    never see a missing credential.
    """
    catalog: Catalog = {}
    for static in providers:
        value = static.signal(config)
        if not is_present(value):
            continue
        catalog[static.key] = {
            name: static.factory(static.key, name, api_id, value)
            for name, api_id in static.models.items()
        }
        logger.debug("Enabled provider '%s' with %d models", static.key, len(static.models))
    return catalog


def static_unsupported_models(
    catalog: Catalog,
    pairs: tuple[tuple[str, str], ...] = STATIC_TOOL_CALL_UNSUPPORTED,
) -> frozenset[ModelHandle]:
    """Return the handles in `catalog` that match a known tool-call-unsupported pair.

    Pairs whose provider or model was not built are skipped.
    """
    return frozenset(
        catalog[provider][model]
        for provider, model in pairs
        if model in catalog.get(provider, {})
    )
