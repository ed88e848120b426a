"""Operator-configured OpenAI-compatible providers.

The OPENAI_COMPATIBLE_DATA setting holds a JSON list of provider
definitions. Parsing is permissive: a payload that is not a JSON list yields
no providers, and an invalid entry is skipped without affecting the others.
"""

import json
import logging
from dataclasses import dataclass, field

from pydantic import ValidationError

from llm_registry.providers.base import ModelHandle
from llm_registry.providers.catalog import Catalog, is_present
from llm_registry.providers.openai import OpenAICompatibleModelHandle
from llm_registry.schemas.providers import CompatibleProviderConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompatibleCatalog:
    """Handles built from the compatible-provider payload."""

    providers: Catalog = field(default_factory=dict)
    unsupported: frozenset[ModelHandle] = frozenset()


def _describe_errors(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or 'entry'}: {error['msg']}"
        for error in exc.errors(include_url=False)
    )


def parse_compatible_providers(raw: str | None) -> list[CompatibleProviderConfig]:
    """Parse the compatible-provider payload into validated provider configs.

    Args:
        raw: The raw OPENAI_COMPATIBLE_DATA string, or None when unset.

    Returns:
        Valid provider configs in payload order. Entries that fail validation
        and entries reusing an earlier provider name are dropped and logged.
    """
    if not is_present(raw):
        return []

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        logger.warning("OPENAI_COMPATIBLE_DATA is not valid JSON, ignoring it: %s", exc)
        return []
    if not isinstance(data, list):
        logger.warning(
            "OPENAI_COMPATIBLE_DATA must be a JSON list, got %s; ignoring it",
            type(data).__name__,
        )
        return []

    configs: list[CompatibleProviderConfig] = []
    seen: set[str] = set()
    for index, entry in enumerate(data):
        try:
            config = CompatibleProviderConfig.model_validate(entry)
        except ValidationError as exc:
            logger.warning(
                "Skipping OpenAI-compatible provider #%d: %s", index, _describe_errors(exc)
            )
            continue
        # First definition of a name wins.
        if config.name in seen:
            logger.warning(
                "Skipping OpenAI-compatible provider #%d: duplicate provider name '%s'",
                index,
                config.name,
            )
            continue
        seen.add(config.name)
        configs.append(config)
    return configs


def build_compatible_catalog(configs: list[CompatibleProviderConfig]) -> CompatibleCatalog:
    """Create one handle per configured model and collect tool-less models."""
    providers: Catalog = {}
    unsupported: set[ModelHandle] = set()
    for config in configs:
        models: dict[str, ModelHandle] = {}
        for model in config.models:
            handle = OpenAICompatibleModelHandle(
                config.name,
                model.name,
                api_key=config.api_key,
                base_url=config.base_url,
            )
            models[model.name] = handle
            if not model.supports_tools:
                unsupported.add(handle)
        providers[config.name] = models
    return CompatibleCatalog(providers=providers, unsupported=frozenset(unsupported))
