"""Shared fixtures."""

import json
from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from llm_registry.providers.config import RegistryConfig
from llm_registry.providers.registry import ModelRegistry, build_registry, get_registry

ACME_PAYLOAD = json.dumps(
    [
        {
            "name": "acme",
            "baseURL": "https://llm.acme.test/v1",
            "apiKey": "acme-key",
            "models": [
                {"name": "acme-mini", "supportsTools": False},
                {"name": "acme-large"},
            ],
        }
    ]
)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def config() -> RegistryConfig:
    """OpenAI, Ollama and one compatible provider configured."""
    return RegistryConfig(
        openai_api_key="sk-test",
        ollama_base_url="http://ollama.internal:11434/v1",
        openai_compatible_data=ACME_PAYLOAD,
    )


@pytest.fixture
def registry(config: RegistryConfig) -> ModelRegistry:
    return build_registry(config)


@pytest.fixture
async def client(registry: ModelRegistry) -> AsyncIterator[AsyncClient]:
    """HTTP client against the app, serving the `registry` fixture."""
    from llm_registry.main import app

    app.dependency_overrides[get_registry] = lambda: registry
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
