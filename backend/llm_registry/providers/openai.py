"""Model handles for backends that speak the OpenAI chat completions API.

OpenAI itself, xAI, OpenRouter, Ollama and operator-configured
OpenAI-compatible servers all share the same pydantic-ai model class and only
differ in the provider object that carries the endpoint and credential.
"""

from pydantic_ai.models import Model as PydanticAIModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers import Provider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.providers.openrouter import OpenRouterProvider

from llm_registry.core.exceptions import ExternalServiceError
from llm_registry.providers.base import ModelHandle

OLLAMA_DEFAULT_BASE_URL = "http://localhost:11434/v1"
XAI_BASE_URL = "https://api.x.ai/v1"

# The OpenAI SDK refuses to build a client without a key; local
# OpenAI-compatible servers usually ignore it.
PLACEHOLDER_API_KEY = "api-key-not-set"


class OpenAIModelHandle(ModelHandle):
    """Handle for a model served by the OpenAI API."""

    env_var = "OPENAI_API_KEY"

    def __init__(
        self,
        provider: str,
        model_name: str,
        api_model_id: str | None = None,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
    ) -> None:
        super().__init__(provider, model_name, api_model_id)
        self.api_key = api_key
        self.base_url = base_url

    def _require_api_key(self) -> str:
        if not self.api_key:
            raise ExternalServiceError(
                f"{self.env_var} must be set in environment to use "
                f"'{self.provider}' models. Cannot load model '{self.model_name}'."
            )
        return self.api_key

    def _build_provider(self) -> Provider:
        return OpenAIProvider(api_key=self._require_api_key(), base_url=self.base_url)

    def create_pydantic_model(self) -> PydanticAIModel:
        """Create an OpenAI chat model bound to this handle's endpoint.

        Raises:
            ExternalServiceError: If the handle requires an API key and has none.
        """
        return OpenAIChatModel(self.api_model_id, provider=self._build_provider())


class XAIModelHandle(OpenAIModelHandle):
    """Handle for a Grok model served by xAI."""

    env_var = "XAI_API_KEY"

    def _build_provider(self) -> Provider:
        return OpenAIProvider(
            api_key=self._require_api_key(),
            base_url=self.base_url or XAI_BASE_URL,
        )


class OpenRouterModelHandle(OpenAIModelHandle):
    """Handle for a model routed through OpenRouter.

    `api_model_id` carries OpenRouter's namespaced id
    (e.g. "qwen/qwen3-8b:free") while `model_name` is the short name shown to users.
    """

    env_var = "OPENROUTER_API_KEY"

    def _build_provider(self) -> Provider:
        return OpenRouterProvider(api_key=self._require_api_key())


class OllamaModelHandle(OpenAIModelHandle):
    """Handle for a model served by a local or remote Ollama instance."""

    def _build_provider(self) -> Provider:
        return OllamaProvider(base_url=self.base_url or OLLAMA_DEFAULT_BASE_URL)


class OpenAICompatibleModelHandle(OpenAIModelHandle):
    """Handle for a model on an operator-configured OpenAI-compatible server.

    The API key is optional; keyless servers receive a placeholder.
    """

    def _build_provider(self) -> Provider:
        return OpenAIProvider(
            api_key=self.api_key or PLACEHOLDER_API_KEY,
            base_url=self.base_url,
        )
