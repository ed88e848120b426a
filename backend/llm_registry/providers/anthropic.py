"""Anthropic model handle."""

from pydantic_ai.models import Model as PydanticAIModel
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.providers.anthropic import AnthropicProvider

from llm_registry.core.exceptions import ExternalServiceError
from llm_registry.providers.base import ModelHandle


class AnthropicModelHandle(ModelHandle):
    """Handle for a Claude model.

    `model_name` is the short alias ("claude-4-sonnet"); `api_model_id` pins
    the dated snapshot sent to the API.
    """

    def __init__(
        self,
        provider: str,
        model_name: str,
        api_model_id: str | None = None,
        *,
        api_key: str | None = None,
    ) -> None:
        super().__init__(provider, model_name, api_model_id)
        self.api_key = api_key

    def create_pydantic_model(self) -> PydanticAIModel:
        if not self.api_key:
            raise ExternalServiceError(
                "ANTHROPIC_API_KEY must be set in environment to use "
                f"Anthropic models. Cannot load model '{self.model_name}'."
            )
        provider = AnthropicProvider(api_key=self.api_key)
        return AnthropicModel(self.api_model_id, provider=provider)
