"""Google Gemini (direct API) model handle."""

from pydantic_ai.models import Model as PydanticAIModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.providers.google import GoogleProvider

from llm_registry.core.exceptions import ExternalServiceError
from llm_registry.providers.base import ModelHandle


class GoogleModelHandle(ModelHandle):
    """Handle for a Gemini model accessed with a Generative AI API key."""

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
        """Create a Gemini model, validating the API key is configured.

        Raises:
            ExternalServiceError: If no API key was supplied.
        """
        if not self.api_key:
            raise ExternalServiceError(
                "GOOGLE_GENERATIVE_AI_API_KEY must be set in environment to use "
                f"Gemini models. Cannot load model '{self.model_name}'."
            )
        provider = GoogleProvider(api_key=self.api_key)
        return GoogleModel(self.api_model_id, provider=provider)
