"""Abstract base class for LLM model handles."""

from abc import ABC, abstractmethod

from pydantic_ai.models import Model as PydanticAIModel


class ModelHandle(ABC):
    """Abstract base for one concrete model offered by one provider.

    A handle owns its (provider, model_name) key plus whatever endpoint and
    credential it needs. Creating a handle is cheap and performs no I/O;
    the pydantic-ai model (and its SDK client) is only built on demand.

    Handles compare by identity, so a set of handles never aliases two
    providers that happen to offer a model with the same name.
    """

    def __init__(
        self,
        provider: str,
        model_name: str,
        api_model_id: str | None = None,
    ) -> None:
        self.provider = provider
        self.model_name = model_name
        self.api_model_id = api_model_id or model_name

    @property
    def key(self) -> tuple[str, str]:
        """The (provider, model_name) pair this handle is registered under."""
        return self.provider, self.model_name

    @abstractmethod
    def create_pydantic_model(self) -> PydanticAIModel:
        """Return a PydanticAI model object ready for agent use."""

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(provider={self.provider!r}, "
            f"model_name={self.model_name!r}, api_model_id={self.api_model_id!r})"
        )
