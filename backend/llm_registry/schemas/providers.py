"""Schemas for operator-configured OpenAI-compatible providers."""

from pydantic import Field, field_validator

from llm_registry.schemas.base import BaseSchema


class CompatibleModelConfig(BaseSchema):
    """One model offered by an OpenAI-compatible provider."""

    name: str = Field(min_length=1)
    supports_tools: bool = True


class CompatibleProviderConfig(BaseSchema):
    """One entry of the OPENAI_COMPATIBLE_DATA payload.

    Wire keys are camelCase, except `baseURL` which keeps its upper-case suffix.
    """

    name: str = Field(min_length=1)
    base_url: str = Field(min_length=1, alias="baseURL")
    api_key: str | None = None
    models: list[CompatibleModelConfig] = Field(min_length=1)

    @field_validator("api_key")
    @classmethod
    def blank_api_key_is_none(cls, v: str | None) -> str | None:
        return v or None

    @field_validator("models")
    @classmethod
    def unique_model_names(cls, v: list[CompatibleModelConfig]) -> list[CompatibleModelConfig]:
        """Reject entries that list the same model name twice."""
        seen: set[str] = set()
        for model in v:
            if model.name in seen:
                raise ValueError(f"duplicate model name '{model.name}'")
            seen.add(model.name)
        return v
