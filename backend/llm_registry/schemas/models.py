"""Schemas describing registered models and model selections."""

from pydantic import ConfigDict

from llm_registry.schemas.base import BaseSchema


class ChatModel(BaseSchema):
    """A caller's model selection. May name a provider or model that is not registered.

    Names are kept verbatim: a padded name is an unknown selection.
    """

    model_config = ConfigDict(str_strip_whitespace=False)

    provider: str
    model: str


class ModelEntry(BaseSchema):
    """One model in the /models listing."""

    name: str
    is_tool_call_unsupported: bool = False


class ProviderModels(BaseSchema):
    """A provider and its models, in registry order."""

    provider: str
    models: list[ModelEntry]


class ResolvedModel(BaseSchema):
    """The model a selection resolves to."""

    provider: str
    model: str
    is_fallback: bool = False
