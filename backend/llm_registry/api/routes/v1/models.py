"""Models endpoints: the available model list and selection resolution."""

from typing import Annotated

from fastapi import APIRouter, Depends

from llm_registry.core.exceptions import BadRequestError
from llm_registry.providers.registry import ModelRegistry, get_registry
from llm_registry.schemas.models import ChatModel, ProviderModels, ResolvedModel

router = APIRouter()

Registry = Annotated[ModelRegistry, Depends(get_registry)]


@router.get("/models", response_model=list[ProviderModels])
async def list_models(registry: Registry) -> list[ProviderModels]:
    """Return every configured provider and its models.

    No authentication required. The frontend uses this to populate the
    model selector; each entry carries `isToolCallUnsupported`.
    """
    return registry.models_info()


@router.get("/models/resolve", response_model=ResolvedModel)
async def resolve_model(
    registry: Registry,
    provider: str | None = None,
    model: str | None = None,
) -> ResolvedModel:
    """Report which model a selection would use.

    Without parameters this is the default model. An unknown selection
    resolves to the default model with `isFallback` set.

    Raises:
        BadRequestError: If only one of `provider` and `model` is given.
    """
    if (provider is None) != (model is None):
        raise BadRequestError(
            message="Both 'provider' and 'model' must be given, or neither.",
            details={"provider": provider, "model": model},
        )
    selection = ChatModel(provider=provider, model=model) if provider is not None else None
    handle = registry.resolve(selection)
    return ResolvedModel(
        provider=handle.provider,
        model=handle.model_name,
        is_fallback=selection is not None and handle.key != (selection.provider, selection.model),
    )
