"""Base schema shared by all API and configuration models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Pydantic base with camelCase wire names.

    Fields are declared in snake_case and accepted under either name;
    FastAPI serialises responses by alias.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        from_attributes=True,
    )
