"""Shared pydantic base for the public JSON surface."""
from typing import Any
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    snake_case in Python, camelCase on the wire.

    Request models subclass this with extra="forbid" so unknown fields are
    rejected; response models add from_attributes to read ORM objects.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def reject_null(value: Any) -> Any:
    """
    Field validator for PATCH models: a field may be omitted, but an explicit
    null is refused for columns that are NOT NULL.

    Usage:
        @field_validator("title")
        @classmethod
        def title_not_null(cls, value):
            return reject_null(value)
    """
    if value is None:
        raise ValueError("cannot be null")
    return value


class DeletedResponse(BaseModel):
    """Response for DELETE endpoints: the key of the removed record."""
    deleted: str
