"""Shared model configuration for backend payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PitwallModel(BaseModel):
    """Frozen model reading the backend's camelCase JSON keys.

    Attributes are snake_case; both spellings are accepted on input.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
