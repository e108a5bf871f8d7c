# This file defines shared schema pieces reused by multiple API endpoints.
# It exists so the camelCase wire format and the error payload stay consistent.
# Shared models reduce duplication and keep contract changes easier to review.

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys and populated by either naming style."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ErrorResponse(BaseModel):
    error: str
    message: str
