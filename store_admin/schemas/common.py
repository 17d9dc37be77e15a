"""
Shared schema configuration and response envelopes.

WHAT: Base models for request/response schemas and the soft failure body.

WHY: The admin clients speak camelCase JSON (storeId, bookingType, ...)
while the Python side uses snake_case. Request models accept both spellings;
response models are serialized with camelCase aliases by FastAPI.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for request bodies: camelCase keys in, snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )


class CamelResponse(BaseModel):
    """Base for response bodies built from ORM instances."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SoftFailure(BaseModel):
    """Failure without a structured error code."""

    valid: bool = False
    message: Optional[str] = None
