"""
Base Schemas.

Shared response shapes. JSON keys are camelCase on the wire; Python
attributes stay snake_case.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising to camelCase and accepting either spelling."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    """Plain acknowledgement."""

    message: str


class ErrorResponse(CamelModel):
    """Standard error response."""

    message: str
    code: str
    details: dict[str, Any] | None = None
    error: str | None = None
    request_id: str | None = None
