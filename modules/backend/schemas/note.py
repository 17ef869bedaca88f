"""
Note Schemas.

Pydantic schemas for note API request/response validation.
"""

from pydantic import Field

from modules.backend.schemas.base import CamelModel


class NoteContent(CamelModel):
    """Body for creating or replacing a note."""

    content: str = Field(
        ...,
        description="Note content",
        examples=["Pick up the vinyl on Friday."],
    )


class NoteResponse(CamelModel):
    """Schema for a note in API responses."""

    id: str = Field(description="Note unique identifier")
    user_id: str = Field(description="Owner username")
    content: str = Field(description="Note content")
    created_at: str = Field(description="Creation timestamp, ISO 8601 UTC")
    updated_at: str = Field(description="Last update timestamp, ISO 8601 UTC")


class NoteSavedResponse(CamelModel):
    message: str
    note: NoteResponse
