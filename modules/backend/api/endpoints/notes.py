"""
Notes API Endpoints.

Every endpoint is scoped to the identity in the bearer token.
"""

from fastapi import APIRouter

from modules.backend.core.dependencies import CurrentIdentity, Notes
from modules.backend.schemas.base import MessageResponse
from modules.backend.schemas.note import NoteContent, NoteResponse, NoteSavedResponse
from modules.backend.services.notes import NoteService

router = APIRouter()


@router.post(
    "",
    response_model=NoteSavedResponse,
    status_code=201,
    summary="Create a note",
)
async def create_note(
    data: NoteContent,
    identity: CurrentIdentity,
    notes: Notes,
) -> NoteSavedResponse:
    service = NoteService(notes)
    note = await service.create(identity, data.content)
    return NoteSavedResponse(
        message="Note saved successfully",
        note=NoteResponse.model_validate(note),
    )


@router.get(
    "",
    response_model=list[NoteResponse],
    summary="List my notes",
    description="Notes owned by the caller, oldest first.",
)
async def list_notes(identity: CurrentIdentity, notes: Notes) -> list[NoteResponse]:
    service = NoteService(notes)
    return [NoteResponse.model_validate(note) for note in await service.list_mine(identity)]


@router.put(
    "/{note_id}",
    response_model=NoteSavedResponse,
    summary="Replace a note's content",
)
async def update_note(
    note_id: str,
    data: NoteContent,
    identity: CurrentIdentity,
    notes: Notes,
) -> NoteSavedResponse:
    service = NoteService(notes)
    note = await service.update(identity, note_id, data.content)
    return NoteSavedResponse(
        message="Note updated successfully",
        note=NoteResponse.model_validate(note),
    )


@router.delete(
    "/{note_id}",
    response_model=MessageResponse,
    summary="Delete a note",
)
async def delete_note(note_id: str, identity: CurrentIdentity, notes: Notes) -> MessageResponse:
    service = NoteService(notes)
    await service.delete(identity, note_id)
    return MessageResponse(message="Note deleted successfully")
