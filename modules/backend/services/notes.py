"""
Note Service.

Create, list, edit and delete notes owned by the signed-in user.
"""

from modules.backend.core.exceptions import NoteNotFoundError
from modules.backend.models.note import Note
from modules.backend.repositories.note import NoteRepository
from modules.backend.services.base import BaseService


class NoteService(BaseService):
    """
    Service for note business logic.

    Every operation is scoped to ``identity``. A note owned by another
    user is reported exactly like a note that does not exist.
    """

    def __init__(self, notes: NoteRepository) -> None:
        super().__init__()
        self.notes = notes

    async def create(self, identity: str, content: str) -> Note:
        """Create a note owned by ``identity``."""
        note = await self.notes.add(Note(user_id=identity, content=content))
        self._log_operation("Note created", note_id=note.id, user_id=identity)
        return note

    async def list_mine(self, identity: str) -> list[Note]:
        """Notes owned by ``identity`` in the order they were created."""
        return await self.notes.list_by_owner(identity)

    async def update(self, identity: str, note_id: str, content: str) -> Note:
        """
        Replace a note's content.

        Raises:
            NoteNotFoundError: If no note with that id is owned by ``identity``
        """
        note = await self.notes.update_content(note_id, identity, content)
        if note is None:
            raise NoteNotFoundError("update")
        self._log_operation("Note updated", note_id=note_id, user_id=identity)
        return note

    async def delete(self, identity: str, note_id: str) -> None:
        """
        Delete a note.

        Raises:
            NoteNotFoundError: If no note with that id is owned by ``identity``
        """
        if not await self.notes.delete_owned(note_id, identity):
            raise NoteNotFoundError("delete")
        self._log_operation("Note deleted", note_id=note_id, user_id=identity)
