"""
Note Repository.

Data access for notes, always scoped to the owning username.
"""

from modules.backend.models.note import Note
from modules.backend.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """
    Repository for Note records.

    Lookups by id also match the owner, so a note owned by someone else
    looks exactly like a missing one.
    """

    model = Note

    async def list_by_owner(self, user_id: str) -> list[Note]:
        """Notes owned by ``user_id`` in insertion order."""
        return [note for note in self._items if note.user_id == user_id]

    async def get_owned(self, note_id: str, user_id: str) -> Note | None:
        """Get a note by id if it belongs to ``user_id``."""
        index = self._find_index(
            lambda note: note.id == note_id and note.user_id == user_id
        )
        return self._items[index] if index >= 0 else None

    async def update_content(self, note_id: str, user_id: str, content: str) -> Note | None:
        """
        Replace the content of an owned note and refresh ``updated_at``.

        Returns None when no such note is owned by ``user_id``.
        """
        note = await self.get_owned(note_id, user_id)
        if note is None:
            return None
        note.content = content
        note.touch()
        return note

    async def delete_owned(self, note_id: str, user_id: str) -> bool:
        """Remove an owned note. Returns False when nothing matched."""
        index = self._find_index(
            lambda note: note.id == note_id and note.user_id == user_id
        )
        if index < 0:
            return False
        del self._items[index]
        return True
