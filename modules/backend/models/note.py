"""
Note Model.

A free-form text note owned by one user.
"""

from dataclasses import dataclass

from modules.backend.models.base import Entity, TimestampMixin


@dataclass(kw_only=True)
class Note(Entity, TimestampMixin):
    """
    Note record.

    ``user_id`` holds the owner's username. Only requests whose verified
    identity equals it may see, change or delete the note.
    """

    user_id: str
    content: str

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, user_id={self.user_id!r})>"
