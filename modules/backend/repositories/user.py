"""
User Repository.

Data access for user records, keyed by the unique username.
"""

from typing import Any

from modules.backend.models.user import User
from modules.backend.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User records."""

    model = User

    async def get_by_username(self, username: str) -> User | None:
        index = self._find_index(lambda user: user.username == username)
        return self._items[index] if index >= 0 else None

    async def exists_by_username(self, username: str) -> bool:
        return self._find_index(lambda user: user.username == username) >= 0

    async def update(self, username: str, **fields: Any) -> User | None:
        """
        Apply ``fields`` to the user in one step.

        Returns None when the username is unknown.
        """
        user = await self.get_by_username(username)
        if user is None:
            return None
        for key, value in fields.items():
            if hasattr(user, key):
                setattr(user, key, value)
        return user
