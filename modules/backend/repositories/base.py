"""
Base Repository.

In-memory collection with the CRUD operations shared by all repositories.

Records live in a plain list in insertion order. Every mutating method
runs to completion without awaiting, so on a single event loop no caller
can observe a collection half-updated. A multi-threaded deployment has to
serialise access per repository instance.
"""

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from modules.backend.core.exceptions import NotFoundError
from modules.backend.core.logging import get_logger
from modules.backend.models.base import Entity

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Entity)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common CRUD operations.

    Subclasses set the model class:

        class UserRepository(BaseRepository[User]):
            model = User

    The async signatures match what a datastore-backed implementation
    would expose, so services do not change when the storage does.
    """

    model: type[ModelType]

    def __init__(self, items: Iterable[ModelType] | None = None) -> None:
        self._items: list[ModelType] = list(items or [])

    def _find_index(self, predicate: Callable[[ModelType], bool]) -> int:
        for index, item in enumerate(self._items):
            if predicate(item):
                return index
        return -1

    async def get_by_id(self, id: str) -> ModelType:
        """
        Get a single record by ID.

        Raises:
            NotFoundError: If record not found
        """
        instance = await self.get_by_id_or_none(id)
        if instance is None:
            raise NotFoundError(f"{self.model.__name__} not found")
        return instance

    async def get_by_id_or_none(self, id: str) -> ModelType | None:
        """Get a single record by ID, returning None if not found."""
        index = self._find_index(lambda item: item.id == id)
        return self._items[index] if index >= 0 else None

    async def get_all(self) -> list[ModelType]:
        """All records in insertion order."""
        return list(self._items)

    async def add(self, instance: ModelType) -> ModelType:
        """Append a new record."""
        self._items.append(instance)
        return instance

    async def delete(self, id: str) -> None:
        """
        Delete a record by ID.

        Raises:
            NotFoundError: If record not found
        """
        index = self._find_index(lambda item: item.id == id)
        if index < 0:
            raise NotFoundError(f"{self.model.__name__} not found")
        del self._items[index]

    async def count(self) -> int:
        return len(self._items)
