"""
User Directory Service.

Lists users and applies profile updates for the signed-in user,
including any uploaded profile picture or wallpaper.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from starlette.datastructures import UploadFile

from modules.backend.core.exceptions import ApplicationError, NotFoundError, ProfileUpdateError
from modules.backend.models.user import User
from modules.backend.repositories.user import UserRepository
from modules.backend.services.base import BaseService
from modules.backend.services.credentials import CredentialStore
from modules.backend.services.media import MediaIngress


class UserDirectoryService(BaseService):
    """Read and update access to user profiles."""

    def __init__(self, users: UserRepository, media: MediaIngress) -> None:
        super().__init__()
        self.users = users
        self.media = media
        self.credentials = CredentialStore(users)

    async def list_users(self) -> list[User]:
        """
        All registered users in registration order.

        Not identity-scoped: any caller sees every profile.
        """
        return await self.users.get_all()

    async def update_current_user(
        self,
        identity: str,
        fields: dict[str, Any],
        files: Mapping[str, Sequence[UploadFile]] | None = None,
    ) -> User:
        """
        Update the profile of the user behind ``identity``.

        Uploads are validated before anything is written.

        Raises:
            NotFoundError: If no user matches the identity
            ValidationError: If an upload is rejected
            ProfileUpdateError: If storing or applying the update fails unexpectedly
        """
        if not await self.users.exists_by_username(identity):
            raise NotFoundError("User not found")

        uploads = self.media.collect_uploads(files or {})

        try:
            assets = await self.media.store_all(uploads)
            return await self.credentials.update_profile(identity, fields, assets)
        except ApplicationError:
            raise
        except Exception as e:
            self._logger.exception(
                "Error updating user data",
                extra={"username": identity, "error": str(e)},
            )
            raise ProfileUpdateError(e) from e
