"""
Credential Store.

Registers users, checks passwords and applies profile changes.
Password hashing runs in the thread pool so the event loop stays free.
"""

from typing import Any

from starlette.concurrency import run_in_threadpool

from modules.backend.core.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    NotFoundError,
)
from modules.backend.core.security import hash_password, verify_password
from modules.backend.models.user import (
    DEFAULT_PROFILE_PICTURE,
    MUTABLE_PROFILE_FIELDS,
    User,
)
from modules.backend.repositories.user import UserRepository
from modules.backend.services.base import BaseService
from modules.backend.services.media import StoredAssets


class CredentialStore(BaseService):
    """Owns user records and the passwords that protect them."""

    def __init__(self, users: UserRepository) -> None:
        super().__init__()
        self.users = users

    async def register(
        self,
        username: str,
        password: str,
        profile: dict[str, Any] | None = None,
    ) -> str:
        """
        Create a user with default media and preference fields.

        Args:
            username: Unique login name
            password: Plain password, stored only as a bcrypt hash
            profile: Free-form profile fields (full_name, email, ...)

        Returns:
            The new user's id

        Raises:
            DuplicateUsernameError: If the username is taken
        """
        if await self.users.exists_by_username(username):
            raise DuplicateUsernameError(username)

        password_hash = await run_in_threadpool(hash_password, password)

        # Another registration may have claimed the name while hashing.
        if await self.users.exists_by_username(username):
            raise DuplicateUsernameError(username)

        user = User(username=username, password_hash=password_hash, **(profile or {}))
        await self.users.add(user)

        self._log_operation("User registered", user_id=user.id, username=username)
        return user.id

    async def verify_credentials(self, username: str, password: str) -> str:
        """
        Check a username/password pair.

        Returns:
            The user's id

        Raises:
            NotFoundError: If the username is unknown
            InvalidCredentialsError: If the password does not match
        """
        user = await self.users.get_by_username(username)
        if user is None:
            raise NotFoundError("User not found")

        if not await run_in_threadpool(verify_password, password, user.password_hash):
            self._log_operation("Login rejected", username=username)
            raise InvalidCredentialsError()

        return user.id

    async def update_profile(
        self,
        username: str,
        fields: dict[str, Any],
        assets: StoredAssets | None = None,
    ) -> User:
        """
        Merge profile changes into an existing user.

        Only non-empty values replace existing ones. The profile picture
        resets to the placeholder when the placeholder URL itself is sent,
        otherwise takes a freshly uploaded asset. The wallpaper takes an
        uploaded asset first, then a caller-supplied URL.

        Raises:
            NotFoundError: If the username is unknown
        """
        assets = assets or StoredAssets()
        changes = {name: fields[name] for name in MUTABLE_PROFILE_FIELDS if fields.get(name)}

        if fields.get("profile_picture") == DEFAULT_PROFILE_PICTURE:
            changes["profile_picture"] = DEFAULT_PROFILE_PICTURE
        elif assets.profile_picture:
            changes["profile_picture"] = assets.profile_picture

        if assets.wallpaper:
            changes["wallpaper"] = assets.wallpaper
        elif fields.get("wallpaper"):
            changes["wallpaper"] = fields["wallpaper"]

        user = await self.users.update(username, **changes)
        if user is None:
            raise NotFoundError("User not found")

        self._log_operation("Profile updated", username=username, fields=sorted(changes))
        return user
