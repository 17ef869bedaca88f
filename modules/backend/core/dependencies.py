"""
FastAPI Dependencies.

Shared dependencies for request handling: the bearer-token gate and
accessors for the repositories held on ``app.state``.
"""

from typing import Annotated

from fastapi import Depends, Header, Request

from modules.backend.core.exceptions import InvalidTokenError, MissingTokenError
from modules.backend.core.logging import get_logger
from modules.backend.core.security import verify_token
from modules.backend.repositories.note import NoteRepository
from modules.backend.repositories.user import UserRepository
from modules.backend.services.media import MediaIngress

logger = get_logger(__name__)


async def get_current_identity(
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """
    Verify the bearer token and return the username it was issued to.

    The token is the second whitespace-separated part of the
    Authorization header (``Bearer <token>``).

    Raises:
        MissingTokenError: If no Authorization header was sent
        InvalidTokenError: If the token is absent from the header or fails verification
    """
    if not authorization:
        raise MissingTokenError()

    parts = authorization.split()
    if len(parts) < 2:
        raise InvalidTokenError()

    return verify_token(parts[1])


CurrentIdentity = Annotated[str, Depends(get_current_identity)]


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.users


def get_note_repository(request: Request) -> NoteRepository:
    return request.app.state.notes


def get_media_ingress(request: Request) -> MediaIngress:
    return request.app.state.media


Users = Annotated[UserRepository, Depends(get_user_repository)]
Notes = Annotated[NoteRepository, Depends(get_note_repository)]
Media = Annotated[MediaIngress, Depends(get_media_ingress)]
