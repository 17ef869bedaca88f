"""
Users API Endpoints.

Listing is public. Updating requires a bearer token and accepts either
multipart form data (text fields plus optional ``profilePicture`` and
``wallpaper`` files) or a JSON object of text fields.
"""

from typing import Any

from fastapi import APIRouter, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from starlette.datastructures import UploadFile

from modules.backend.core.dependencies import CurrentIdentity, Media, Users
from modules.backend.core.exceptions import ValidationError
from modules.backend.schemas.user import ProfileUpdateFields, UserResponse, UserUpdatedResponse
from modules.backend.services.users import UserDirectoryService

router = APIRouter()


async def _read_profile_update(request: Request) -> tuple[dict[str, Any], dict[str, list[UploadFile]]]:
    """Split the request body into text fields and uploaded files."""
    raw: dict[str, Any] = {}
    files: dict[str, list[UploadFile]] = {}

    if request.headers.get("content-type", "").startswith("application/json"):
        try:
            body = await request.json()
        except ValueError as e:
            raise ValidationError("Request body must be a JSON object") from e
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")
        raw = body
    else:
        form = await request.form()
        for key, value in form.multi_items():
            if isinstance(value, UploadFile):
                # An empty file input is sent as a part with no filename.
                if value.filename:
                    files.setdefault(key, []).append(value)
            else:
                raw.setdefault(key, value)

    try:
        fields = ProfileUpdateFields.model_validate(raw)
    except PydanticValidationError as e:
        raise RequestValidationError(e.errors()) from e
    return fields.model_dump(exclude_none=True), files


@router.get(
    "",
    response_model=list[UserResponse],
    summary="List users",
)
async def list_users(users: Users, media: Media) -> list[UserResponse]:
    service = UserDirectoryService(users, media)
    return [UserResponse.model_validate(user) for user in await service.list_users()]


@router.put(
    "",
    response_model=UserUpdatedResponse,
    summary="Update my profile",
    description="Merge non-empty fields into the caller's profile and store any uploaded images.",
)
async def update_current_user(
    request: Request,
    identity: CurrentIdentity,
    users: Users,
    media: Media,
) -> UserUpdatedResponse:
    fields, files = await _read_profile_update(request)
    service = UserDirectoryService(users, media)
    user = await service.update_current_user(identity, fields, files)
    return UserUpdatedResponse(updated_user=UserResponse.model_validate(user))
