"""
Authentication Endpoints.

Registration and login. Neither requires a token.
"""

from fastapi import APIRouter

from modules.backend.core.dependencies import Users
from modules.backend.core.logging import get_logger
from modules.backend.core.security import issue_token
from modules.backend.schemas.base import MessageResponse
from modules.backend.schemas.user import LoginRequest, RegisterRequest, TokenResponse
from modules.backend.services.credentials import CredentialStore

router = APIRouter()
logger = get_logger(__name__)


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=201,
    summary="Register a user",
    description="Create an account. Fails with 400 if the username is taken.",
)
async def register(data: RegisterRequest, users: Users) -> MessageResponse:
    service = CredentialStore(users)
    await service.register(data.username, data.password, data.profile_fields())
    return MessageResponse(message="User registered successfully")


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Log in",
    description="Exchange a username and password for a bearer token.",
)
async def login(data: LoginRequest, users: Users) -> TokenResponse:
    service = CredentialStore(users)
    await service.verify_credentials(data.username, data.password)
    token = issue_token(data.username)
    logger.info("User logged in", extra={"username": data.username})
    return TokenResponse(token=token)
