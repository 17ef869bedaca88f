"""
Security Utilities.

Password hashing and bearer token issue/verification.

Tokens are HS256 JWTs carrying the ``username`` claim. The signing key is
the shared ``JWT_SECRET`` from config/.env; every issued token is valid for
``security.jwt.access_token_expire_minutes`` (about 416 days by default).
"""

from datetime import timedelta
from typing import Any

import bcrypt
from jose import JWTError, jwt

from modules.backend.core.config import get_app_config, get_settings
from modules.backend.core.exceptions import InvalidTokenError
from modules.backend.core.logging import get_logger
from modules.backend.core.utils import utc_now

logger = get_logger(__name__)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt with the configured cost factor."""
    rounds = get_app_config().security.password.bcrypt_rounds
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return bcrypt.checkpw(
        plain_password.encode("utf-8"),
        hashed_password.encode("utf-8"),
    )


def issue_token(username: str, expires_delta: timedelta | None = None) -> str:
    """
    Create a signed bearer token for ``username``.

    Args:
        username: Identity to embed in the token
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT
    """
    settings = get_settings()
    jwt_config = get_app_config().security.jwt

    if expires_delta is None:
        expires_delta = timedelta(minutes=jwt_config.access_token_expire_minutes)

    claims: dict[str, Any] = {
        "username": username,
        "exp": utc_now() + expires_delta,
        "type": "access",
        "aud": jwt_config.audience,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=jwt_config.algorithm)


def verify_token(token: str) -> str:
    """
    Verify a bearer token and return the embedded identity.

    Raises:
        InvalidTokenError: If the signature, expiry, audience or
            username claim is wrong
    """
    settings = get_settings()
    jwt_config = get_app_config().security.jwt
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[jwt_config.algorithm],
            audience=jwt_config.audience,
        )
    except JWTError as e:
        logger.warning("Token verification failed", extra={"error": str(e)})
        raise InvalidTokenError()

    username = payload.get("username")
    if not isinstance(username, str) or not username:
        logger.warning("Token is missing the username claim")
        raise InvalidTokenError()
    return username
