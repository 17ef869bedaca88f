"""
User Schemas.

Pydantic schemas for registration, login and profile responses.
The password hash never appears in any response model.
"""

from pydantic import Field

from modules.backend.schemas.base import CamelModel


class RegisterRequest(CamelModel):
    """Schema for registering a new user."""

    username: str = Field(..., description="Unique login name", examples=["ada"])
    password: str = Field(..., description="Plain password")
    full_name: str | None = Field(default=None, examples=["Ada Lovelace"])
    email: str | None = None
    birth_month: str | int | None = None
    birth_date: str | int | None = None
    birth_year: str | int | None = None
    gender: str | None = None
    registration_date: str | None = None

    def profile_fields(self) -> dict:
        return self.model_dump(exclude={"username", "password"})


class LoginRequest(CamelModel):
    username: str
    password: str


class TokenResponse(CamelModel):
    token: str


class UserResponse(CamelModel):
    """Schema for a user in API responses."""

    id: str
    username: str
    full_name: str | None = None
    email: str | None = None
    birth_month: str | int | None = None
    birth_date: str | int | None = None
    birth_year: str | int | None = None
    gender: str | None = None
    registration_date: str | None = None
    profile_picture: str
    wallpaper: str
    side_menu_color: str
    theme_mode: str


class UserUpdatedResponse(CamelModel):
    message: str = "User data updated successfully"
    updated_user: UserResponse


class ProfileUpdateFields(CamelModel):
    """
    Text fields accepted by a profile update.

    Every field is optional; empty values leave the stored value alone.
    ``profile_picture`` is only meaningful as the placeholder URL, which
    resets the picture.
    """

    email: str | None = None
    full_name: str | None = None
    birth_month: str | int | None = None
    birth_date: str | int | None = None
    birth_year: str | int | None = None
    gender: str | None = None
    side_menu_color: str | None = None
    theme_mode: str | None = None
    wallpaper: str | None = None
    profile_picture: str | None = None
