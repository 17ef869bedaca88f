"""
User Model.

Registered account with profile, media and presentation preferences.
"""

from dataclasses import dataclass, field
from typing import Any

from modules.backend.models.base import Entity

DEFAULT_PROFILE_PICTURE = "https://tse1.mm.bing.net/th?q=profile%20pic%20blank&w=250&h=250&c=7"
DEFAULT_WALLPAPER = "/Images/backgroundImage.jpeg"
DEFAULT_SIDE_MENU_COLOR = "rgba(255, 255, 255, 1)"
DEFAULT_THEME_MODE = "glass"

# Profile fields a user may change after registration.
MUTABLE_PROFILE_FIELDS = (
    "email",
    "full_name",
    "birth_month",
    "birth_date",
    "birth_year",
    "gender",
    "side_menu_color",
    "theme_mode",
)


@dataclass(kw_only=True)
class User(Entity):
    """User record. ``username`` is unique and never changes."""

    username: str
    password_hash: str = field(repr=False)

    full_name: Any = None
    email: Any = None
    birth_month: Any = None
    birth_date: Any = None
    birth_year: Any = None
    gender: Any = None
    registration_date: Any = None

    profile_picture: str = DEFAULT_PROFILE_PICTURE
    wallpaper: str = DEFAULT_WALLPAPER
    side_menu_color: str = DEFAULT_SIDE_MENU_COLOR
    theme_mode: str = DEFAULT_THEME_MODE
