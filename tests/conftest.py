"""
Root Pytest Fixtures.

Shared fixtures available to all test types. Tests run from the project
root so configuration is loaded from the real config/ directory.
"""

from collections.abc import Generator

import pytest

from modules.backend.core.config import get_app_config, get_settings
from modules.backend.repositories.note import NoteRepository
from modules.backend.repositories.user import UserRepository


@pytest.fixture(autouse=True)
def _fresh_config_cache() -> Generator[None, None, None]:
    """Each test sees configuration loaded from disk, not a stale cache."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


@pytest.fixture
def user_repo() -> UserRepository:
    """Empty in-memory user repository."""
    return UserRepository()


@pytest.fixture
def note_repo() -> NoteRepository:
    """Empty in-memory note repository."""
    return NoteRepository()
