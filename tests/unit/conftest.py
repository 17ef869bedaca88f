"""
Unit Test Fixtures.

Unit tests never open sockets or start the application. Uploaded files
are built in memory and written under tmp_path.
"""

import io
from pathlib import Path

import pytest
from starlette.datastructures import Headers, UploadFile

from modules.backend.services.media import (
    PROFILE_PICTURE_FIELD,
    WALLPAPER_FIELD,
    AssetTarget,
    MediaIngress,
)


def make_upload(filename: str, content_type: str, data: bytes = b"\x89PNG fake") -> UploadFile:
    """Build an UploadFile the way Starlette's form parser does."""
    return UploadFile(
        file=io.BytesIO(data),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


@pytest.fixture
def media(tmp_path: Path) -> MediaIngress:
    """MediaIngress writing into a temporary directory."""
    ingress = MediaIngress(
        targets={
            PROFILE_PICTURE_FIELD: AssetTarget(tmp_path / "uploads", "/uploads"),
            WALLPAPER_FIELD: AssetTarget(tmp_path / "wallpapers", "/wallpapers"),
        },
        base_url="http://localhost:3000",
    )
    ingress.ensure_directories()
    return ingress


@pytest.fixture
def upload_factory():
    """Factory for in-memory uploads: upload_factory("a.png", "image/png")."""
    return make_upload
