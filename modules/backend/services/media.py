"""
Media Ingress.

Accepts uploaded profile pictures and wallpapers, writes them to flat
local directories and hands back the public URL each file is served from.

Each stored file gets a ``<uuid4>-<original name>`` filename so uploads
never collide. Files are never removed, even when a user later points
at a different image.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote
from uuid import uuid4

from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from modules.backend.core.config import get_app_config, get_server_base_url
from modules.backend.core.exceptions import ValidationError
from modules.backend.core.logging import get_logger

logger = get_logger(__name__)

PROFILE_PICTURE_FIELD = "profilePicture"
WALLPAPER_FIELD = "wallpaper"

# Characters encodeURIComponent leaves untouched.
_URL_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class AssetTarget:
    """Where one upload field is written and served from."""

    directory: Path
    mount_path: str


@dataclass
class StoredAssets:
    """Public URLs of the assets stored for one request."""

    profile_picture: str | None = None
    wallpaper: str | None = None


class MediaIngress:
    """
    Validates and stores image uploads.

    Accepts at most one file for each of ``profilePicture`` and
    ``wallpaper``. Both the file extension and the declared content type
    must name one of the allowed image types.
    """

    def __init__(
        self,
        targets: Mapping[str, AssetTarget],
        base_url: str,
        allowed_types: Sequence[str] = ("jpeg", "jpg", "png"),
    ) -> None:
        self.targets = dict(targets)
        self.base_url = base_url.rstrip("/")
        self.allowed_types = tuple(t.lower() for t in allowed_types)

    @classmethod
    def from_config(cls, root: Path) -> "MediaIngress":
        """Build from storage.yaml with directories resolved under ``root``."""
        storage = get_app_config().storage
        return cls(
            targets={
                PROFILE_PICTURE_FIELD: AssetTarget(
                    directory=root / storage.profile_pictures.directory,
                    mount_path=storage.profile_pictures.mount_path,
                ),
                WALLPAPER_FIELD: AssetTarget(
                    directory=root / storage.wallpapers.directory,
                    mount_path=storage.wallpapers.mount_path,
                ),
            },
            base_url=get_server_base_url(),
            allowed_types=storage.allowed_image_types,
        )

    def ensure_directories(self) -> None:
        for target in self.targets.values():
            target.directory.mkdir(parents=True, exist_ok=True)

    def is_image(self, filename: str, content_type: str | None) -> bool:
        extension = Path(filename).suffix.lower().lstrip(".")
        mimetype = (content_type or "").lower()
        return extension in self.allowed_types and any(
            t in mimetype for t in self.allowed_types
        )

    def collect_uploads(self, files: Mapping[str, Sequence[UploadFile]]) -> dict[str, UploadFile]:
        """
        Validate every uploaded file before anything is written.

        Args:
            files: Uploaded files grouped by form field name

        Returns:
            The single accepted file for each field

        Raises:
            ValidationError: For an unknown field, more than one file in a
                field, or a file that is not an accepted image
        """
        accepted: dict[str, UploadFile] = {}
        for field_name, uploads in files.items():
            if field_name not in self.targets:
                raise ValidationError(
                    "Invalid field name for file upload",
                    details={"field": field_name},
                )
            if len(uploads) > 1:
                raise ValidationError(
                    "Too many files for upload field",
                    details={"field": field_name, "max_count": 1},
                )
            upload = uploads[0]
            if not self.is_image(upload.filename or "", upload.content_type):
                raise ValidationError(
                    "Error: Images Only!",
                    details={"field": field_name, "filename": upload.filename},
                )
            accepted[field_name] = upload
        return accepted

    def url_for(self, field_name: str, filename: str) -> str:
        mount_path = self.targets[field_name].mount_path.rstrip("/")
        return f"{self.base_url}{mount_path}/{quote(filename, safe=_URL_SAFE)}"

    async def store(self, field_name: str, upload: UploadFile) -> str:
        """Write one accepted upload and return its public URL."""
        target = self.targets[field_name]
        filename = f"{uuid4()}-{Path(upload.filename or 'upload').name}"
        content = await upload.read()
        await run_in_threadpool((target.directory / filename).write_bytes, content)

        logger.info(
            "Asset stored",
            extra={"field": field_name, "filename": filename, "size": len(content)},
        )
        return self.url_for(field_name, filename)

    async def store_all(self, uploads: Mapping[str, UploadFile]) -> StoredAssets:
        """Store every accepted upload and collect their URLs."""
        assets = StoredAssets()
        if PROFILE_PICTURE_FIELD in uploads:
            assets.profile_picture = await self.store(
                PROFILE_PICTURE_FIELD, uploads[PROFILE_PICTURE_FIELD]
            )
        if WALLPAPER_FIELD in uploads:
            assets.wallpaper = await self.store(WALLPAPER_FIELD, uploads[WALLPAPER_FIELD])
        return assets
