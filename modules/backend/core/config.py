"""
Configuration Management.

Two sources, both resolved from the directory holding the .project_root
marker:

    config/.env              secrets (JWT_SECRET), read by pydantic-settings;
                             real environment variables take precedence
    config/settings/*.yaml   everything else, one file per AppConfig section,
                             each validated against its schema in config_schema.py

Usage:
    from modules.backend.core.config import get_app_config, get_settings

    port = get_app_config().application.server.port
    secret = get_settings().jwt_secret
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from modules.backend.core.config_schema import (
    ApplicationSchema,
    FeaturesSchema,
    LoggingSchema,
    SecuritySchema,
    StorageSchema,
)

MARKER_FILE = ".project_root"


def find_project_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` (the working directory by default) to the marker file."""
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / MARKER_FILE).exists():
            return candidate
    raise RuntimeError(f"Project root not found. Ensure {MARKER_FILE} file exists.")


def validate_project_root() -> Path:
    """find_project_root for entry scripts: exits with a message instead of raising."""
    try:
        return find_project_root()
    except RuntimeError as e:
        raise SystemExit(f"Error: {e}") from e


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Read one file from config/settings/. An empty file yields {}."""
    config_path = find_project_root() / "config" / "settings" / filename
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Secrets. Nothing here is ever logged or printed."""

    jwt_secret: str

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class AppConfig(BaseModel):
    """
    Validated application configuration.

    Each field is filled from the YAML file of the same name, so
    ``application`` comes from application.yaml and so on.
    """

    model_config = ConfigDict(frozen=True)

    application: ApplicationSchema
    logging: LoggingSchema
    features: FeaturesSchema
    security: SecuritySchema
    storage: StorageSchema

    @classmethod
    def load(cls) -> "AppConfig":
        """
        Read and validate every section.

        Raises:
            FileNotFoundError: If a section's YAML file is missing
            ValueError: Naming the first file that fails validation
        """
        sections: dict[str, BaseModel] = {}
        for name, field in cls.model_fields.items():
            filename = f"{name}.yaml"
            try:
                sections[name] = field.annotation.model_validate(load_yaml_config(filename))
            except ValidationError as e:
                raise ValueError(f"Invalid configuration in {filename}:\n{e}") from e
        return cls(**sections)


@lru_cache
def get_settings() -> Settings:
    """Secrets from config/.env, cached for the process."""
    return Settings(_env_file=str(find_project_root() / "config" / ".env"))


@lru_cache
def get_app_config() -> AppConfig:
    """YAML configuration, cached for the process."""
    return AppConfig.load()


def get_server_base_url() -> str:
    """Public base URL used when building links to uploaded assets."""
    return get_app_config().application.server.public_base_url.rstrip("/")
