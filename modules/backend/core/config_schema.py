"""
Configuration Schemas.

One model per file in config/settings/, named after it:

    application.yaml  ApplicationSchema
    logging.yaml      LoggingSchema
    features.yaml     FeaturesSchema
    security.yaml     SecuritySchema
    storage.yaml      StorageSchema

Unknown keys are rejected so a typo in YAML fails at startup.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class _Section(BaseModel):
    model_config = ConfigDict(extra="forbid")


# application.yaml

class ServerSchema(_Section):
    host: str
    port: int = Field(ge=1, le=65535)
    public_base_url: str = Field(description="Origin prefixed to uploaded asset URLs")


class CorsSchema(_Section):
    origins: list[str] = Field(default_factory=list)


class ApplicationSchema(_Section):
    name: str
    version: str
    description: str = ""
    environment: Literal["development", "test", "production"]
    debug: bool = False
    docs_enabled: bool = False
    server: ServerSchema
    cors: CorsSchema = Field(default_factory=CorsSchema)


# logging.yaml

class ConsoleHandlerSchema(_Section):
    enabled: bool


class FileHandlerSchema(_Section):
    enabled: bool
    path: str
    max_bytes: int = Field(gt=0)
    backup_count: int = Field(ge=0)


class HandlersSchema(_Section):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_Section):
    level: LogLevel
    format: Literal["json", "console"]
    handlers: HandlersSchema

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


# features.yaml

class FeaturesSchema(_Section):
    api_detailed_errors: bool
    security_startup_checks_enabled: bool = True


# security.yaml

class JwtSchema(_Section):
    algorithm: Literal["HS256", "HS384", "HS512"]
    access_token_expire_minutes: int = Field(gt=0)
    audience: str


class PasswordSchema(_Section):
    bcrypt_rounds: int = Field(ge=4, le=31)


class SecretsValidationSchema(_Section):
    jwt_secret_min_length: int = Field(ge=0)


class SecuritySchema(_Section):
    jwt: JwtSchema
    password: PasswordSchema
    secrets_validation: SecretsValidationSchema


# storage.yaml

class AssetDirectorySchema(_Section):
    directory: str = Field(description="Relative to the media root")
    mount_path: str = Field(pattern=r"^/")


class StorageSchema(_Section):
    profile_pictures: AssetDirectorySchema
    wallpapers: AssetDirectorySchema
    allowed_image_types: list[str] = Field(min_length=1)
