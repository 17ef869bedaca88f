"""
Unit Tests for Configuration Management.

The shipped config/ tree is checked as-is. Loader edge cases run against
a throwaway project built under tmp_path.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from modules.backend.core.config import (
    AppConfig,
    Settings,
    find_project_root,
    get_app_config,
    get_server_base_url,
    get_settings,
    load_yaml_config,
    validate_project_root,
)
from modules.backend.core.config_schema import (
    ApplicationSchema,
    FeaturesSchema,
    LoggingSchema,
    SecuritySchema,
    StorageSchema,
)


@pytest.fixture
def scratch_project(tmp_path: Path, monkeypatch) -> Path:
    """Empty project (marker plus config/settings) used as the working directory."""
    (tmp_path / ".project_root").touch()
    (tmp_path / "config" / "settings").mkdir(parents=True)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write_settings(root: Path, **files: str) -> None:
    for name, text in files.items():
        (root / "config" / "settings" / f"{name}.yaml").write_text(text)


class TestProjectRoot:
    def test_shipped_tree_has_config(self):
        root = find_project_root()
        assert (root / "config" / "settings" / "application.yaml").is_file()

    def test_found_from_nested_directory(self, scratch_project, monkeypatch):
        nested = scratch_project / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        assert find_project_root() == scratch_project.resolve()

    def test_explicit_start_directory(self, scratch_project):
        nested = scratch_project / "deep"
        nested.mkdir()

        assert find_project_root(nested) == scratch_project.resolve()

    def test_missing_marker_raises(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        with pytest.raises(RuntimeError, match="Project root not found"):
            find_project_root()

    def test_validate_exits_without_marker(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        with pytest.raises(SystemExit):
            validate_project_root()


class TestLoadYamlConfig:
    def test_reads_mapping(self, scratch_project):
        _write_settings(scratch_project, sample="answer: 42\n")

        assert load_yaml_config("sample.yaml") == {"answer": 42}

    def test_empty_file_is_empty_dict(self, scratch_project):
        _write_settings(scratch_project, empty="")

        assert load_yaml_config("empty.yaml") == {}

    def test_missing_file(self, scratch_project):
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            load_yaml_config("nope.yaml")


class TestShippedConfiguration:
    def test_every_section_validates(self):
        config = AppConfig.load()

        assert isinstance(config.application, ApplicationSchema)
        assert isinstance(config.logging, LoggingSchema)
        assert isinstance(config.features, FeaturesSchema)
        assert isinstance(config.security, SecuritySchema)
        assert isinstance(config.storage, StorageSchema)

    def test_server_listens_on_3000(self):
        server = AppConfig.load().application.server
        assert server.port == 3000
        assert server.public_base_url == "http://localhost:3000"

    def test_token_lifetime_and_cost(self):
        security = AppConfig.load().security
        assert security.jwt.algorithm == "HS256"
        assert security.jwt.access_token_expire_minutes == 600000
        assert security.password.bcrypt_rounds == 10

    def test_upload_locations(self):
        storage = AppConfig.load().storage
        assert (storage.profile_pictures.directory, storage.profile_pictures.mount_path) == ("uploads", "/uploads")
        assert (storage.wallpapers.directory, storage.wallpapers.mount_path) == ("wallpapers", "/wallpapers")
        assert set(storage.allowed_image_types) == {"jpeg", "jpg", "png"}

    def test_jwt_secret_present(self):
        assert get_settings().jwt_secret


class TestValidation:
    def test_invalid_file_named_in_error(self, scratch_project):
        _write_settings(scratch_project, application="name: Incomplete\n")

        with pytest.raises(ValueError, match="Invalid configuration in application.yaml"):
            AppConfig.load()

    def test_unknown_keys_rejected(self):
        data = load_yaml_config("application.yaml")
        data["unknown_field"] = "oops"

        with pytest.raises(PydanticValidationError, match="Extra inputs are not permitted"):
            ApplicationSchema(**data)

    def test_log_level_is_case_insensitive(self):
        data = load_yaml_config("logging.yaml")
        data["level"] = "debug"

        assert LoggingSchema(**data).level == "DEBUG"

    def test_bcrypt_rounds_bounded(self):
        data = load_yaml_config("security.yaml")
        data["password"]["bcrypt_rounds"] = 2

        with pytest.raises(PydanticValidationError):
            SecuritySchema(**data)

    def test_app_config_is_frozen(self):
        config = AppConfig.load()

        with pytest.raises(PydanticValidationError):
            config.application = config.application


class TestAccessors:
    def test_cached(self):
        assert get_settings() is get_settings()
        assert get_app_config() is get_app_config()

    def test_settings_type(self):
        assert isinstance(get_settings(), Settings)

    def test_environment_overrides_env_file(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "from-the-environment")

        assert get_settings().jwt_secret == "from-the-environment"

    def test_server_base_url_has_no_trailing_slash(self):
        assert get_server_base_url() == "http://localhost:3000"
