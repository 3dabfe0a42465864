# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================
# Tests for the pydantic-settings configuration and its computed properties.
# =============================================================================

from pathlib import Path

import pytest
from pydantic import ValidationError

from app.config import Settings


class TestSettingsDefaults:
    """Default values match the portfolio site's layout."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PUBLIC_DIR", raising=False)
        monkeypatch.delenv("STORAGE_BACKEND", raising=False)

        settings = Settings(_env_file=None)

        assert settings.PUBLIC_DIR == Path("public")
        assert settings.STORAGE_BACKEND == "filesystem"
        assert settings.achievements_dir == Path("public") / "achievements"
        assert settings.profile_picture_path == Path("public") / "profile" / "avatar.jpg"
        assert settings.profile_picture_url == "/profile/avatar.jpg"
        assert settings.max_profile_picture_size_bytes == 5 * 1024 * 1024
        assert settings.allowed_extensions_list == [".png", ".jpg", ".jpeg", ".webp", ".gif", ".svg"]


class TestSettingsParsing:
    """Comma-separated settings and overrides."""

    def test_extensions_are_normalized(self):
        settings = Settings(_env_file=None, ALLOWED_IMAGE_EXTENSIONS="PNG, .Jpg,, gif ")

        assert settings.allowed_extensions_list == [".png", ".jpg", ".gif"]

    def test_static_achievements_list(self):
        settings = Settings(_env_file=None, STATIC_ACHIEVEMENTS=" a.png ,b.svg,, ")

        assert settings.static_achievements_list == ["a.png", "b.svg"]

    def test_empty_static_achievements(self):
        assert Settings(_env_file=None, STATIC_ACHIEVEMENTS="").static_achievements_list == []

    def test_cors_origins_list(self):
        settings = Settings(_env_file=None, CORS_ORIGINS="http://localhost:3000, https://me.dev")

        assert settings.cors_origins_list == ["http://localhost:3000", "https://me.dev"]

    def test_custom_profile_location(self):
        settings = Settings(
            _env_file=None,
            PUBLIC_DIR=Path("/srv/site"),
            PROFILE_DIRNAME="me",
            PROFILE_FILENAME="face.png",
        )

        assert settings.profile_picture_path == Path("/srv/site/me/face.png")
        assert settings.profile_picture_url == "/me/face.png"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MAX_PROFILE_PICTURE_SIZE_MB", "2")
        monkeypatch.setenv("STORAGE_BACKEND", "static")

        settings = Settings(_env_file=None)

        assert settings.max_profile_picture_size_bytes == 2 * 1024 * 1024
        assert settings.STORAGE_BACKEND == "static"


class TestSettingsValidation:
    """Invalid values fail at startup."""

    def test_unknown_backend(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, STORAGE_BACKEND="s3")

    def test_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, MAX_PROFILE_PICTURE_SIZE_MB=0)

    def test_port_range(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, API_PORT=70000)
