# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.achievements_dir)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The Settings class validates all values at startup, catching configuration
# errors early rather than at runtime.
# =============================================================================

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Public Asset Layout
    # -------------------------------------------------------------------------
    # Everything under PUBLIC_DIR is served as-is by the static mount.

    PUBLIC_DIR: Path = Field(
        default=Path("public"),
        description="Root directory of public static assets"
    )

    SERVE_STATIC: bool = Field(
        default=True,
        description="Serve PUBLIC_DIR from the API process"
    )

    ACHIEVEMENTS_DIRNAME: str = Field(
        default="achievements",
        min_length=1,
        description="Directory under PUBLIC_DIR holding achievement images"
    )

    ACHIEVEMENTS_ROUTE: str = Field(
        default="/achievements",
        description="Public route prefix for achievement images"
    )

    PROFILE_DIRNAME: str = Field(
        default="profile",
        min_length=1,
        description="Directory under PUBLIC_DIR holding the profile picture"
    )

    PROFILE_FILENAME: str = Field(
        default="avatar.jpg",
        min_length=1,
        description="Fixed filename of the profile picture"
    )

    # -------------------------------------------------------------------------
    # File Upload Settings
    # -------------------------------------------------------------------------

    MAX_PROFILE_PICTURE_SIZE_MB: int = Field(
        default=5,
        ge=1,
        le=100,
        description="Maximum profile picture size in MB"
    )

    ALLOWED_IMAGE_EXTENSIONS: str = Field(
        default=".png,.jpg,.jpeg,.webp,.gif,.svg",
        description="Image extensions listed as achievements (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Storage Backend
    # -------------------------------------------------------------------------
    # "static" is for hosts without writable storage: listings come from the
    # manifest below and uploads are refused.

    STORAGE_BACKEND: Literal["filesystem", "static"] = Field(
        default="filesystem",
        description="Where achievements and the profile picture come from"
    )

    STATIC_ACHIEVEMENTS: str = Field(
        default="",
        description="Achievement filenames for the static backend (comma-separated)"
    )

    STATIC_PROFILE_PICTURE_URL: str = Field(
        default="/profile/avatar.jpg",
        description="Profile picture URL for the static backend (empty = none)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty env vars as unset so defaults apply
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Handles comma-separated values and strips whitespace.
        Example: "http://localhost:3000, https://me.dev" -> ["http://localhost:3000", "https://me.dev"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def allowed_extensions_list(self) -> list[str]:
        """
        Parse ALLOWED_IMAGE_EXTENSIONS into lower-case, dot-prefixed suffixes.

        Example: "PNG, .jpg" -> [".png", ".jpg"]
        """
        extensions = []
        for ext in self.ALLOWED_IMAGE_EXTENSIONS.split(","):
            ext = ext.strip().lower()
            if not ext:
                continue
            extensions.append(ext if ext.startswith(".") else f".{ext}")
        return extensions

    @property
    def static_achievements_list(self) -> list[str]:
        """Parse STATIC_ACHIEVEMENTS into a list of filenames."""
        return [name.strip() for name in self.STATIC_ACHIEVEMENTS.split(",") if name.strip()]

    @property
    def achievements_dir(self) -> Path:
        return self.PUBLIC_DIR / self.ACHIEVEMENTS_DIRNAME

    @property
    def profile_dir(self) -> Path:
        return self.PUBLIC_DIR / self.PROFILE_DIRNAME

    @property
    def profile_picture_path(self) -> Path:
        return self.profile_dir / self.PROFILE_FILENAME

    @property
    def profile_picture_url(self) -> str:
        """Public path the stored profile picture is served under."""
        return f"/{self.PROFILE_DIRNAME}/{self.PROFILE_FILENAME}"

    @property
    def max_profile_picture_size_bytes(self) -> int:
        """
        Convert MB to bytes for file size validation.
        """
        return self.MAX_PROFILE_PICTURE_SIZE_MB * 1024 * 1024

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
