# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Points the public asset directory at a throwaway temp dir
# - Provides services bound to per-test temp directories and an API client
#   wired to them
# =============================================================================

import os
import tempfile

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("STORAGE_BACKEND", "filesystem")
os.environ.setdefault("PUBLIC_DIR", tempfile.mkdtemp(prefix="portfolio-public-"))

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_achievement_service, get_profile_picture_service
from app.main import app
from core.services import AchievementService, ProfilePictureService


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def public_dir(tmp_path):
    """Empty public asset root for one test."""
    path = tmp_path / "public"
    path.mkdir()
    return path


@pytest.fixture
def achievements_dir(public_dir):
    """Achievements directory inside the public root."""
    path = public_dir / "achievements"
    path.mkdir()
    return path


@pytest.fixture
def achievement_service(achievements_dir):
    """Filesystem achievement lister over the temp achievements dir."""
    return AchievementService(achievements_dir, route="/achievements")


@pytest.fixture
def profile_picture_path(public_dir):
    """Fixed profile picture location. The parent dir is NOT created."""
    return public_dir / "profile" / "avatar.jpg"


@pytest.fixture
def profile_picture_service(profile_picture_path):
    """Filesystem profile picture store over the temp public dir."""
    return ProfilePictureService(profile_picture_path, public_url="/profile/avatar.jpg")


@pytest.fixture
def client(achievement_service, profile_picture_service):
    """API client whose services are bound to the temp public dir."""
    app.dependency_overrides[get_achievement_service] = lambda: achievement_service
    app.dependency_overrides[get_profile_picture_service] = lambda: profile_picture_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def png_bytes():
    """Minimal PNG header plus padding; content is never decoded."""
    return b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
