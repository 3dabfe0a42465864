# =============================================================================
# tests/test_achievement_service.py - Achievement Listing Tests
# =============================================================================
# Tests for the achievement gallery listing:
# - Extension filtering (case-insensitive, allow-list only)
# - Public path mapping and stable ordering
# - Degrade-to-empty on missing or unreadable directories
# - The manifest-backed static variant
#
# Run with: pytest tests/test_achievement_service.py -v
# =============================================================================

import logging

import pytest

from core.services import (
    AchievementService,
    BaseAchievementService,
    StaticAchievementService,
    is_image_filename,
)


def _touch(directory, *names):
    for name in names:
        (directory / name).write_bytes(b"img")


# =============================================================================
# Filename Filter Tests
# =============================================================================

class TestIsImageFilename:
    """Tests for the extension allow-list check."""

    @pytest.mark.parametrize("name", [
        "award.png", "photo.jpg", "photo.jpeg", "badge.webp",
        "spinner.gif", "logo.svg", "SHOUTY.PNG", "Mixed.JpEg",
    ])
    def test_accepts_image_extensions(self, name):
        assert is_image_filename(name, (".png", ".jpg", ".jpeg", ".webp", ".gif", ".svg"))

    @pytest.mark.parametrize("name", [
        "notes.txt", "archive.png.zip", "png", ".DS_Store", "image.bmp", "award.png ",
    ])
    def test_rejects_everything_else(self, name):
        assert not is_image_filename(name, (".png", ".jpg", ".jpeg", ".webp", ".gif", ".svg"))

    def test_custom_allow_list(self):
        assert is_image_filename("scan.tiff", (".tiff",))
        assert not is_image_filename("award.png", (".tiff",))


# =============================================================================
# Filesystem Listing Tests
# =============================================================================

class TestAchievementService:
    """Tests for the filesystem-backed lister."""

    def test_lists_only_images(self, achievements_dir, achievement_service):
        """Only allow-listed files come back, mapped to public paths."""
        _touch(achievements_dir, "award.png", "cert.JPG", "readme.md", "data.json")

        images = achievement_service.list_images()

        assert images == ["/achievements/award.png", "/achievements/cert.JPG"]

    def test_output_is_sorted_by_filename(self, achievements_dir, achievement_service):
        _touch(achievements_dir, "c.png", "a.webp", "b.svg")

        assert achievement_service.list_images() == [
            "/achievements/a.webp",
            "/achievements/b.svg",
            "/achievements/c.png",
        ]

    def test_empty_directory(self, achievement_service):
        assert achievement_service.list_images() == []

    def test_missing_directory_returns_empty(self, tmp_path):
        """A nonexistent directory is an empty gallery, not an error."""
        service = AchievementService(tmp_path / "does-not-exist")

        assert service.list_images() == []

    def test_log_names_the_directory(self, achievements_dir, achievement_service, caplog):
        caplog.set_level(logging.DEBUG, logger="core.services.achievement_service")
        _touch(achievements_dir, "a.png")

        achievement_service.list_images()

        assert f"Found 1 achievement images in {achievements_dir}" in caplog.text

    def test_directory_path_is_a_file(self, tmp_path):
        not_a_dir = tmp_path / "achievements"
        not_a_dir.write_text("oops")

        assert AchievementService(not_a_dir).list_images() == []

    def test_subdirectories_are_skipped(self, achievements_dir, achievement_service):
        (achievements_dir / "folder.png").mkdir()
        _touch(achievements_dir, "real.png")

        assert achievement_service.list_images() == ["/achievements/real.png"]

    def test_rereads_directory_every_call(self, achievements_dir, achievement_service):
        """No caching: files added between calls show up."""
        assert achievement_service.list_images() == []

        _touch(achievements_dir, "new.gif")

        assert achievement_service.list_images() == ["/achievements/new.gif"]

    def test_list_entries_carry_filename(self, achievements_dir, achievement_service):
        _touch(achievements_dir, "hackathon.png")

        entries = achievement_service.list_entries()

        assert len(entries) == 1
        assert entries[0].filename == "hackathon.png"
        assert entries[0].public_path == "/achievements/hackathon.png"

    def test_custom_route(self, achievements_dir):
        _touch(achievements_dir, "award.png")
        service = AchievementService(achievements_dir, route="/static/awards/")

        assert service.list_images() == ["/static/awards/award.png"]

    def test_extensions_are_lowercased(self, achievements_dir):
        _touch(achievements_dir, "award.png", "scan.TIFF")
        service = AchievementService(achievements_dir, allowed_extensions=[".TIFF"])

        assert service.list_images() == ["/achievements/scan.TIFF"]


# =============================================================================
# Static Manifest Tests
# =============================================================================

class TestStaticAchievementService:
    """Tests for the manifest-backed lister."""

    def test_lists_manifest(self):
        service = StaticAchievementService(["b.png", "a.jpg"])

        assert service.list_images() == ["/achievements/a.jpg", "/achievements/b.png"]

    def test_manifest_is_filtered(self):
        service = StaticAchievementService(["award.png", "notes.txt"])

        assert service.list_images() == ["/achievements/award.png"]

    def test_empty_manifest(self):
        assert StaticAchievementService([]).list_images() == []

    def test_ignores_filesystem(self, tmp_path, monkeypatch):
        """The manifest is the only source, whatever the working dir holds."""
        (tmp_path / "stray.png").write_bytes(b"img")
        monkeypatch.chdir(tmp_path)

        assert StaticAchievementService(["award.png"]).list_images() == ["/achievements/award.png"]

    def test_has_no_directory(self):
        """The manifest lister is not tied to any location on disk."""
        service = StaticAchievementService(["award.png"])

        assert isinstance(service, BaseAchievementService)
        assert not isinstance(service, AchievementService)
        assert not hasattr(service, "directory")

    def test_log_names_the_manifest(self, caplog):
        caplog.set_level(logging.DEBUG, logger="core.services.achievement_service")

        StaticAchievementService(["a.png", "b.png"]).list_images()

        assert "Found 2 achievement images in static manifest" in caplog.text
