# =============================================================================
# core/services/achievement_service.py - Achievement Gallery Listing
# =============================================================================
# Lists the achievement images shown in the portfolio gallery.
#
# The listing never fails: a missing or unreadable directory is logged and
# treated as an empty gallery, so the page renders either way.
# =============================================================================

import logging
import os
from pathlib import Path
from typing import Iterable

from core.models.gallery import AchievementImage

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".webp", ".gif", ".svg")


def is_image_filename(filename: str, allowed_extensions: Iterable[str]) -> bool:
    """
    Check a filename against an extension allow-list, ignoring case.

    Args:
        filename: Name of the file (no directory part)
        allowed_extensions: Lower-case suffixes including the dot

    Returns:
        True if the name ends in one of the allowed extensions
    """
    return filename.lower().endswith(tuple(allowed_extensions))


class BaseAchievementService:
    """
    Shared listing pipeline from raw filenames to sorted public paths.

    Subclasses supply the raw filenames and name where they came from.
    """

    source = "unknown source"

    def __init__(
        self,
        route: str = "/achievements",
        allowed_extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS,
    ):
        self.route = route
        self.allowed_extensions = tuple(ext.lower() for ext in allowed_extensions)

    def _read_filenames(self) -> list[str]:
        raise NotImplementedError

    def list_entries(self) -> list[AchievementImage]:
        """
        List achievement images in filename order.

        Returns:
            One AchievementImage per allowed image filename
        """
        filenames = sorted(
            name for name in self._read_filenames()
            if is_image_filename(name, self.allowed_extensions)
        )
        logger.debug(f"Found {len(filenames)} achievement images in {self.source}")
        return [AchievementImage.from_filename(name, self.route) for name in filenames]

    def list_images(self) -> list[str]:
        """List the public paths of all achievement images."""
        return [entry.public_path for entry in self.list_entries()]


class AchievementService(BaseAchievementService):
    """
    Filesystem-backed achievement listing.

    Every call re-reads the directory; nothing is cached.
    """

    def __init__(
        self,
        directory: Path,
        route: str = "/achievements",
        allowed_extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS,
    ):
        super().__init__(route=route, allowed_extensions=allowed_extensions)
        self.directory = Path(directory)

    @property
    def source(self) -> str:
        return str(self.directory)

    def _read_filenames(self) -> list[str]:
        """Return names of regular files in the directory, or [] on any OS error."""
        try:
            with os.scandir(self.directory) as entries:
                return [entry.name for entry in entries if entry.is_file()]
        except OSError as e:
            logger.warning(f"Cannot read achievements directory {self.directory}: {e}")
            return []


class StaticAchievementService(BaseAchievementService):
    """
    Manifest-backed achievement listing for hosts without a readable
    public directory at runtime.

    The manifest goes through the same extension filter and ordering as
    a directory listing.
    """

    source = "static manifest"

    def __init__(
        self,
        filenames: Iterable[str],
        route: str = "/achievements",
        allowed_extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS,
    ):
        super().__init__(route=route, allowed_extensions=allowed_extensions)
        self.filenames = list(filenames)

    def _read_filenames(self) -> list[str]:
        return list(self.filenames)
