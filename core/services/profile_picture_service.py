# =============================================================================
# core/services/profile_picture_service.py - Profile Picture Storage
# =============================================================================
# Stores the single site profile picture at a fixed path.
#
# Uploads are validated before anything touches the disk. A valid upload is
# written to a temporary sibling and renamed over the fixed path, so readers
# see either the old picture or the new one. Concurrent uploads are not
# coordinated: the last rename wins.
# =============================================================================

import logging
import os
import tempfile
from pathlib import Path

from app.exceptions import (
    ImageTooLargeError,
    InvalidImageTypeError,
    ProfilePictureWriteError,
    ReadOnlyStorageError,
)
from core.models.profile_picture import ProfilePictureStatus

logger = logging.getLogger(__name__)

IMAGE_CONTENT_TYPE_PREFIX = "image/"
DEFAULT_MAX_SIZE_BYTES = 5 * 1024 * 1024


def validate_image_upload(
    content_type: str | None,
    size_bytes: int,
    max_size_bytes: int = DEFAULT_MAX_SIZE_BYTES,
) -> None:
    """
    Check an upload's declared type and size.

    Media types are compared without regard to case, so "Image/PNG" passes.

    Args:
        content_type: Content type declared by the client
        size_bytes: Size of the uploaded content
        max_size_bytes: Inclusive size ceiling

    Raises:
        InvalidImageTypeError: If the content type is not image/*
        ImageTooLargeError: If the content is larger than the ceiling
    """
    if not content_type or not content_type.lower().startswith(IMAGE_CONTENT_TYPE_PREFIX):
        raise InvalidImageTypeError(content_type)

    if size_bytes > max_size_bytes:
        raise ImageTooLargeError(size_bytes, max_size_bytes // (1024 * 1024))


class BaseProfilePictureService:
    """
    Shared behaviour of the profile picture backends.

    Subclasses decide where the picture lives by implementing `store`
    and `exists`.
    """

    def __init__(self, public_url: str, max_size_bytes: int = DEFAULT_MAX_SIZE_BYTES):
        self.public_url = public_url
        self.max_size_bytes = max_size_bytes

    def ensure_directory(self) -> None:
        pass

    def store(self, content: bytes, content_type: str | None) -> str:
        raise NotImplementedError

    def exists(self) -> bool:
        raise NotImplementedError

    def status(self) -> ProfilePictureStatus:
        if self.exists():
            return ProfilePictureStatus(exists=True, url=self.public_url)
        return ProfilePictureStatus(exists=False)


class ProfilePictureService(BaseProfilePictureService):
    """
    Filesystem-backed profile picture store.

    The presence of the file at `path` is the only state.
    """

    def __init__(
        self,
        path: Path,
        public_url: str,
        max_size_bytes: int = DEFAULT_MAX_SIZE_BYTES,
    ):
        super().__init__(public_url, max_size_bytes=max_size_bytes)
        self.path = Path(path)

    def ensure_directory(self) -> None:
        """Create the picture's parent directory if it does not exist."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def store(self, content: bytes, content_type: str | None) -> str:
        """
        Validate and store a new profile picture, replacing the old one.

        Args:
            content: Raw image bytes
            content_type: Content type declared by the client

        Returns:
            Public path of the stored picture

        Raises:
            InvalidImageTypeError: If the content type is not image/*
            ImageTooLargeError: If the content exceeds the size limit
            ProfilePictureWriteError: If the file cannot be written
        """
        validate_image_upload(content_type, len(content), self.max_size_bytes)

        tmp_name = None
        try:
            self.ensure_directory()
            with tempfile.NamedTemporaryFile(
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error(f"Profile picture write failed: {e}")
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise ProfilePictureWriteError(str(e))

        logger.info(f"Stored profile picture at {self.path} ({len(content)} bytes, {content_type})")
        return self.public_url

    def exists(self) -> bool:
        """Check whether a profile picture is stored. Never reads its content."""
        try:
            return self.path.is_file()
        except OSError as e:
            logger.warning(f"Cannot check profile picture at {self.path}: {e}")
            return False


class StaticProfilePictureService(BaseProfilePictureService):
    """
    Read-only profile picture for hosts without writable storage.

    The picture is whatever the configured URL points at; an empty URL
    means there is none. Uploads are validated as usual and then refused.
    """

    def store(self, content: bytes, content_type: str | None) -> str:
        validate_image_upload(content_type, len(content), self.max_size_bytes)
        logger.warning("Rejected profile picture upload: static storage backend is read-only")
        raise ReadOnlyStorageError()

    def exists(self) -> bool:
        return bool(self.public_url)
