# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - gallery.py: Achievement image entries and the listing response
# - profile_picture.py: Profile picture status and upload response
#
# These models define the "contract" between API and clients.
# =============================================================================

from .gallery import (
    AchievementImage,
    AchievementList,
    build_public_path,
)

from .profile_picture import (
    ProfilePictureStatus,
    ProfilePictureUploadResponse,
)

__all__ = [
    # Gallery
    "AchievementImage",
    "AchievementList",
    "build_public_path",
    # Profile picture
    "ProfilePictureStatus",
    "ProfilePictureUploadResponse",
]
