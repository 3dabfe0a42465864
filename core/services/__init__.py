# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .achievement_service import (
    AchievementService,
    BaseAchievementService,
    StaticAchievementService,
    is_image_filename,
)
from .profile_picture_service import (
    BaseProfilePictureService,
    ProfilePictureService,
    StaticProfilePictureService,
    validate_image_upload,
)

__all__ = [
    "AchievementService",
    "BaseAchievementService",
    "StaticAchievementService",
    "is_image_filename",
    "BaseProfilePictureService",
    "ProfilePictureService",
    "StaticProfilePictureService",
    "validate_image_upload",
]
