# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for the storage services.
# These are injected into route handlers using Depends(), which lets tests
# swap them through app.dependency_overrides.
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_settings
from core.services import (
    AchievementService,
    BaseAchievementService,
    BaseProfilePictureService,
    ProfilePictureService,
    StaticAchievementService,
    StaticProfilePictureService,
)


def build_achievement_service(settings: Settings) -> BaseAchievementService:
    """Build the achievement lister for the configured storage backend."""
    if settings.STORAGE_BACKEND == "static":
        return StaticAchievementService(
            settings.static_achievements_list,
            route=settings.ACHIEVEMENTS_ROUTE,
            allowed_extensions=settings.allowed_extensions_list,
        )
    return AchievementService(
        settings.achievements_dir,
        route=settings.ACHIEVEMENTS_ROUTE,
        allowed_extensions=settings.allowed_extensions_list,
    )


def build_profile_picture_service(settings: Settings) -> BaseProfilePictureService:
    """Build the profile picture store for the configured storage backend."""
    if settings.STORAGE_BACKEND == "static":
        return StaticProfilePictureService(
            settings.STATIC_PROFILE_PICTURE_URL,
            max_size_bytes=settings.max_profile_picture_size_bytes,
        )
    return ProfilePictureService(
        settings.profile_picture_path,
        public_url=settings.profile_picture_url,
        max_size_bytes=settings.max_profile_picture_size_bytes,
    )


def get_achievement_service() -> BaseAchievementService:
    return build_achievement_service(get_settings())


def get_profile_picture_service() -> BaseProfilePictureService:
    return build_profile_picture_service(get_settings())


# Type aliases for dependency injection
AchievementServiceDep = Annotated[BaseAchievementService, Depends(get_achievement_service)]
ProfilePictureServiceDep = Annotated[BaseProfilePictureService, Depends(get_profile_picture_service)]
