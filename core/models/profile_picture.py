# =============================================================================
# core/models/profile_picture.py - Profile Picture Schemas
# =============================================================================
# These models define the API contract for the profile picture:
# - ProfilePictureStatus: Whether a picture is stored, and where
# - ProfilePictureUploadResponse: Result of a successful upload
#
# There is only ever one profile picture. It lives at a fixed path and a new
# upload replaces it.
# =============================================================================

from pydantic import BaseModel, Field


class ProfilePictureStatus(BaseModel):
    """
    Presence of the profile picture.

    `url` is only set when `exists` is true; the route drops it from the
    response body otherwise.

    Example:
        {"exists": true, "url": "/profile/avatar.jpg"}
        {"exists": false}
    """

    exists: bool = Field(
        ...,
        description="Whether a profile picture is currently stored"
    )

    url: str | None = Field(
        default=None,
        description="Public path of the stored picture"
    )


class ProfilePictureUploadResponse(BaseModel):
    """
    Returned after a profile picture has been stored.

    Example:
        {
            "success": true,
            "url": "/profile/avatar.jpg",
            "message": "Profile picture uploaded successfully"
        }
    """

    success: bool = True

    url: str = Field(
        ...,
        description="Public path of the stored picture"
    )

    message: str = "Profile picture uploaded successfully"
