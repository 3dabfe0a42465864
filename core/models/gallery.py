# =============================================================================
# core/models/gallery.py - Achievement Gallery Schemas
# =============================================================================
# These models define the API contract for the achievement gallery:
# - AchievementImage: One image file and the public path it is served under
# - AchievementList: Response body of GET /achievements
#
# Achievement images are placed in the public directory out-of-band.
# The service only reads them; nothing here is ever persisted.
# =============================================================================

from pydantic import BaseModel, Field


def build_public_path(route: str, filename: str) -> str:
    """
    Join a public route prefix and a filename.

    Example:
        build_public_path("/achievements", "award.png") -> "/achievements/award.png"
        build_public_path("/achievements/", "award.png") -> "/achievements/award.png"
    """
    return f"{route.rstrip('/')}/{filename}"


class AchievementImage(BaseModel):
    """
    A single achievement image.

    Identity is the filename; the public path is derived from it.

    Example:
        {
            "filename": "hackathon-2024.png",
            "public_path": "/achievements/hackathon-2024.png"
        }
    """

    filename: str = Field(
        ...,
        min_length=1,
        description="Name of the image file in the achievements directory"
    )

    public_path: str = Field(
        ...,
        description="URL path the image is served under"
    )

    @classmethod
    def from_filename(cls, filename: str, route: str) -> "AchievementImage":
        """Build an entry for `filename` served under `route`."""
        return cls(filename=filename, public_path=build_public_path(route, filename))


class AchievementList(BaseModel):
    """
    Response body for the achievement listing.

    Example:
        {
            "images": ["/achievements/award.png", "/achievements/cert.jpg"]
        }
    """

    images: list[str] = Field(
        default_factory=list,
        description="Public paths of the achievement images"
    )
