# =============================================================================
# app/routers/profile_picture.py - Profile Picture Endpoints
# =============================================================================
# Handles the single site profile picture: upload (overwrite) and status.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, File, UploadFile
from starlette.datastructures import UploadFile as StarletteUploadFile

from app.dependencies import ProfilePictureServiceDep
from app.exceptions import MissingFileError
from core.models import ProfilePictureStatus, ProfilePictureUploadResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/profile-picture", response_model=ProfilePictureUploadResponse)
async def upload_profile_picture(
    service: ProfilePictureServiceDep,
    file: Annotated[UploadFile | str | None, File(description="Image file to upload")] = None,
):
    """
    Upload the profile picture.

    This endpoint:
    1. Checks a file was sent
    2. Validates the content type (image/*) and size (5MB by default)
    3. Writes it to the fixed profile picture path, replacing any previous one

    Returns the public path of the stored picture.
    """
    # A plain text form field named "file" carries no upload
    if not isinstance(file, StarletteUploadFile):
        raise MissingFileError()

    content = await file.read()
    logger.info(
        f"Processing profile picture upload: {file.filename} "
        f"({len(content)} bytes, {file.content_type})"
    )

    url = service.store(content, file.content_type)
    return ProfilePictureUploadResponse(url=url)


@router.get(
    "/profile-picture",
    response_model=ProfilePictureStatus,
    response_model_exclude_none=True,
)
async def get_profile_picture_status(service: ProfilePictureServiceDep):
    """
    Report whether a profile picture is stored.

    Includes the public path when it is.
    """
    return service.status()
