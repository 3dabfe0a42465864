# =============================================================================
# app/routers/achievements.py - Achievement Gallery Endpoints
# =============================================================================
# Lists the achievement images for the portfolio gallery.
# =============================================================================

import logging

from fastapi import APIRouter

from app.dependencies import AchievementServiceDep
from core.models import AchievementList

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/achievements", response_model=AchievementList)
async def list_achievements(service: AchievementServiceDep):
    """
    List achievement images.

    Returns the public paths of every image in the achievements directory,
    sorted by filename. A missing directory gives an empty list, never an error.
    """
    images = service.list_images()
    logger.info(f"Listed {len(images)} achievement images")
    return AchievementList(images=images)
