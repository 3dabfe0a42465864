# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - achievements.py: Achievement gallery listing
# - profile_picture.py: Profile picture upload and status
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import achievements
from . import profile_picture

__all__ = [
    "health",
    "achievements",
    "profile_picture",
]
