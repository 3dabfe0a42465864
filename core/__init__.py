# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the logic behind the API:
# - models/: Pydantic schemas for request/response bodies
# - services/: Achievement listing and profile picture storage
#
# Routes stay thin and delegate to the services here.
# =============================================================================
