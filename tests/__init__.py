# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Portfolio API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_config.py: Settings parsing and validation
# - test_achievement_service.py: Achievement listing
# - test_profile_picture_service.py: Profile picture storage
# - test_api.py: Integration tests for API endpoints
#
# Run tests with: pytest
# =============================================================================
