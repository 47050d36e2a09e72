# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Real Estate Projects API:
# - test_api.py: Endpoint tests through FastAPI's TestClient
# - test_project_service.py: Project aggregator unit tests
# - test_media_service.py: Storage upload and media row tests
# - test_staging_service.py: Upload validation and local staging
# - test_models.py: Pydantic request/response models
# - test_supabase_client.py: Client singleton and startup probe
# - test_config.py: Settings defaults and overrides
#
# Run tests with: poetry run pytest
# =============================================================================
