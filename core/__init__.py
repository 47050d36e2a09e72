# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the project business logic:
# - models/: Pydantic schemas for request and response shapes
# - services/: Project aggregation, media upload and upload staging
#
# Services receive their Supabase client from the caller, so they can be
# exercised without FastAPI or a live database.
# =============================================================================
