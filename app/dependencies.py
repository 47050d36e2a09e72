# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# Tests replace get_supabase_client (and get_upload_stager) through
# app.dependency_overrides.
# =============================================================================

from typing import Annotated

from fastapi import Depends
from supabase import Client

from app.config import settings
from core.services.media_service import MediaService
from core.services.project_service import ProjectService
from core.services.staging_service import UploadStager
from lib.supabase_client import SupabaseClient


def get_supabase_client() -> Client:
    """
    Get Supabase client instance.

    Returns the process-wide singleton client.
    """
    return SupabaseClient.get_client()


SupabaseDep = Annotated[Client, Depends(get_supabase_client)]


def get_project_service(client: SupabaseDep) -> ProjectService:
    """Project service bound to the shared client."""
    return ProjectService(client)


def get_media_service(client: SupabaseDep) -> MediaService:
    """Media service bound to the shared client and configured bucket."""
    return MediaService(client, settings.MEDIA_BUCKET)


def get_upload_stager() -> UploadStager:
    """Upload stager using the configured directory and limits."""
    return UploadStager(
        upload_dir=settings.upload_path,
        max_bytes=settings.max_upload_size_bytes,
        max_files=settings.MAX_FILES_PER_UPLOAD,
    )


# Type aliases for dependency injection
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
MediaServiceDep = Annotated[MediaService, Depends(get_media_service)]
UploadStagerDep = Annotated[UploadStager, Depends(get_upload_stager)]
