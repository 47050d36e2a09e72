# =============================================================================
# app/routers/media.py - Media Upload Endpoint
# =============================================================================
# Multipart media upload for a project:
#   1. Validate and stage the files locally (type, count, size)
#   2. Forward each file to Supabase Storage and record it
#   3. Remove any staged copies left behind
# =============================================================================

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, File, Path, UploadFile

from app.dependencies import MediaServiceDep, UploadStagerDep
from core.models.project import MediaFileSummary, MediaUploadResponse
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{project_id}/media", response_model=MediaUploadResponse)
async def upload_media(
    project_id: Annotated[UUID, Path(description="Project UUID")],
    stager: UploadStagerDep,
    media_service: MediaServiceDep,
    files: Annotated[
        list[UploadFile] | None,
        File(description="Image or video files (field name: files)"),
    ] = None,
):
    """
    Upload media files to a project.

    Accepts up to 10 image/video files of at most 10MB each. Nothing is
    written to storage unless every file passes validation.

    Files are uploaded in order; if one fails, the ones before it stay
    uploaded and the error details list their ids.
    """
    project_id_str = normalize_uuid(project_id)

    staged = await stager.stage(files)
    logger.info(f"Processing {len(staged)} media upload(s) for project {project_id_str}")

    try:
        uploaded = media_service.upload_media(project_id_str, staged)
    finally:
        stager.discard_all(staged)

    return MediaUploadResponse(
        files=[MediaFileSummary(**item) for item in uploaded],
    )
