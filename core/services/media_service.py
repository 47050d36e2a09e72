# =============================================================================
# core/services/media_service.py - Media Uploads to Supabase Storage
# =============================================================================
# Forwards staged files to the media bucket and records one media_files row
# per file.
#
# Files are processed one at a time, in order. The first failure stops the
# loop; files already uploaded and recorded stay in place. The raised error
# lists the ids of those committed rows so callers can see the partial result.
# =============================================================================

import logging
from typing import Any

from supabase import Client

from app.exceptions import PersistenceError, StorageUploadError
from core.services.project_service import MEDIA_FILES_TABLE
from core.services.staging_service import StagedFile
from lib.utils import new_id, utc_now_iso

logger = logging.getLogger(__name__)


class MediaService:
    """
    Service for project media uploads.

    Handles storage upload, public URL lookup and the media_files insert.
    """

    def __init__(self, client: Client, bucket: str):
        self.client = client
        self.bucket = bucket

    def upload_media(
        self,
        project_id: str,
        files: list[StagedFile],
    ) -> list[dict[str, Any]]:
        """
        Upload staged files for a project.

        For each file: read the staged bytes, upload them under
        `{project_id}/{filename}`, look up the public URL, insert the
        media_files row, then delete the staged copy.

        Args:
            project_id: Project UUID (not checked for existence)
            files: Staged files, in request order

        Returns:
            One summary dict per file:
            {"id", "filename", "original_name", "type", "size", "url"}

        Raises:
            StorageUploadError: If a storage upload or URL lookup fails
            PersistenceError: If a media_files insert is rejected
        """
        uploaded: list[dict[str, Any]] = []

        for staged in files:
            try:
                uploaded.append(self._upload_one(project_id, staged))
            except (StorageUploadError, PersistenceError) as e:
                e.details["committed_ids"] = [item["id"] for item in uploaded]
                raise

        logger.info(f"Uploaded {len(uploaded)} media file(s) for project {project_id}")
        return uploaded

    def _upload_one(self, project_id: str, staged: StagedFile) -> dict[str, Any]:
        storage_key = f"{project_id}/{staged.filename}"
        bucket = self.client.storage.from_(self.bucket)

        try:
            bucket.upload(
                path=storage_key,
                file=staged.read_bytes(),
                file_options={"content-type": staged.content_type, "upsert": "false"},
            )
        except Exception as e:
            logger.error(f"Storage upload error for {storage_key}: {e}")
            raise StorageUploadError(str(e), {"path": storage_key}) from e

        try:
            public_url = bucket.get_public_url(storage_key)
        except Exception as e:
            logger.error(f"Failed to get public URL for {storage_key}: {e}")
            raise StorageUploadError(str(e), {"path": storage_key}) from e

        row = {
            "id": new_id(),
            "project_id": project_id,
            "filename": staged.filename,
            "original_name": staged.original_name,
            "file_type": staged.content_type,
            "file_size": staged.size,
            "file_path": storage_key,
            "file_url": public_url,
            "created_at": utc_now_iso(),
        }

        try:
            self.client.table(MEDIA_FILES_TABLE).insert([row]).execute()
        except Exception as e:
            logger.error(f"Error saving media file row for {storage_key}: {e}")
            raise PersistenceError(
                "insert_media_file", str(e), {"project_id": project_id, "path": storage_key}
            ) from e

        staged.discard()
        logger.info(f"Uploaded media file to storage: {storage_key}")

        return {
            "id": row["id"],
            "filename": staged.filename,
            "original_name": staged.original_name,
            "type": staged.content_type,
            "size": staged.size,
            "url": public_url,
        }
