# =============================================================================
# core/services/staging_service.py - Local Upload Staging
# =============================================================================
# Incoming multipart files are written to a local staging directory before
# their bytes are forwarded to Supabase Storage.
#
# Every limit is checked before anything leaves the process:
# - content type must be image/* or video/*
# - at most MAX_FILES_PER_UPLOAD files
# - at most MAX_UPLOAD_SIZE_MB per file (enforced while streaming to disk)
#
# A request that fails validation leaves no staged files behind.
# =============================================================================

import logging
from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4

from fastapi import UploadFile

from app.exceptions import (
    FileTooLargeError,
    InvalidFileTypeError,
    NoFilesProvidedError,
    TooManyFilesError,
)

logger = logging.getLogger(__name__)

# Content type prefixes accepted for media uploads
ALLOWED_TYPE_PREFIXES = ("image/", "video/")

# Bytes read from the upload per iteration while staging
CHUNK_SIZE = 1024 * 1024


def is_allowed_media_type(content_type: str | None) -> bool:
    """Check whether a MIME type is an image or video type."""
    return bool(content_type) and content_type.startswith(ALLOWED_TYPE_PREFIXES)


@dataclass
class StagedFile:
    """A validated upload sitting on local disk."""

    filename: str
    original_name: str
    content_type: str
    size: int
    path: Path

    def read_bytes(self) -> bytes:
        """Read the staged file's contents."""
        return self.path.read_bytes()

    def discard(self) -> None:
        """Delete the staged copy (no-op if already gone)."""
        self.path.unlink(missing_ok=True)


class UploadStager:
    """
    Validates and stages multipart uploads on local disk.

    Example:
        stager = UploadStager(Path("uploads"), max_bytes=10 * 1024 * 1024, max_files=10)
        staged = await stager.stage(files)
        try:
            ...
        finally:
            stager.discard_all(staged)
    """

    def __init__(self, upload_dir: Path, max_bytes: int, max_files: int):
        self.upload_dir = upload_dir
        self.max_bytes = max_bytes
        self.max_files = max_files

    @property
    def max_mb(self) -> int:
        return self.max_bytes // (1024 * 1024)

    def validate(self, files: list[UploadFile] | None) -> list[UploadFile]:
        """
        Check file count and content types without touching disk.

        Raises:
            NoFilesProvidedError: If no files were sent
            TooManyFilesError: If more than max_files were sent
            InvalidFileTypeError: If any file is not an image or video
        """
        if not files:
            raise NoFilesProvidedError()

        if len(files) > self.max_files:
            raise TooManyFilesError(len(files), self.max_files)

        for upload in files:
            if not is_allowed_media_type(upload.content_type):
                logger.info(f"Rejected upload {upload.filename!r} with type {upload.content_type!r}")
                raise InvalidFileTypeError(upload.filename or "", upload.content_type)

        return files

    async def stage(self, files: list[UploadFile] | None) -> list[StagedFile]:
        """
        Validate and write every file to the staging directory.

        Each file gets a generated name: a UUID plus the original extension.

        Returns:
            The staged files, in request order

        Raises:
            NoFilesProvidedError, TooManyFilesError, InvalidFileTypeError:
                From validate()
            FileTooLargeError: If any file exceeds max_bytes
        """
        files = self.validate(files)
        self.upload_dir.mkdir(parents=True, exist_ok=True)

        staged: list[StagedFile] = []
        try:
            for upload in files:
                staged.append(await self._stage_one(upload))
        except BaseException:
            self.discard_all(staged)
            raise

        logger.info(f"Staged {len(staged)} file(s) in {self.upload_dir}")
        return staged

    async def _stage_one(self, upload: UploadFile) -> StagedFile:
        original_name = upload.filename or ""
        filename = f"{uuid4()}{Path(original_name).suffix}"
        path = self.upload_dir / filename

        size = 0
        try:
            with path.open("wb") as out:
                while chunk := await upload.read(CHUNK_SIZE):
                    size += len(chunk)
                    if size > self.max_bytes:
                        raise FileTooLargeError(original_name, self.max_mb)
                    out.write(chunk)
        except BaseException:
            path.unlink(missing_ok=True)
            raise

        return StagedFile(
            filename=filename,
            original_name=original_name,
            content_type=upload.content_type,
            size=size,
            path=path,
        )

    @staticmethod
    def discard_all(staged: list[StagedFile]) -> None:
        """Delete every staged copy that is still on disk."""
        for item in staged:
            item.discard()
