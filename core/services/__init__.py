# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .project_service import ProjectService
from .media_service import MediaService
from .staging_service import StagedFile, UploadStager

__all__ = [
    "ProjectService",
    "MediaService",
    "StagedFile",
    "UploadStager",
]
