# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error response has the shape:
#   {"error": "<message>", "code": "<CODE>", "suggestion": ..., "details": ...}
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ProjectsApiException(Exception):
    """
    Base exception for the projects API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "PROJECTS_API_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "error": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Input Validation Exceptions (400)
# =============================================================================

class InputValidationError(ProjectsApiException):
    """Raised when request input is missing or malformed."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=message,
            code=code,
            status_code=400,
            suggestion=suggestion,
            details=details,
        )


class NoFilesProvidedError(InputValidationError):
    """Raised when a media upload carries no files."""

    def __init__(self):
        super().__init__(
            message="No files uploaded",
            code="NO_FILES_PROVIDED",
            suggestion="Send one or more files in the multipart field 'files'",
        )


class InvalidFileTypeError(InputValidationError):
    """Raised when an uploaded file is not an image or video."""

    def __init__(self, filename: str, content_type: str | None):
        super().__init__(
            message="Only image and video files are allowed!",
            code="INVALID_FILE_TYPE",
            suggestion="Upload files with an image/* or video/* content type",
            details={"filename": filename, "content_type": content_type},
        )


class FileTooLargeError(InputValidationError):
    """Raised when an uploaded file exceeds the size limit."""

    def __init__(self, filename: str, max_mb: int):
        super().__init__(
            message="File too large",
            code="FILE_TOO_LARGE",
            suggestion=f"Upload files smaller than {max_mb}MB",
            details={"filename": filename, "max_mb": max_mb},
        )


class TooManyFilesError(InputValidationError):
    """Raised when a media upload carries more files than allowed."""

    def __init__(self, count: int, max_files: int):
        super().__init__(
            message=f"Too many files: {count} (max: {max_files})",
            code="TOO_MANY_FILES",
            suggestion=f"Upload at most {max_files} files per request",
            details={"count": count, "max_files": max_files},
        )


# =============================================================================
# Project Exceptions
# =============================================================================

class ProjectNotFoundError(ProjectsApiException):
    """Raised when a project ID doesn't exist."""

    def __init__(self, project_id: str):
        super().__init__(
            message="Project not found",
            code="PROJECT_NOT_FOUND",
            status_code=404,
            suggestion="Check that the project_id is correct",
            details={"project_id": project_id},
        )


# =============================================================================
# External Service Exceptions (500)
# =============================================================================

class PersistenceError(ProjectsApiException):
    """Raised when a database read or write is rejected."""

    def __init__(self, operation: str, error: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=error,
            code="PERSISTENCE_ERROR",
            status_code=500,
            suggestion="Check that the Supabase tables exist and the service key is valid",
            details={"operation": operation, **(details or {})},
        )


class StorageUploadError(ProjectsApiException):
    """Raised when a file upload to storage (or its public URL lookup) fails."""

    def __init__(self, error: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=error,
            code="STORAGE_UPLOAD_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details=details,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def projects_api_exception_handler(
    request: Request,
    exc: ProjectsApiException
) -> JSONResponse:
    """
    Convert ProjectsApiException to JSON response.

    Returns structured error with:
    - error: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body/path validation errors.

    Malformed input is a client fault, reported as 400.
    """
    return JSONResponse(
        status_code=400,
        content={
            "error": "Validation error",
            "code": "VALIDATION_ERROR",
            "details": {"errors": str(exc.errors())},
        }
    )
