# =============================================================================
# core/models/project.py - Project Schemas
# =============================================================================
# These models define the API contract for project operations:
# - ProjectCreate: Input for creating a project
# - PartnerInput / ContactInput: One related party inside an attach request
# - Attach*Request: Batch attach bodies for partners, brokerages and agents
# - ProjectCreateResponse, AttachResponse, MediaUploadResponse: Write results
# - ProjectAggregate: The combined project read
#
# Rows read back from Supabase are passed through as plain dicts; these
# schemas only shape what goes in and what comes out.
# JSON keys follow the public API (camelCase where the API uses it).
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProjectCreate(BaseModel):
    """
    Schema for creating a new project.

    Example:
        {"name": "Palm Heights Phase 2"}
    """

    name: str = Field(
        ...,
        description="Project display name",
        examples=["Palm Heights Phase 2"],
    )


# =============================================================================
# Related Parties
# =============================================================================

class ContactInput(BaseModel):
    """
    A brokerage or agent as submitted by the client.

    Optional fields left out (or sent empty) are stored as NULL.
    """

    name: str = Field(..., description="Contact name")
    contact_number: str | None = Field(default=None, description="Phone number")
    email: str | None = Field(default=None, description="Email address")


class PartnerInput(ContactInput):
    """A partner additionally carries a partner type (e.g. "investor")."""

    type: str | None = Field(default=None, description="Partner type")


class _AttachRequest(BaseModel):
    """Shared body fields of the batch attach endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    project_name: str | None = Field(
        default=None,
        alias="projectName",
        description="Denormalized project name stored on every row",
    )


class AttachPartnersRequest(_AttachRequest):
    """Body of POST /api/projects/{id}/partners."""

    partners: list[PartnerInput]


class AttachBrokeragesRequest(_AttachRequest):
    """Body of POST /api/projects/{id}/brokerages."""

    brokerages: list[ContactInput]


class AttachAgentsRequest(_AttachRequest):
    """Body of POST /api/projects/{id}/agents."""

    agents: list[ContactInput]


# =============================================================================
# Responses
# =============================================================================

class ProjectCreateResponse(BaseModel):
    """
    Response when creating a project.

    Example:
        {
            "success": true,
            "projectId": "550e8400-e29b-41d4-a716-446655440000",
            "data": {"id": "550e8400-...", "name": "Palm Heights", ...},
            "message": "Project created successfully"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    project_id: str = Field(..., alias="projectId")
    data: dict[str, Any]
    message: str = "Project created successfully"


class AttachResponse(BaseModel):
    """Response of the batch attach endpoints."""

    success: bool = True
    data: list[dict[str, Any]] = Field(default_factory=list)
    message: str


class MediaFileSummary(BaseModel):
    """One uploaded file as reported back to the client."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    filename: str
    original_name: str = Field(..., alias="originalName")
    type: str
    size: int
    url: str


class MediaUploadResponse(BaseModel):
    """Response of POST /api/projects/{id}/media."""

    success: bool = True
    message: str = "Media files uploaded successfully"
    files: list[MediaFileSummary] = Field(default_factory=list)


class ProjectAggregate(BaseModel):
    """
    A project together with every child collection.

    Each collection is an empty list when the project has no rows of that kind.
    """

    model_config = ConfigDict(populate_by_name=True)

    project: dict[str, Any]
    partners: list[dict[str, Any]] = Field(default_factory=list)
    brokerages: list[dict[str, Any]] = Field(default_factory=list)
    agents: list[dict[str, Any]] = Field(default_factory=list)
    media_files: list[dict[str, Any]] = Field(default_factory=list, alias="mediaFiles")
