# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - project.py: Project, related-party and media request/response schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .project import (
    AttachAgentsRequest,
    AttachBrokeragesRequest,
    AttachPartnersRequest,
    AttachResponse,
    ContactInput,
    MediaFileSummary,
    MediaUploadResponse,
    PartnerInput,
    ProjectAggregate,
    ProjectCreate,
    ProjectCreateResponse,
)

__all__ = [
    "AttachAgentsRequest",
    "AttachBrokeragesRequest",
    "AttachPartnersRequest",
    "AttachResponse",
    "ContactInput",
    "MediaFileSummary",
    "MediaUploadResponse",
    "PartnerInput",
    "ProjectAggregate",
    "ProjectCreate",
    "ProjectCreateResponse",
]
