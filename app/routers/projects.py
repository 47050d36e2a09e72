# =============================================================================
# app/routers/projects.py - Project Endpoints
# =============================================================================
# Project creation, listing, the aggregate read and the batch attach
# endpoints for partners, brokerages and agents.
# =============================================================================

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Path

from app.dependencies import ProjectServiceDep
from app.exceptions import ProjectNotFoundError
from core.models.project import (
    AttachAgentsRequest,
    AttachBrokeragesRequest,
    AttachPartnersRequest,
    AttachResponse,
    ProjectAggregate,
    ProjectCreate,
    ProjectCreateResponse,
)
from lib.utils import normalize_uuid

router = APIRouter()

ProjectIdPath = Annotated[UUID, Path(description="Project UUID")]


# =============================================================================
# Projects
# =============================================================================

@router.get("", response_model=list[dict[str, Any]])
async def list_projects(service: ProjectServiceDep):
    """
    List all projects, newest first.
    """
    return service.list_projects()


@router.post("", response_model=ProjectCreateResponse)
async def create_project(request: ProjectCreate, service: ProjectServiceDep):
    """
    Create a new project.

    Returns the generated projectId, used by every other project endpoint.
    """
    project = service.create_project(request.name)

    return ProjectCreateResponse(
        project_id=project["id"],
        data=project,
    )


@router.get("/{project_id}", response_model=ProjectAggregate)
async def get_project(
    project_id: Annotated[str, Path(description="Project UUID")],
    service: ProjectServiceDep,
):
    """
    Get a project with its partners, brokerages, agents and media files.

    Returns 404 if the project doesn't exist, including ids that are not
    UUIDs (projects only ever get generated UUIDs).
    """
    try:
        project_uuid = UUID(project_id)
    except ValueError:
        raise ProjectNotFoundError(project_id)

    aggregate = service.get_project_aggregate(normalize_uuid(project_uuid))
    return ProjectAggregate(**aggregate)


# =============================================================================
# Related Parties
# =============================================================================

@router.post("/{project_id}/partners", response_model=AttachResponse)
async def add_partners(
    project_id: ProjectIdPath,
    request: AttachPartnersRequest,
    service: ProjectServiceDep,
):
    """
    Add partners to a project.

    An empty list is accepted and stores nothing.
    """
    data = service.attach_partners(
        normalize_uuid(project_id),
        request.partners,
        project_name=request.project_name,
    )
    return AttachResponse(data=data, message="Partners added successfully")


@router.post("/{project_id}/brokerages", response_model=AttachResponse)
async def add_brokerages(
    project_id: ProjectIdPath,
    request: AttachBrokeragesRequest,
    service: ProjectServiceDep,
):
    """Add brokerages to a project."""
    data = service.attach_brokerages(
        normalize_uuid(project_id),
        request.brokerages,
        project_name=request.project_name,
    )
    return AttachResponse(data=data, message="Brokerages added successfully")


@router.post("/{project_id}/agents", response_model=AttachResponse)
async def add_agents(
    project_id: ProjectIdPath,
    request: AttachAgentsRequest,
    service: ProjectServiceDep,
):
    """Add agents to a project."""
    data = service.attach_agents(
        normalize_uuid(project_id),
        request.agents,
        project_name=request.project_name,
    )
    return AttachResponse(data=data, message="Agents added successfully")
