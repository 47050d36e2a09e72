# =============================================================================
# core/services/project_service.py - Project Business Logic
# =============================================================================
# Handles project creation, listing, the batch attach operations for related
# parties (partners, brokerages, agents) and the aggregate project read.
#
# Multi-row inserts are a single Supabase call but are not wrapped in a
# transaction; a rejected batch surfaces as PersistenceError with whatever
# the database already committed left in place.
# =============================================================================

import logging
from typing import Any

from supabase import Client

from app.exceptions import PersistenceError, ProjectNotFoundError
from core.models.project import ContactInput, PartnerInput
from lib.supabase_client import is_no_rows_error
from lib.utils import new_id, utc_now_iso

logger = logging.getLogger(__name__)

# Table names
PROJECTS_TABLE = "projects"
PARTNERS_TABLE = "partners"
BROKERAGES_TABLE = "brokerages"
AGENTS_TABLE = "agents"
MEDIA_FILES_TABLE = "media_files"


class ProjectService:
    """
    Service for project operations.

    Provides a clean interface between API routes and database.
    The Supabase client is injected so a single process-wide client can be
    shared across requests.
    """

    def __init__(self, client: Client):
        self.client = client

    # -------------------------------------------------------------------------
    # Projects
    # -------------------------------------------------------------------------

    def create_project(self, name: str) -> dict[str, Any]:
        """
        Create a new project.

        Args:
            name: Project display name

        Returns:
            The stored project row (id, name, created_at, updated_at)

        Raises:
            PersistenceError: If the insert is rejected or returns no row
        """
        now = utc_now_iso()
        data = {
            "id": new_id(),
            "name": name,
            "created_at": now,
            "updated_at": now,
        }

        try:
            response = (
                self.client.table(PROJECTS_TABLE)
                .insert([data])
                .execute()
            )
        except Exception as e:
            logger.error(f"Error creating project: {e}")
            raise PersistenceError("create_project", str(e)) from e

        if not response.data:
            raise PersistenceError("create_project", "Insert returned no data")

        project = response.data[0]
        logger.info(f"Created project: {project['id']}")
        return project

    def list_projects(self) -> list[dict[str, Any]]:
        """
        List every project, newest first.

        Returns:
            Project rows ordered by created_at descending (empty list if none)

        Raises:
            PersistenceError: If the query fails
        """
        try:
            response = (
                self.client.table(PROJECTS_TABLE)
                .select("*")
                .order("created_at", desc=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error fetching projects: {e}")
            raise PersistenceError("list_projects", str(e)) from e

        return response.data or []

    def get_project(self, project_id: str) -> dict[str, Any]:
        """
        Get a single project row.

        Raises:
            ProjectNotFoundError: If no project has this id
            PersistenceError: If the query fails for any other reason
        """
        try:
            response = (
                self.client.table(PROJECTS_TABLE)
                .select("*")
                .eq("id", project_id)
                .single()
                .execute()
            )
        except Exception as e:
            if is_no_rows_error(e):
                raise ProjectNotFoundError(project_id) from e
            logger.error(f"Error fetching project {project_id}: {e}")
            raise PersistenceError("get_project", str(e), {"project_id": project_id}) from e

        if not response.data:
            raise ProjectNotFoundError(project_id)

        return response.data

    def get_project_aggregate(self, project_id: str) -> dict[str, Any]:
        """
        Read a project together with all of its child collections.

        The child reads are independent queries; no snapshot is taken across
        them, so a concurrent write may show up in one list and not another.

        Returns:
            {"project", "partners", "brokerages", "agents", "media_files"}

        Raises:
            ProjectNotFoundError: If the project doesn't exist
            PersistenceError: If any read fails
        """
        project = self.get_project(project_id)

        return {
            "project": project,
            "partners": self._fetch_children(PARTNERS_TABLE, project_id),
            "brokerages": self._fetch_children(BROKERAGES_TABLE, project_id),
            "agents": self._fetch_children(AGENTS_TABLE, project_id),
            "media_files": self._fetch_children(MEDIA_FILES_TABLE, project_id),
        }

    def _fetch_children(self, table: str, project_id: str) -> list[dict[str, Any]]:
        try:
            response = (
                self.client.table(table)
                .select("*")
                .eq("project_id", project_id)
                .order("created_at")
                .execute()
            )
        except Exception as e:
            logger.error(f"Error fetching {table} for project {project_id}: {e}")
            raise PersistenceError(f"fetch_{table}", str(e), {"project_id": project_id}) from e

        return response.data or []

    # -------------------------------------------------------------------------
    # Related Parties
    # -------------------------------------------------------------------------

    def attach_partners(
        self,
        project_id: str,
        partners: list[PartnerInput],
        project_name: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Batch insert partners for a project.

        Returns:
            The inserted rows (empty list, without a database call, if
            `partners` is empty)

        Raises:
            PersistenceError: If the batch insert is rejected
        """
        rows = [
            {**self._contact_row(project_id, project_name, partner), "type": partner.type}
            for partner in partners
        ]
        return self._insert_batch(PARTNERS_TABLE, project_id, rows)

    def attach_brokerages(
        self,
        project_id: str,
        brokerages: list[ContactInput],
        project_name: str | None = None,
    ) -> list[dict[str, Any]]:
        """Batch insert brokerages for a project. Same contract as attach_partners."""
        rows = [self._contact_row(project_id, project_name, b) for b in brokerages]
        return self._insert_batch(BROKERAGES_TABLE, project_id, rows)

    def attach_agents(
        self,
        project_id: str,
        agents: list[ContactInput],
        project_name: str | None = None,
    ) -> list[dict[str, Any]]:
        """Batch insert agents for a project. Same contract as attach_partners."""
        rows = [self._contact_row(project_id, project_name, a) for a in agents]
        return self._insert_batch(AGENTS_TABLE, project_id, rows)

    @staticmethod
    def _contact_row(
        project_id: str,
        project_name: str | None,
        contact: ContactInput,
    ) -> dict[str, Any]:
        # Empty optional strings are stored as NULL
        return {
            "id": new_id(),
            "project_id": project_id,
            "project_name": project_name or None,
            "name": contact.name,
            "contact_number": contact.contact_number or None,
            "email": contact.email or None,
            "created_at": utc_now_iso(),
        }

    def _insert_batch(
        self,
        table: str,
        project_id: str,
        rows: list[dict[str, Any]],
    ) -> list[dict[str, Any]]:
        if not rows:
            logger.info(f"No {table} to attach for project {project_id}")
            return []

        logger.debug(f"Inserting {len(rows)} row(s) into {table} for project {project_id}")

        try:
            response = (
                self.client.table(table)
                .insert(rows)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error saving {table}: {e}")
            raise PersistenceError(
                f"attach_{table}", str(e), {"project_id": project_id, "rows": len(rows)}
            ) from e

        inserted = response.data or []
        logger.info(f"Attached {len(inserted)} {table} to project {project_id}")
        return inserted
