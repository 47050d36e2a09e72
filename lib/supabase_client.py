# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module owns the process-wide Supabase client. One client is created
# lazily on first use and shared by every request; FastAPI routes receive it
# through app.dependencies rather than importing it directly.
#
# It also provides the startup connection probe that reports whether the
# expected tables exist.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   client = SupabaseClient.get_client()
#   client.table("projects").select("*").execute()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST code returned when .single() matches no rows
NO_ROWS_CODE = "PGRST116"


def is_no_rows_error(error: Exception) -> bool:
    """Check whether a PostgREST error means "zero rows matched"."""
    return getattr(error, "code", None) == NO_ROWS_CODE or NO_ROWS_CODE in str(error)


class SupabaseClientError(Exception):
    """
    Error during Supabase client setup.

    Provides actionable error messages:
    "Errors should tell HOW to fix, not just WHAT failed."
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Singleton holder for the Supabase client.

    All methods are class methods for easy access without instantiation.

    Example:
        client = SupabaseClient.get_client()
        status = SupabaseClient.check_connection()
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                ) from e
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client so the next call creates a new one."""
        cls._instance = None

    @classmethod
    def check_connection(cls) -> str:
        """
        Probe the projects table once.

        Returns one of "connected", "missing_tables" or "error". Never raises;
        a failed probe must not stop the server from starting.
        """
        logger.info("Checking Supabase connection...")

        try:
            client = cls.get_client()
            client.table("projects").select("id").limit(1).execute()
        except Exception as e:
            if is_no_rows_error(e) or "does not exist" in str(e):
                logger.warning(
                    "Tables do not exist yet. Create the projects, partners, "
                    "brokerages, agents and media_files tables in the Supabase SQL editor."
                )
                return "missing_tables"
            logger.error(f"Supabase connection error: {e}")
            return "error"

        logger.info("Supabase connected successfully!")
        return "connected"
