# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - An in-memory stand-in for the parts of the Supabase client the services
#   use (table query builder + storage buckets), with failure injection
# - A TestClient with the Supabase client and upload stager overridden
# =============================================================================

import copy
import os
from types import SimpleNamespace
from typing import Any

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_supabase_client, get_upload_stager
from app.main import app
from core.services.staging_service import UploadStager
from lib.supabase_client import SupabaseClient

PUBLIC_URL_BASE = "https://test-project.supabase.co/storage/v1/object/public"


# =============================================================================
# Fake Supabase Client
# =============================================================================

class FakeAPIError(Exception):
    """Mimics postgrest's APIError: carries a PostgREST error code."""

    def __init__(self, message: str, code: str = "P0001"):
        super().__init__(message)
        self.message = message
        self.code = code


class FakeQuery:
    """Chainable query builder over one in-memory table."""

    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self._insert_rows: list[dict[str, Any]] | None = None
        self._filters: list[tuple[str, Any]] = []
        self._order: tuple[str, bool] | None = None
        self._limit: int | None = None
        self._single = False

    def select(self, *columns, **kwargs):
        return self

    def insert(self, rows):
        self._insert_rows = rows if isinstance(rows, list) else [rows]
        return self

    def eq(self, column, value):
        self._filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self._order = (column, desc)
        return self

    def limit(self, count):
        self._limit = count
        return self

    def single(self):
        self._single = True
        return self

    def execute(self):
        self.db.calls.append((self.table, "insert" if self._insert_rows is not None else "select"))

        if self.table in self.db.failures:
            raise FakeAPIError(self.db.failures[self.table])

        rows = self.db.tables.setdefault(self.table, [])

        if self._insert_rows is not None:
            inserted = copy.deepcopy(self._insert_rows)
            rows.extend(inserted)
            return SimpleNamespace(data=copy.deepcopy(inserted), count=None)

        matched = [
            (seq, row) for seq, row in enumerate(rows)
            if all(row.get(column) == value for column, value in self._filters)
        ]
        if self._order:
            column, desc = self._order
            matched.sort(key=lambda item: (item[1].get(column) or "", item[0]), reverse=desc)
        data = [copy.deepcopy(row) for _, row in matched]
        if self._limit is not None:
            data = data[: self._limit]

        if self._single:
            if len(data) != 1:
                raise FakeAPIError(
                    "JSON object requested, multiple (or no) rows returned", code="PGRST116"
                )
            return SimpleNamespace(data=data[0], count=None)

        return SimpleNamespace(data=data, count=len(data))


class FakeBucket:
    """One storage bucket."""

    def __init__(self, storage: "FakeStorage", name: str):
        self.storage = storage
        self.name = name

    def upload(self, path, file, file_options=None):
        if self.storage.fail_upload_after is not None:
            if len(self.storage.objects) >= self.storage.fail_upload_after:
                raise FakeAPIError("Storage upload failed")
        key = (self.name, path)
        if key in self.storage.objects:
            raise FakeAPIError("The resource already exists", code="409")
        self.storage.objects[key] = {"bytes": file, "options": file_options or {}}
        return SimpleNamespace(path=path, full_path=f"{self.name}/{path}")

    def get_public_url(self, path):
        if self.storage.fail_public_url:
            raise FakeAPIError("Public URL lookup failed")
        return f"{PUBLIC_URL_BASE}/{self.name}/{path}"


class FakeStorage:
    def __init__(self):
        self.objects: dict[tuple[str, str], dict[str, Any]] = {}
        self.fail_upload_after: int | None = None
        self.fail_public_url = False

    def from_(self, bucket):
        return FakeBucket(self, bucket)

    def list_buckets(self):
        return [SimpleNamespace(name="media-files")]


class FakeSupabase:
    """
    In-memory replacement for supabase.Client.

    Set `failures[table] = "message"` to make every query on that table fail.
    """

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.failures: dict[str, str] = {}
        self.calls: list[tuple[str, str]] = []
        self.storage = FakeStorage()

    def table(self, name):
        return FakeQuery(self, name)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_supabase():
    """Fresh in-memory Supabase client."""
    return FakeSupabase()


@pytest.fixture
def staging_dir(tmp_path):
    """Empty staging directory for uploads."""
    return tmp_path / "uploads"


@pytest.fixture
def client(fake_supabase, staging_dir):
    """TestClient wired to the fake Supabase client and a temp staging dir."""
    # Readiness reads the singleton directly; routes receive it via Depends
    SupabaseClient._instance = fake_supabase
    app.dependency_overrides[get_supabase_client] = lambda: fake_supabase
    app.dependency_overrides[get_upload_stager] = lambda: UploadStager(
        upload_dir=staging_dir,
        max_bytes=10 * 1024 * 1024,
        max_files=10,
    )

    # Not used as a context manager: the lifespan probe would try to reach Supabase
    yield TestClient(app)

    app.dependency_overrides.clear()
    SupabaseClient.reset()


@pytest.fixture
def sample_partners():
    """Partner payload for attach requests."""
    return [
        {"name": "Acme Capital", "type": "investor", "contact_number": "+1-555-0100", "email": "deals@acme.test"},
        {"name": "Blue Harbor", "type": "investor"},
    ]


@pytest.fixture
def sample_contacts():
    """Brokerage/agent payload for attach requests."""
    return [
        {"name": "Coastline Realty", "contact_number": "+1-555-0142", "email": "hello@coastline.test"},
        {"name": "Metro Homes"},
    ]
