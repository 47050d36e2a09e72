# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the request/response models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Response models serialize with the public (camelCase) keys
#
# Run with: poetry run pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import (
    AttachAgentsRequest,
    AttachPartnersRequest,
    ContactInput,
    MediaFileSummary,
    PartnerInput,
    ProjectAggregate,
    ProjectCreate,
    ProjectCreateResponse,
)


class TestRequestModels:
    """Tests for request bodies."""

    def test_project_create_requires_name(self):
        with pytest.raises(ValidationError):
            ProjectCreate()

    def test_contact_defaults(self):
        """Test optional contact fields default to None."""
        contact = ContactInput(name="Metro Homes")

        assert contact.contact_number is None
        assert contact.email is None

    def test_partner_type(self):
        partner = PartnerInput(name="Acme", type="investor")

        assert partner.type == "investor"

    def test_attach_request_reads_project_name_alias(self):
        """Test projectName is read from the camelCase key."""
        request = AttachPartnersRequest.model_validate({
            "partners": [{"name": "Acme", "type": "investor"}],
            "projectName": "Palm Heights",
        })

        assert request.project_name == "Palm Heights"
        assert request.partners[0].name == "Acme"

    def test_attach_request_requires_list(self):
        with pytest.raises(ValidationError):
            AttachAgentsRequest.model_validate({"projectName": "Palm Heights"})

    def test_attach_request_rejects_nameless_entry(self):
        with pytest.raises(ValidationError):
            AttachAgentsRequest.model_validate({"agents": [{"email": "x@example.com"}]})


class TestResponseModels:
    """Tests for response serialization."""

    def test_project_create_response_keys(self):
        response = ProjectCreateResponse(project_id="p-1", data={"id": "p-1"})

        dumped = response.model_dump(by_alias=True)

        assert dumped == {
            "success": True,
            "projectId": "p-1",
            "data": {"id": "p-1"},
            "message": "Project created successfully",
        }

    def test_media_summary_keys(self):
        summary = MediaFileSummary(
            id="m-1",
            filename="abc.jpg",
            original_name="front.jpg",
            type="image/jpeg",
            size=10,
            url="https://example.com/abc.jpg",
        )

        assert summary.model_dump(by_alias=True)["originalName"] == "front.jpg"

    def test_aggregate_defaults_and_keys(self):
        """Test missing collections default to empty lists."""
        aggregate = ProjectAggregate(project={"id": "p-1"})

        dumped = aggregate.model_dump(by_alias=True)

        assert dumped["mediaFiles"] == []
        assert dumped["partners"] == []
        assert dumped["brokerages"] == []
        assert dumped["agents"] == []
