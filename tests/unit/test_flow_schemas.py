"""Tests for flow request/response schemas."""

import pytest
from pydantic import ValidationError

from app.application.dtos.flow import ResolvedAssignment
from app.application.services.template_instantiator import clone_template
from app.schemas.flow import (
    FlowResponse,
    FlowSubmissionRequest,
    ResolvedAssignmentResponse,
)


class TestFlowSubmissionRequest:
    def test_to_submission(self) -> None:
        request = FlowSubmissionRequest.model_validate(
            {
                "id": "flow1",
                "fields": [{"id": "f1", "answer": "Jane"}, {"id": "f2", "answer": None}],
                "criteria": [{"category": "6a", "selected_value": None}],
                "destination": {"email_addresses": ["a@example.com"], "postal_code": "12345"},
            }
        )
        submission = request.to_submission()
        assert submission.id == "flow1"
        assert [(f.id, f.answer) for f in submission.fields] == [("f1", "Jane"), ("f2", "")]
        assert submission.criteria[0].selected_value is None
        assert submission.destination.email_addresses == ["a@example.com"]
        assert submission.destination.postal_code == "12345"

    def test_destination_optional(self) -> None:
        submission = FlowSubmissionRequest(id="flow1").to_submission()
        assert submission.destination is None
        assert submission.fields == []

    def test_id_required(self) -> None:
        with pytest.raises(ValidationError):
            FlowSubmissionRequest.model_validate({"fields": []})


class TestResponses:
    def test_flow_response_from_entity(self, taxes_template) -> None:
        flow = clone_template(taxes_template)
        data = FlowResponse.model_validate(flow).model_dump(mode="json")
        assert data["id"] == flow.id
        assert data["is_template"] is False
        assert data["survey"]["fields"][0]["kind"] == "string"
        barter = next(f for f in data["survey"]["fields"] if f["key"] == "barter")
        assert barter["filter"] == {"name": "6a", "value": "yes"}
        assert data["criteria"][0]["selected_value"] is None

    def test_resolved_assignment_response(self) -> None:
        data = ResolvedAssignmentResponse.model_validate(
            ResolvedAssignment(form_name="f1098c", output_field="x", value="Jane")
        ).model_dump()
        assert data == {"form_name": "f1098c", "output_field": "x", "value": "Jane"}
