"""Flow schemas: submission input and flow / resolved-assignment output."""

from datetime import datetime

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from app.application.dtos.flow import (
    CriteriaSelection,
    DestinationUpdate,
    FieldAnswer,
    FlowSubmission,
)
from app.domain.enums import FieldKind


class FieldAnswerRequest(BaseModel):
    """Answer for one survey field, matched by field id."""

    id: str = Field(..., min_length=1)
    answer: str | None = None


class CriteriaSelectionRequest(BaseModel):
    """Selected value for one criteria, matched by category."""

    category: str = Field(..., min_length=1)
    selected_value: str | None = None


class DestinationRequest(BaseModel):
    """Replacement destination (emails and postal code)."""

    email_addresses: list[str] = Field(default_factory=list)
    postal_code: str = ""


class FlowSubmissionRequest(BaseModel):
    """Payload for submitting answers to a flow instance."""

    id: str = Field(..., min_length=1)
    fields: list[FieldAnswerRequest] = Field(default_factory=list)
    criteria: list[CriteriaSelectionRequest] = Field(default_factory=list)
    destination: DestinationRequest | None = None

    def to_submission(self) -> FlowSubmission:
        """Convert to the application DTO. A null answer is stored as empty text."""
        return FlowSubmission(
            id=self.id,
            fields=[FieldAnswer(id=f.id, answer=f.answer or "") for f in self.fields],
            criteria=[
                CriteriaSelection(category=c.category, selected_value=c.selected_value)
                for c in self.criteria
            ],
            destination=(
                DestinationUpdate(
                    email_addresses=list(self.destination.email_addresses),
                    postal_code=self.destination.postal_code,
                )
                if self.destination is not None
                else None
            ),
        )


class FilterResponse(BaseModel):
    """Filter condition on a field or assignment."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    value: str


class FieldResponse(BaseModel):
    """Survey field with its current answer."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    kind: FieldKind
    key: str
    prompt: str
    answer: str
    filter: FilterResponse | None = None


class SurveyResponse(BaseModel):
    """Survey with ordered fields."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: AwareDatetime
    fields: list[FieldResponse]


class AnswerResponse(BaseModel):
    """Choice offered by a criteria."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    label: str
    value: str


class CriteriaResponse(BaseModel):
    """Criteria with its choices and current selection."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    prompt: str
    category: str
    answers: list[AnswerResponse]
    selected_value: str | None = None


class DestinationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email_addresses: list[str]
    postal_code: str


class AssignmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    input_key: str
    output_field: str
    filter: FilterResponse | None = None


class FormResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    file_name: str
    kind: str
    assignments: list[AssignmentResponse]


class FlowResponse(BaseModel):
    """Full flow (template or instance)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None
    thumbnail: str | None
    is_template: bool
    survey: SurveyResponse
    destination: DestinationResponse
    criteria: list[CriteriaResponse]
    forms: list[FormResponse]


class FlowSummaryResponse(BaseModel):
    """Flow list item."""

    id: str
    name: str
    description: str | None
    thumbnail: str | None
    is_template: bool
    created_at: datetime


class ResolvedAssignmentResponse(BaseModel):
    """One value to write into an output document field."""

    model_config = ConfigDict(from_attributes=True)

    form_name: str
    output_field: str
    value: str
