"""Flow aggregate: a template or a user instance built from one.

A flow owns exactly one survey (open-ended fields), an ordered set of
criteria (single-select questions), one destination, and an ordered set of
forms whose assignments map answers onto output document fields.

Cross-references between forms, filters, fields and criteria are by string
key (field machine key or criteria category), never by id, so a cloned flow
keeps its logic without any remapping.
"""

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.enums import FieldKind
from app.domain.exceptions import ValidationException
from app.domain.value_objects.core import FilterCondition


@dataclass
class FieldEntity:
    """One survey answer slot, addressed by its machine key."""

    id: str
    kind: FieldKind
    key: str
    prompt: str
    answer: str = ""
    filter: FilterCondition | None = None  # informational; resolved only on assignments


@dataclass
class SurveyEntity:
    """Ordered fields of a flow's survey."""

    id: str
    created_at: datetime
    fields: list[FieldEntity] = field(default_factory=list)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for f in self.fields:
            if f.key in seen:
                raise ValidationException(
                    f"Duplicate field key in survey: {f.key}", field="key"
                )
            seen.add(f.key)

    def field_by_id(self, field_id: str) -> FieldEntity | None:
        """Return the field with the given id, or None."""
        for f in self.fields:
            if f.id == field_id:
                return f
        return None


@dataclass
class AnswerEntity:
    """A label/value choice offered by a criteria."""

    id: str
    label: str
    value: str


@dataclass
class CriteriaEntity:
    """Single-select question keyed by a category unique within its flow."""

    id: str
    prompt: str
    category: str
    answers: list[AnswerEntity] = field(default_factory=list)
    selected_value: str | None = None


@dataclass
class DestinationEntity:
    """Delivery metadata for a flow's generated documents."""

    id: str
    email_addresses: list[str] = field(default_factory=list)
    postal_code: str = ""


@dataclass
class AssignmentEntity:
    """Maps an input key onto an output document field code, optionally gated."""

    id: str
    input_key: str
    output_field: str
    filter: FilterCondition | None = None


@dataclass
class FormEntity:
    """Output document definition with its ordered assignments."""

    id: str
    name: str
    file_name: str
    kind: str  # document format tag, e.g. "pdf"
    assignments: list[AssignmentEntity] = field(default_factory=list)


@dataclass
class FlowEntity:
    """Domain entity for a flow aggregate (template or instance)."""

    id: str
    name: str
    description: str | None
    thumbnail: str | None
    is_template: bool
    survey: SurveyEntity
    destination: DestinationEntity
    criteria: list[CriteriaEntity] = field(default_factory=list)
    forms: list[FormEntity] = field(default_factory=list)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for c in self.criteria:
            if c.category in seen:
                raise ValidationException(
                    f"Duplicate criteria category in flow: {c.category}",
                    field="category",
                )
            seen.add(c.category)

    def criteria_by_category(self, category: str) -> CriteriaEntity | None:
        """Return the criteria with the given category, or None."""
        for c in self.criteria:
            if c.category == category:
                return c
        return None
