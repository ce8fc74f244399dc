"""DTOs for flow submissions and resolved assignments."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FieldAnswer:
    """Answer submitted for one survey field, matched by field id."""

    id: str
    answer: str


@dataclass(frozen=True)
class CriteriaSelection:
    """Selected value submitted for one criteria, matched by category."""

    category: str
    selected_value: str | None


@dataclass(frozen=True)
class DestinationUpdate:
    """Replacement email list and postal code for a flow's destination."""

    email_addresses: list[str]
    postal_code: str


@dataclass(frozen=True)
class FlowSubmission:
    """User input for one flow instance (one submission round).

    Carries the complete current field set: a stored field missing from
    ``fields`` is read as cleared, not unchanged.
    """

    id: str
    fields: list[FieldAnswer] = field(default_factory=list)
    criteria: list[CriteriaSelection] = field(default_factory=list)
    destination: DestinationUpdate | None = None


@dataclass(frozen=True)
class ResolvedAssignment:
    """One value to write into an output document field."""

    form_name: str
    output_field: str
    value: str
