"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.flow import (
    Criteria,
    CriteriaAnswer,
    Destination,
    Flow,
    Form,
    FormAssignment,
    Survey,
    SurveyField,
)
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin

__all__ = [
    "Criteria",
    "CriteriaAnswer",
    "Destination",
    "Flow",
    "Form",
    "FormAssignment",
    "Survey",
    "SurveyField",
    "CuidMixin",
    "TimestampMixin",
]
