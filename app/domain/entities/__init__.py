"""Domain entities and aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from app.domain.entities.flow import (
    AnswerEntity,
    AssignmentEntity,
    CriteriaEntity,
    DestinationEntity,
    FieldEntity,
    FlowEntity,
    FormEntity,
    SurveyEntity,
)

__all__ = [
    "AnswerEntity",
    "AssignmentEntity",
    "CriteriaEntity",
    "DestinationEntity",
    "FieldEntity",
    "FlowEntity",
    "FormEntity",
    "SurveyEntity",
]
