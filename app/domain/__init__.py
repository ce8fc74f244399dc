"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import (
    AnswerEntity,
    AssignmentEntity,
    CriteriaEntity,
    DestinationEntity,
    FieldEntity,
    FlowEntity,
    FormEntity,
    SurveyEntity,
)
from app.domain.enums import FieldKind
from app.domain.exceptions import (
    AssetProvisioningException,
    FlowFillException,
    FlowNotFoundException,
    InvalidTemplateException,
    ResourceNotFoundException,
    ValidationException,
)
from app.domain.value_objects import FilterCondition

__all__ = [
    # Entities
    "AnswerEntity",
    "AssignmentEntity",
    "CriteriaEntity",
    "DestinationEntity",
    "FieldEntity",
    "FlowEntity",
    "FormEntity",
    "SurveyEntity",
    # Enums
    "FieldKind",
    # Exceptions
    "AssetProvisioningException",
    "FlowFillException",
    "FlowNotFoundException",
    "InvalidTemplateException",
    "ResourceNotFoundException",
    "ValidationException",
    # Value objects
    "FilterCondition",
]
