"""Application DTOs: data transfer objects for use cases and repositories."""

from app.application.dtos.flow import (
    CriteriaSelection,
    DestinationUpdate,
    FieldAnswer,
    FlowSubmission,
    ResolvedAssignment,
)

__all__ = [
    "CriteriaSelection",
    "DestinationUpdate",
    "FieldAnswer",
    "FlowSubmission",
    "ResolvedAssignment",
]
