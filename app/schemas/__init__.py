"""Pydantic request/response schemas."""

from app.schemas.flow import (
    FlowResponse,
    FlowSubmissionRequest,
    FlowSummaryResponse,
    ResolvedAssignmentResponse,
)

__all__ = [
    "FlowResponse",
    "FlowSubmissionRequest",
    "FlowSummaryResponse",
    "ResolvedAssignmentResponse",
]
