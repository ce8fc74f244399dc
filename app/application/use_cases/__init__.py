"""Application use cases: one entry point per workflow."""

from app.application.use_cases.flows import (
    DeleteFlowUseCase,
    InstantiateTemplateUseCase,
    ResolveFlowAssignmentsUseCase,
    SubmitFlowAnswersUseCase,
)

__all__ = [
    "DeleteFlowUseCase",
    "InstantiateTemplateUseCase",
    "ResolveFlowAssignmentsUseCase",
    "SubmitFlowAnswersUseCase",
]
