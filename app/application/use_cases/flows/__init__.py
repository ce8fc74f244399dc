"""Flow use cases: instantiate template, submit answers, resolve assignments, delete."""

from app.application.use_cases.flows.delete_flow import DeleteFlowUseCase
from app.application.use_cases.flows.instantiate_template import (
    InstantiateTemplateUseCase,
)
from app.application.use_cases.flows.resolve_flow_assignments import (
    ResolveFlowAssignmentsUseCase,
)
from app.application.use_cases.flows.submit_flow_answers import (
    SubmitFlowAnswersUseCase,
)

__all__ = [
    "DeleteFlowUseCase",
    "InstantiateTemplateUseCase",
    "ResolveFlowAssignmentsUseCase",
    "SubmitFlowAnswersUseCase",
]
