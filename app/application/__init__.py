"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (flow repository, asset provisioner).
"""

from app.application.interfaces import IAssetProvisioner, IFlowRepository
from app.application.services import (
    clone_template,
    merge_submission,
    resolve_assignments,
)
from app.application.use_cases import (
    DeleteFlowUseCase,
    InstantiateTemplateUseCase,
    ResolveFlowAssignmentsUseCase,
    SubmitFlowAnswersUseCase,
)

__all__ = [
    "DeleteFlowUseCase",
    "IAssetProvisioner",
    "IFlowRepository",
    "InstantiateTemplateUseCase",
    "ResolveFlowAssignmentsUseCase",
    "SubmitFlowAnswersUseCase",
    "clone_template",
    "merge_submission",
    "resolve_assignments",
]
