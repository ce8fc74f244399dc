"""Resolve flow assignments use case: load an instance and compute its output assignments."""

from __future__ import annotations

from app.application.dtos.flow import ResolvedAssignment
from app.application.interfaces.repositories import IFlowRepository
from app.application.services.assignment_resolver import resolve_assignments


class ResolveFlowAssignmentsUseCase:
    """Returns the ordered (form, output field, value) triples for a flow instance."""

    def __init__(self, flow_repo: IFlowRepository) -> None:
        self._flow_repo = flow_repo

    async def execute(self, flow_id: str) -> list[ResolvedAssignment]:
        """Raises FlowNotFoundException if flow_id is not a stored instance."""
        flow = await self._flow_repo.find_instance(flow_id)
        return resolve_assignments(flow)
