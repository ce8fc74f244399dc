"""Delete flow use case: remove an instance and everything it owns."""

from __future__ import annotations

import logging

from app.application.interfaces.repositories import IFlowRepository

logger = logging.getLogger(__name__)


class DeleteFlowUseCase:
    """Deletes a flow instance by id. Templates are not deletable here."""

    def __init__(self, flow_repo: IFlowRepository) -> None:
        self._flow_repo = flow_repo

    async def execute(self, flow_id: str) -> None:
        """Raises FlowNotFoundException if flow_id is not a stored instance."""
        await self._flow_repo.delete_flow(flow_id)
        logger.info("Deleted flow %s", flow_id)
