"""Submit flow answers use case: merge one submission round into a stored instance."""

from __future__ import annotations

import logging

from app.application.dtos.flow import FlowSubmission
from app.application.interfaces.repositories import IFlowRepository
from app.application.services.answer_merger import merge_submission
from app.domain.entities.flow import FlowEntity

logger = logging.getLogger(__name__)


class SubmitFlowAnswersUseCase:
    """Loads an instance, merges a submission into it, and stores the result."""

    def __init__(self, flow_repo: IFlowRepository) -> None:
        self._flow_repo = flow_repo

    async def execute(self, submission: FlowSubmission) -> FlowEntity:
        """Merge submission into the stored flow with the same id.

        Args:
            submission: Answers, criteria selections and optional destination.

        Returns:
            The stored post-merge flow (not the submission).

        Raises:
            FlowNotFoundException: If submission.id is not a stored instance.
        """
        existing = await self._flow_repo.find_instance(submission.id)
        merged = merge_submission(existing, submission)
        stored = await self._flow_repo.save_values(merged)
        logger.info(
            "Merged submission into flow %s (%d fields, %d criteria submitted)",
            submission.id,
            len(submission.fields),
            len(submission.criteria),
        )
        return stored
