"""Instantiate template use case: clone a template into a new flow and provision its assets."""

from __future__ import annotations

import logging

from app.application.interfaces.repositories import IFlowRepository
from app.application.interfaces.services import IAssetProvisioner
from app.application.services.template_instantiator import clone_template
from app.domain.entities.flow import FlowEntity
from app.domain.exceptions import FlowNotFoundException, InvalidTemplateException

logger = logging.getLogger(__name__)


class InstantiateTemplateUseCase:
    """Creates a flow instance from a stored template.

    Must run inside one transaction: the instance is inserted (flushed)
    before assets are provisioned, so a provisioning failure rolls the
    insert back with the transaction and nothing is persisted.
    """

    def __init__(
        self,
        flow_repo: IFlowRepository,
        asset_provisioner: IAssetProvisioner,
    ) -> None:
        self._flow_repo = flow_repo
        self._asset_provisioner = asset_provisioner

    async def execute(self, template_id: str) -> FlowEntity:
        """Clone the template, persist the clone, and copy the template's assets.

        Args:
            template_id: Id of the template flow to copy.

        Returns:
            The new flow instance.

        Raises:
            FlowNotFoundException: If no flow with template_id exists.
            InvalidTemplateException: If the flow exists but is not a template.
            AssetProvisioningException: If assets could not be copied (propagated).
        """
        template = await self._flow_repo.get_by_id(template_id)
        if template is None:
            raise FlowNotFoundException(template_id, template=True)
        if not template.is_template:
            raise InvalidTemplateException(template_id)
        flow = clone_template(template)
        await self._flow_repo.insert(flow)
        await self._asset_provisioner.provision(template.id, flow.id)
        logger.info("Instantiated template %s as flow %s", template.id, flow.id)
        return flow
