"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.entities.flow import FlowEntity


# Flow repository interface
class IFlowRepository(Protocol):
    """Protocol for flow repository (DIP).

    Every read returns the full owned graph (survey fields, criteria answers,
    forms and assignments, destination).
    """

    async def find_instance(self, flow_id: str) -> FlowEntity:
        """Return the non-template flow with this id. Raises FlowNotFoundException unless exactly one matches."""

    async def find_template(self, flow_id: str) -> FlowEntity:
        """Return the template flow with this id. Raises FlowNotFoundException unless exactly one matches."""

    async def get_by_id(self, flow_id: str) -> FlowEntity | None:
        """Return any flow (template or instance) by id, or None."""

    async def list_instances(self) -> list[FlowEntity]:
        """Return non-template flows, newest survey first."""

    async def list_templates(self) -> list[FlowEntity]:
        """Return template flows (no particular order)."""

    async def insert(self, flow: FlowEntity) -> FlowEntity:
        """Persist a new flow with its full owned graph."""

    async def save_values(self, flow: FlowEntity) -> FlowEntity:
        """Persist answers, selected values and destination of an existing instance; return stored state."""

    async def delete_flow(self, flow_id: str) -> None:
        """Delete a non-template flow and all owned sub-entities. Raises FlowNotFoundException if missing."""
