"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import Protocol


# Asset provisioner interface
class IAssetProvisioner(Protocol):
    """Protocol for copying template-scoped files into a new flow's namespace."""

    async def provision(self, source_flow_id: str, target_flow_id: str) -> None:
        """Copy assets of source_flow_id into target_flow_id.

        Raises AssetProvisioningException on failure; callers must not
        continue with an instance that lacks its assets.
        """
