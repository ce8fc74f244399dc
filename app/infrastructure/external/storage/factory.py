"""Asset provisioner factory: creates the configured backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.interfaces.services import IAssetProvisioner

if TYPE_CHECKING:
    from app.core.config import Settings


class StorageFactory:
    """Factory for asset provisioner instances based on configuration."""

    @staticmethod
    def create_asset_provisioner(settings: "Settings | None" = None) -> IAssetProvisioner:
        """Create asset provisioner from settings.

        Args:
            settings: Application settings; if None, uses get_settings().

        Returns:
            LocalAssetProvisioner rooted at settings.storage_root.
        """
        from app.core.config import get_settings
        from app.infrastructure.external.storage.local_assets import (
            LocalAssetProvisioner,
        )

        s = settings or get_settings()
        return LocalAssetProvisioner(
            storage_root=s.storage_root,
            template_dir=s.template_assets_dir,
            flow_dir=s.flow_assets_dir,
        )
