"""Template asset storage: local filesystem provisioner and factory."""

from app.infrastructure.external.storage.factory import StorageFactory
from app.infrastructure.external.storage.local_assets import LocalAssetProvisioner

__all__ = ["LocalAssetProvisioner", "StorageFactory"]
