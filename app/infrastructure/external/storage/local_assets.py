"""Local filesystem asset provisioner with path validation and cleanup on failure."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

import aiofiles
import aiofiles.os

from app.domain.exceptions import AssetProvisioningException
from app.infrastructure.exceptions import StoragePermissionError

logger = logging.getLogger(__name__)


class LocalAssetProvisioner:
    """Copies a template's asset directory into a new flow's directory.

    Layout: <storage_root>/<template_dir>/<template_id>/ is copied to
    <storage_root>/<flow_dir>/<flow_id>/. Paths are validated against
    storage_root. A template without an asset directory gets an empty
    flow directory. On any failure the partially written flow directory is
    removed and AssetProvisioningException is raised.
    """

    CHUNK_SIZE = 64 * 1024  # 64KB

    def __init__(
        self,
        storage_root: str,
        template_dir: str = "templates",
        flow_dir: str = "flows",
    ) -> None:
        """Initialize local asset storage.

        Args:
            storage_root: Base directory for all asset files.
            template_dir: Subdirectory holding one directory per template id.
            flow_dir: Subdirectory receiving one directory per flow id.
        """
        self.storage_root = Path(storage_root).resolve()
        self.template_dir = template_dir
        self.flow_dir = flow_dir
        self.storage_root.mkdir(parents=True, exist_ok=True, mode=0o750)

    def _get_full_path(self, storage_ref: str) -> Path:
        """Resolve and validate path under storage_root. Raises StoragePermissionError if traversal."""
        full_path = (self.storage_root / storage_ref).resolve()
        try:
            full_path.relative_to(self.storage_root)
        except ValueError as e:
            raise StoragePermissionError(storage_ref, "path_validation") from e
        return full_path

    def template_path(self, template_id: str) -> Path:
        """Return the asset directory of a template."""
        return self._get_full_path(f"{self.template_dir}/{template_id}")

    def flow_path(self, flow_id: str) -> Path:
        """Return the asset directory of a flow instance."""
        return self._get_full_path(f"{self.flow_dir}/{flow_id}")

    async def _copy_file(self, source: Path, target: Path) -> None:
        """Stream-copy one file."""
        async with aiofiles.open(source, "rb") as src, aiofiles.open(target, "wb") as dst:
            while True:
                chunk = await src.read(self.CHUNK_SIZE)
                if not chunk:
                    break
                await dst.write(chunk)
        os.chmod(target, 0o640)

    async def provision(self, source_flow_id: str, target_flow_id: str) -> None:
        """Copy the template's assets into the new flow's directory."""
        try:
            source = self.template_path(source_flow_id)
            target = self.flow_path(target_flow_id)
        except StoragePermissionError as e:
            raise AssetProvisioningException(
                source_flow_id, target_flow_id, e.message
            ) from e
        if target.exists():
            raise AssetProvisioningException(
                source_flow_id, target_flow_id, "target directory already exists"
            )
        try:
            await aiofiles.os.makedirs(target, mode=0o750)
            if not source.is_dir():
                logger.warning(
                    "Template %s has no asset directory; flow %s starts empty",
                    source_flow_id,
                    target_flow_id,
                )
                return
            copied = 0
            for path in sorted(source.rglob("*")):
                dest = target / path.relative_to(source)
                if path.is_dir():
                    await aiofiles.os.makedirs(dest, mode=0o750, exist_ok=True)
                elif path.is_file():
                    await aiofiles.os.makedirs(dest.parent, mode=0o750, exist_ok=True)
                    await self._copy_file(path, dest)
                    copied += 1
            logger.debug(
                "Copied %d asset file(s) from template %s to flow %s",
                copied,
                source_flow_id,
                target_flow_id,
            )
        except OSError as e:
            shutil.rmtree(target, ignore_errors=True)
            logger.error(
                "Asset provisioning failed for template %s -> flow %s: %s",
                source_flow_id,
                target_flow_id,
                e,
            )
            raise AssetProvisioningException(
                source_flow_id, target_flow_id, str(e)
            ) from e
