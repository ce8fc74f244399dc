"""LocalAssetProvisioner tests on a temporary directory."""

from pathlib import Path

import pytest

from app.domain.exceptions import AssetProvisioningException
from app.infrastructure.external.storage import LocalAssetProvisioner, StorageFactory


async def test_copies_template_tree(asset_provisioner, storage_root: Path) -> None:
    source = storage_root / "templates" / "t1"
    (source / "nested").mkdir(parents=True)
    (source / "form.pdf").write_bytes(b"pdf-bytes")
    (source / "nested" / "notes.txt").write_text("hello", encoding="utf-8")

    await asset_provisioner.provision("t1", "f1")

    target = storage_root / "flows" / "f1"
    assert (target / "form.pdf").read_bytes() == b"pdf-bytes"
    assert (target / "nested" / "notes.txt").read_text(encoding="utf-8") == "hello"
    assert (source / "form.pdf").exists()


async def test_missing_source_creates_empty_target(asset_provisioner, storage_root: Path) -> None:
    await asset_provisioner.provision("no-assets", "f1")
    target = storage_root / "flows" / "f1"
    assert target.is_dir()
    assert list(target.iterdir()) == []


async def test_existing_target_rejected(asset_provisioner, storage_root: Path) -> None:
    (storage_root / "flows" / "f1").mkdir(parents=True)
    with pytest.raises(AssetProvisioningException, match="t1"):
        await asset_provisioner.provision("t1", "f1")


async def test_path_traversal_rejected(asset_provisioner) -> None:
    with pytest.raises(AssetProvisioningException) as exc_info:
        await asset_provisioner.provision("../../outside", "f1")
    assert "Permission denied" in exc_info.value.details["reason"]


async def test_copy_failure_removes_partial_target(
    asset_provisioner, storage_root: Path, monkeypatch
) -> None:
    source = storage_root / "templates" / "t1"
    source.mkdir(parents=True)
    (source / "form.pdf").write_bytes(b"pdf-bytes")

    async def _boom(src: Path, dst: Path) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(asset_provisioner, "_copy_file", _boom)

    with pytest.raises(AssetProvisioningException) as exc_info:
        await asset_provisioner.provision("t1", "f1")
    assert exc_info.value.details["reason"] == "disk full"
    assert not (storage_root / "flows" / "f1").exists()


def test_factory_uses_settings(tmp_path: Path) -> None:
    from app.core.config import Settings

    settings = Settings(storage_root=str(tmp_path / "assets"), flow_assets_dir="instances")
    provisioner = StorageFactory.create_asset_provisioner(settings)
    assert isinstance(provisioner, LocalAssetProvisioner)
    assert provisioner.storage_root == (tmp_path / "assets").resolve()
    assert provisioner.flow_dir == "instances"
