"""Pytest configuration and fixtures for flowfill.

DB-dependent fixtures run against an in-memory SQLite database (aiosqlite),
created fresh per test from the ORM metadata. All imports use app.*.
"""

from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.domain.entities.flow import FlowEntity
from app.infrastructure.external.storage import LocalAssetProvisioner
from app.infrastructure.persistence import models  # noqa: F401
from app.infrastructure.persistence.database import Base
from app.infrastructure.services.template_seed_service import (
    HELP_DESK_TEMPLATE_ID,
    HIRE_TEMPLATE_ID,
    TAXES_TEMPLATE_ID,
    sample_templates,
)


@pytest.fixture
async def db_engine():
    """Async engine on a private in-memory SQLite database with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory configured like the application's (no expire on commit)."""
    return async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(session_factory) -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def templates_by_id() -> dict[str, FlowEntity]:
    """Freshly built sample templates keyed by their fixed ids."""
    return {t.id: t for t in sample_templates()}


@pytest.fixture
def taxes_template(templates_by_id) -> FlowEntity:
    return templates_by_id[TAXES_TEMPLATE_ID]


@pytest.fixture
def help_desk_template(templates_by_id) -> FlowEntity:
    return templates_by_id[HELP_DESK_TEMPLATE_ID]


@pytest.fixture
def hire_template(templates_by_id) -> FlowEntity:
    return templates_by_id[HIRE_TEMPLATE_ID]


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    """Temporary asset storage root."""
    root = tmp_path / "storage"
    root.mkdir()
    return root


@pytest.fixture
def asset_provisioner(storage_root: Path) -> LocalAssetProvisioner:
    return LocalAssetProvisioner(storage_root=str(storage_root))
