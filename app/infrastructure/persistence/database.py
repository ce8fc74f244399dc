"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

Engine and session factory are created lazily on first use (session_scope /
transactional_scope) so import does not trigger Settings validation.

SQLite (aiosqlite) is the local default; Postgres (asyncpg) gets connection
pool and driver options. create_schema() creates all tables from the ORM
metadata for local use.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.core.config import get_settings

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: Any = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


def _engine_options(database_url: str) -> dict[str, Any]:
    """Pool and driver options for the given URL (Postgres only; SQLite uses defaults)."""
    if not database_url.startswith("postgresql"):
        return {}
    settings = get_settings()
    pool_size = settings.db_pool_size if settings.db_pool_size is not None else 20
    max_overflow = (
        settings.db_max_overflow if settings.db_max_overflow is not None else 30
    )
    command_timeout = (
        settings.db_command_timeout
        if settings.db_command_timeout is not None
        else 60
    )
    return {
        "pool_pre_ping": True,
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_recycle": 3600,
        "connect_args": {"command_timeout": command_timeout},
    }


def _ensure_engine() -> None:
    """Create engine and AsyncSessionLocal on first use."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    engine = create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        **_engine_options(settings.database_url),
    )
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """Session for read operations.

    Does not commit; use transactional_scope for writes.
    """
    _ensure_engine()
    assert AsyncSessionLocal is not None
    async with AsyncSessionLocal() as session:
        yield session


@asynccontextmanager
async def transactional_scope() -> AsyncIterator[AsyncSession]:
    """Session for write operations.

    Begins a transaction, commits on success, rolls back on exception.
    """
    _ensure_engine()
    assert AsyncSessionLocal is not None
    async with AsyncSessionLocal() as session:
        async with session.begin():
            yield session


async def create_schema() -> None:
    """Create all tables known to Base.metadata (no-op for existing tables)."""
    _ensure_engine()
    # Import models so they register on Base.metadata.
    from app.infrastructure.persistence import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ensured")


async def dispose_engine() -> None:
    """Dispose the engine and reset the lazy factory (scripts call this on exit)."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None
