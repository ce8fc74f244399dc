"""Seed the sample flow templates into the configured database.

Creates tables if needed, then inserts every sample template whose id is not
stored yet. Existing templates are left untouched, so running twice is safe.

Usage:
    python -m scripts.seed_templates

Requires: DATABASE_URL (defaults to a local SQLite file).
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

from app.core.logging import setup_logging
from app.domain.exceptions import FlowFillException
from app.infrastructure.persistence.database import (
    create_schema,
    dispose_engine,
    transactional_scope,
)
from app.infrastructure.persistence.repositories.flow_repo import FlowRepository
from app.infrastructure.services.template_seed_service import TemplateSeedService


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run() -> None:
    await create_schema()
    try:
        async with transactional_scope() as session:
            seeded = await TemplateSeedService(FlowRepository(session)).seed_missing()
        for template in seeded:
            print(f"  Template {template.name} -> {template.id}")
        print(f"Seed completed ({len(seeded)} inserted).")
    finally:
        await dispose_engine()


def main() -> None:
    _load_env()
    setup_logging()
    try:
        asyncio.run(run())
    except FlowFillException as e:
        print(f"Seed failed: {e.to_dict()}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
