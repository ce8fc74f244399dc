"""Base repository: generic get/create/delete over one ORM model."""

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.base import ExecutableOption

from app.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, create and delete.

    LSP: subclasses are substitutable for BaseRepository.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_model_by_id(
        self,
        entity_id: str,
        options: Sequence[ExecutableOption] = (),
    ) -> ModelType | None:
        """Return a single record by primary key (with optional loader options), or None."""
        model: Any = self.model
        result = await self.db.execute(
            select(self.model).options(*options).where(model.id == entity_id)
        )
        return result.scalar_one_or_none()

    async def create(self, obj: ModelType) -> ModelType:
        """Add a new record (and its cascaded children) and flush."""
        self.db.add(obj)
        await self.db.flush()
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete the record (children cascade) and flush."""
        await self.db.delete(obj)
        await self.db.flush()
