"""
Noteful Backend — Generic Resource Service
============================================

What:  Data-access base class shared by FolderService and NoteService.
Why:   Both resources need exactly the same five store operations; only the
       mapped model differs.
How:   Subclasses set `model`; each method issues a single statement through
       the AsyncSession the service was constructed with.
Who:   Instantiated per request by the service dependencies in
       noteful.dependencies; unit tests construct it with a mock session.

Contract:
    - get_by_id() returns None for "not found"; interpreting absence is the
      caller's job.
    - delete() and update() touch at most one row and do not report whether
      a row existed.
    - Store exceptions (SQLAlchemyError) propagate unchanged.
    - Writes are committed before returning, so the next request sees them.
"""

import logging
from typing import Any, ClassVar, Dict, Generic, List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class ResourceService(Generic[ModelT]):
    """CRUD operations for one mapped table."""

    model: ClassVar[Type[Base]]

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    def resource_name(self) -> str:
        return self.model.__name__

    async def list_all(self) -> List[ModelT]:
        """SELECT * FROM <table>, in storage order."""
        result = await self.db.execute(select(self.model))
        return list(result.scalars().all())

    async def insert(self, fields: Dict[str, Any]) -> ModelT:
        """
        Insert one row and return it as stored.

        The row is refreshed after commit so generated columns (id, and for
        notes `modified`) carry the values the store actually holds.
        """
        row = self.model(**fields)
        self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row)
        logger.info("%s created: %s", self.resource_name, row.id)
        return row

    async def get_by_id(self, row_id: UUID) -> Optional[ModelT]:
        result = await self.db.execute(
            select(self.model).where(self.model.id == row_id)
        )
        return result.scalar_one_or_none()

    async def delete(self, row_id: UUID) -> None:
        await self.db.execute(
            delete(self.model).where(self.model.id == row_id)
        )
        await self.db.commit()
        logger.info("%s deleted: %s", self.resource_name, row_id)

    async def update(self, row_id: UUID, fields: Dict[str, Any]) -> None:
        """Write only `fields` to the matching row."""
        await self.db.execute(
            update(self.model)
            .where(self.model.id == row_id)
            .values(**fields)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()
        logger.info(
            "%s updated: %s (fields=%s)",
            self.resource_name, row_id, ", ".join(sorted(fields)),
        )
