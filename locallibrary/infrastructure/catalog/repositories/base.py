"""Shared persistence plumbing for the catalog repositories."""

import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import InstrumentedAttribute

from locallibrary.database import Base
from locallibrary.domain.common.entity import Entity, EntityId
from locallibrary.exceptions import StoreError

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=Entity[Any])


class SqlAlchemyRepository(Generic[EntityT]):
    """
    Base repository over one collection.

    Every operation opens its own session from the factory, so operations
    of one repository may run concurrently. Driver failures surface as
    StoreError.

    Subclasses set:
        orm_model: Mapped ORM class of the collection
        filter_fields: Domain field name -> column usable in criteria
        entity_name: Name used in log and error messages
        order_by: Default ordering of ``find``
    """

    orm_model: ClassVar[type[Base]]
    filter_fields: ClassVar[Mapping[str, InstrumentedAttribute[Any]]] = {}
    entity_name: ClassVar[str] = "entity"
    order_by: ClassVar[tuple[InstrumentedAttribute[Any], ...]] = ()

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    # Hooks
    def to_domain(self, orm_model: Any) -> EntityT:
        raise NotImplementedError

    def to_orm(self, entity: EntityT, orm_model: Any | None = None) -> Any:
        raise NotImplementedError

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self.session_factory() as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"Store {operation} on {self.entity_name} failed: {e!s}", exc_info=True)
            raise StoreError(
                f"Failed to {operation} {self.entity_name}: {e!s}", operation=operation
            ) from e

    def _where(self, stmt: Select[Any], criteria: Mapping[str, object] | None) -> Select[Any]:
        """Apply field-equality criteria to a statement."""
        for name, value in (criteria or {}).items():
            column = self.filter_fields.get(name)
            if column is None:
                raise StoreError(
                    f"Unknown {self.entity_name} filter field '{name}'", operation="query"
                )
            if isinstance(value, EntityId):
                value = value.value
            stmt = stmt.where(column == value)
        return stmt

    async def count(self, criteria: Mapping[str, object] | None = None) -> int:
        stmt = self._where(select(func.count()).select_from(self.orm_model), criteria)
        async with self._session("count") as session:
            result = await session.execute(stmt)
            return result.scalar_one()

    async def find(self, criteria: Mapping[str, object] | None = None) -> list[EntityT]:
        stmt = self._where(select(self.orm_model), criteria).order_by(*self.order_by)
        async with self._session("find") as session:
            result = await session.execute(stmt)
            return [self.to_domain(orm_model) for orm_model in result.scalars().all()]

    async def find_by_id(self, entity_id: EntityId) -> EntityT | None:
        async with self._session("find_by_id") as session:
            orm_model = await session.get(self.orm_model, entity_id.value)
            if orm_model is None:
                return None
            return self.to_domain(orm_model)

    async def save(self, entity: EntityT) -> EntityT:
        """Insert the entity, or overwrite the stored one with the same ID."""
        async with self._session("save") as session, session.begin():
            existing = await session.get(self.orm_model, entity.id.value)
            if existing is None:
                session.add(self.to_orm(entity))
            else:
                self.to_orm(entity, existing)
        logger.debug(f"Saved {self.entity_name} {entity.id}")
        return entity
