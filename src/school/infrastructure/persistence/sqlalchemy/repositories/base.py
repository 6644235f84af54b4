"""Shared plumbing for SQLAlchemy repositories."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, List, Optional, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from school.domain.shared.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")
ModelT = TypeVar("ModelT")


def is_unique_violation(error: IntegrityError, *markers: str) -> bool:
    """Check whether an IntegrityError is a uniqueness violation on ``markers``.

    Matches both SQLite ("UNIQUE constraint failed: users.username") and
    PostgreSQL ('duplicate key value violates unique constraint
    "ix_users_username"') messages.
    """
    message = str(error.orig).lower()
    if "unique" not in message and "duplicate" not in message:
        return False
    return any(marker.lower() in message for marker in markers)


class SQLAlchemyRepository(ABC, Generic[EntityT, ModelT]):
    """Generic store-by-id operations for one aggregate/model pair.

    Every write is flushed right away so constraint violations surface at
    the call that caused them. The transaction is committed by the unit
    of work.
    """

    model: ClassVar[type[Any]]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, entity_id: UUID) -> Optional[EntityT]:
        model = await self._session.get(self.model, entity_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_all(self) -> List[EntityT]:
        stmt = select(self.model).order_by(*self._default_order())
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def add(self, entity: EntityT) -> None:
        self._session.add(self._map_to_model(entity))
        await self._flush(entity)
        logger.debug("Added %s", entity)

    async def update(self, entity: EntityT) -> None:
        model = await self._session.get(self.model, entity.id)  # type: ignore[attr-defined]
        if model is None:
            msg = f"{self.model.__name__} {entity.id} does not exist"  # type: ignore[attr-defined]
            raise EntityNotFoundError(msg)
        self._update_model(model, entity)
        await self._flush(entity)

    async def delete(self, entity: EntityT) -> None:
        model = await self._session.get(self.model, entity.id)  # type: ignore[attr-defined]
        if model is None:
            return
        await self._session.delete(model)
        await self._flush(entity)
        logger.debug("Deleted %s", entity)

    async def exists(self, entity_id: UUID) -> bool:
        stmt = (
            select(func.count())
            .select_from(self.model)
            .where(self.model.id == entity_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def _flush(self, entity: EntityT) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            translated = self._translate_integrity_error(e, entity)
            if translated is None:
                raise
            raise translated from e

    def _translate_integrity_error(
        self,
        error: IntegrityError,
        entity: EntityT,
    ) -> Optional[Exception]:
        """Map a constraint violation to a domain error, or None to re-raise."""
        return None

    def _default_order(self) -> tuple[Any, ...]:
        return (self.model.created_at,)

    @abstractmethod
    def _map_to_domain(self, model: ModelT) -> EntityT: ...

    @abstractmethod
    def _map_to_model(self, entity: EntityT) -> ModelT: ...

    @abstractmethod
    def _update_model(self, model: ModelT, entity: EntityT) -> None: ...
