"""Generic repository interface shared by every aggregate."""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

EntityT = TypeVar("EntityT")


class Repository(ABC, Generic[EntityT]):
    """Store-by-id contract each aggregate repository extends.

    Writes are staged in the current unit of work and become durable
    when the unit of work saves its changes.
    """

    @abstractmethod
    async def find_by_id(self, entity_id: UUID) -> Optional[EntityT]:
        """Find an entity by its ID."""

    @abstractmethod
    async def find_all(self) -> List[EntityT]:
        """Return all entities."""

    @abstractmethod
    async def add(self, entity: EntityT) -> None:
        """Stage a new entity for insertion."""

    @abstractmethod
    async def update(self, entity: EntityT) -> None:
        """Stage the current state of an existing entity."""

    @abstractmethod
    async def delete(self, entity: EntityT) -> None:
        """Stage an entity for removal."""

    @abstractmethod
    async def exists(self, entity_id: UUID) -> bool:
        """Check whether an entity with this ID exists."""
