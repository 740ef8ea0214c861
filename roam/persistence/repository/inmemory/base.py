"""Shared in-memory entity store for testing."""

from typing import Any, Generic, Mapping, Optional, Sequence

from roam.domain.repository.base import EntityRepository, EntityT, IdT


class InMemoryEntityRepository(EntityRepository[EntityT, IdT], Generic[EntityT, IdT]):
    """Dict-backed implementation of the generic entity store.

    No method awaits between reading and writing ``_entities``, so each call
    is atomic under asyncio.
    """

    def __init__(self) -> None:
        self._entities: dict[IdT, EntityT] = {}

    async def find_by_id(self, entity_id: IdT) -> Optional[EntityT]:
        """Find a record by ID."""
        return self._entities.get(entity_id)

    async def find_by_ids(self, entity_ids: Sequence[IdT]) -> list[EntityT]:
        """Find several records by ID, skipping unknown IDs."""
        return [self._entities[i] for i in entity_ids if i in self._entities]

    async def save(self, entity: EntityT) -> EntityT:
        """Create a record."""
        self._entities[entity.id] = entity  # type: ignore[attr-defined]
        return entity

    async def update(
        self, entity_id: IdT, changes: Mapping[str, Any]
    ) -> Optional[EntityT]:
        """Replace the stored record with a copy carrying the changes."""
        entity = self._entities.get(entity_id)
        if entity is None:
            return None
        updated = entity.model_copy(update=dict(changes))
        self._entities[entity_id] = updated
        return updated

    async def delete(self, entity_id: IdT) -> bool:
        """Delete a record."""
        return self._entities.pop(entity_id, None) is not None
