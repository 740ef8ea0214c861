"""Generic entity store contract shared by all repositories."""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Mapping, Optional, Sequence, TypeVar

from roam.domain.model.common import DomainModel

EntityT = TypeVar("EntityT", bound=DomainModel)
IdT = TypeVar("IdT")


class EntityRepository(ABC, Generic[EntityT, IdT]):
    """Persistent record store keyed by identifier.

    Holds no business rules. Every method is atomic from the caller's
    perspective: implementations must not expose a half-applied write.
    """

    @abstractmethod
    async def find_by_id(self, entity_id: IdT) -> Optional[EntityT]:
        """Find a record by ID.

        Args:
            entity_id: The record's unique identifier

        Returns:
            The record if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, entity_ids: Sequence[IdT]) -> List[EntityT]:
        """Find several records by ID (batch query).

        Unknown IDs are skipped. Records come back in the order of
        ``entity_ids``.

        Args:
            entity_ids: IDs to look up

        Returns:
            The records that exist
        """
        pass

    @abstractmethod
    async def save(self, entity: EntityT) -> EntityT:
        """Create a record.

        Args:
            entity: The record to create

        Returns:
            The saved record
        """
        pass

    @abstractmethod
    async def update(
        self, entity_id: IdT, changes: Mapping[str, Any]
    ) -> Optional[EntityT]:
        """Partially update a record.

        Only the fields named in ``changes`` are written; everything else
        keeps its stored value.

        Args:
            entity_id: ID of the record to update
            changes: Field name to new value

        Returns:
            The updated record, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: IdT) -> bool:
        """Delete a record (hard delete).

        Deleting a missing record is not an error.

        Args:
            entity_id: ID of the record to delete

        Returns:
            True if a record was deleted, False if none existed
        """
        pass
