"""PostgreSQL implementation of Itinerary repository."""

from collections import defaultdict
from typing import Any, List, Mapping, Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import Row, delete, desc, literal, select, update
from sqlalchemy.dialects.postgresql import UUID as PG_UUID, insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from roam.domain.model import Itinerary
from roam.domain.repository import ItineraryRepository
from roam.domain.value import ItineraryId, UserId
from roam.persistence.mappers import itinerary_to_dict, row_to_itinerary
from roam.persistence.tables import itineraries_table, itinerary_collaborators_table

# Columns an update may write; collaborators go through add_collaborator
_UPDATABLE = frozenset({"content", "updated_at"})


class PostgresItineraryRepository(ItineraryRepository):
    """PostgreSQL implementation of ItineraryRepository.

    Every method runs in its own transaction.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self.session_factory = session_factory

    async def _fetch_collaborators(
        self, session: AsyncSession, itinerary_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch collaborators for multiple itineraries in a single query.

        Returns:
            Dict mapping itinerary_id -> list of user IDs
        """
        if not itinerary_ids:
            return {}

        stmt = select(
            itinerary_collaborators_table.c.itinerary_id,
            itinerary_collaborators_table.c.user_id,
        ).where(itinerary_collaborators_table.c.itinerary_id.in_(itinerary_ids))
        result = await session.execute(stmt)

        collaborator_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            collaborator_map[row.itinerary_id].append(row.user_id)
        return collaborator_map

    async def _to_models(
        self, session: AsyncSession, rows: Sequence[Row[Any]]
    ) -> List[Itinerary]:
        collaborator_map = await self._fetch_collaborators(
            session, [row.id for row in rows]
        )
        return [
            row_to_itinerary(row._asdict(), collaborator_map.get(row.id, []))
            for row in rows
        ]

    async def find_by_id(self, itinerary_id: ItineraryId) -> Optional[Itinerary]:
        """Find an itinerary by ID."""
        with logfire.span(
            "itinerary_repository.find_by_id", itinerary_id=str(itinerary_id)
        ):
            async with self.session_factory.begin() as session:
                stmt = select(itineraries_table).where(
                    itineraries_table.c.id == itinerary_id
                )
                result = await session.execute(stmt)
                row = result.fetchone()
                if not row:
                    return None
                return (await self._to_models(session, [row]))[0]

    async def find_by_ids(self, itinerary_ids: Sequence[ItineraryId]) -> List[Itinerary]:
        """Find several itineraries by ID, in the order given."""
        if not itinerary_ids:
            return []

        async with self.session_factory.begin() as session:
            stmt = select(itineraries_table).where(
                itineraries_table.c.id.in_(itinerary_ids)
            )
            result = await session.execute(stmt)
            by_id = {i.id: i for i in await self._to_models(session, result.fetchall())}
            return [by_id[i] for i in itinerary_ids if i in by_id]

    async def find_all(self) -> List[Itinerary]:
        """Find all itineraries, newest first."""
        with logfire.span("itinerary_repository.find_all"):
            async with self.session_factory.begin() as session:
                stmt = select(itineraries_table).order_by(
                    desc(itineraries_table.c.created_at)
                )
                result = await session.execute(stmt)
                itineraries = await self._to_models(session, result.fetchall())
                logfire.info("Found itineraries", count=len(itineraries))
                return itineraries

    async def find_by_author(self, author_id: UserId) -> List[Itinerary]:
        """Find itineraries by a specific author."""
        async with self.session_factory.begin() as session:
            stmt = (
                select(itineraries_table)
                .where(itineraries_table.c.author_id == author_id)
                .order_by(desc(itineraries_table.c.created_at))
            )
            result = await session.execute(stmt)
            return await self._to_models(session, result.fetchall())

    async def save(self, itinerary: Itinerary) -> Itinerary:
        """Insert an itinerary and its collaborators."""
        with logfire.span("itinerary_repository.save", itinerary_id=str(itinerary.id)):
            async with self.session_factory.begin() as session:
                await session.execute(
                    insert(itineraries_table).values(**itinerary_to_dict(itinerary))
                )
                if itinerary.collaborators:
                    await session.execute(
                        insert(itinerary_collaborators_table),
                        [
                            {"itinerary_id": itinerary.id, "user_id": user_id}
                            for user_id in itinerary.collaborators
                        ],
                    )
            return itinerary

    async def update(
        self, itinerary_id: ItineraryId, changes: Mapping[str, Any]
    ) -> Optional[Itinerary]:
        """Write the given columns and return the stored itinerary."""
        values = {k: v for k, v in changes.items() if k in _UPDATABLE}
        if not values:
            return await self.find_by_id(itinerary_id)

        with logfire.span(
            "itinerary_repository.update",
            itinerary_id=str(itinerary_id),
            fields=sorted(values),
        ):
            async with self.session_factory.begin() as session:
                stmt = (
                    update(itineraries_table)
                    .where(itineraries_table.c.id == itinerary_id)
                    .values(**values)
                    .returning(itineraries_table)
                )
                result = await session.execute(stmt)
                row = result.fetchone()
                if row is None:
                    logfire.warn("Itinerary not found", itinerary_id=str(itinerary_id))
                    return None
                return (await self._to_models(session, [row]))[0]

    async def delete(self, itinerary_id: ItineraryId) -> bool:
        """Delete an itinerary (collaborator rows cascade)."""
        async with self.session_factory.begin() as session:
            stmt = delete(itineraries_table).where(
                itineraries_table.c.id == itinerary_id
            )
            result = await session.execute(stmt)
            return result.rowcount > 0  # type: ignore[attr-defined]

    async def add_collaborator(
        self, itinerary_id: ItineraryId, user_id: UserId
    ) -> bool:
        """Insert a collaborator row in one statement.

        The SELECT yields no row when the itinerary is missing, and the
        conflict clause skips existing collaborators.
        """
        with logfire.span(
            "itinerary_repository.add_collaborator",
            itinerary_id=str(itinerary_id),
            user_id=str(user_id),
        ):
            async with self.session_factory.begin() as session:
                source = select(
                    itineraries_table.c.id, literal(user_id, PG_UUID)
                ).where(itineraries_table.c.id == itinerary_id)
                stmt = (
                    insert(itinerary_collaborators_table)
                    .from_select(["itinerary_id", "user_id"], source)
                    .on_conflict_do_nothing(
                        index_elements=["itinerary_id", "user_id"]
                    )
                )
                result = await session.execute(stmt)
                return result.rowcount > 0  # type: ignore[attr-defined]
