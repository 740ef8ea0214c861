"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from typing import Any, List, Mapping, Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import Row, delete, desc, literal, select, update
from sqlalchemy.dialects.postgresql import UUID as PG_UUID, insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from roam.domain.model import Post
from roam.domain.repository.post import PostRepository
from roam.domain.value import PostId, UserId
from roam.persistence.mappers import post_to_dict, post_values, row_to_post
from roam.persistence.tables import post_favorites_table, posts_table

# Columns an update may write; favorites go through the favorite methods
_UPDATABLE = frozenset(
    {"title", "tags", "rating", "itinerary_id", "options", "updated_at"}
)


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    Every method runs in its own transaction.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self.session_factory = session_factory

    async def _fetch_favorites_for_posts(
        self, session: AsyncSession, post_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch favorite users for multiple posts in a single query.

        Returns:
            Dict mapping post_id -> list of user IDs
        """
        if not post_ids:
            return {}

        stmt = select(
            post_favorites_table.c.post_id, post_favorites_table.c.user_id
        ).where(post_favorites_table.c.post_id.in_(post_ids))
        result = await session.execute(stmt)

        favorite_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            favorite_map[row.post_id].append(row.user_id)
        return favorite_map

    async def _to_models(
        self, session: AsyncSession, rows: Sequence[Row[Any]]
    ) -> List[Post]:
        favorite_map = await self._fetch_favorites_for_posts(
            session, [row.id for row in rows]
        )
        return [
            row_to_post(row._asdict(), favorite_map.get(row.id, [])) for row in rows
        ]

    async def _select(self, stmt: Any) -> List[Post]:
        async with self.session_factory.begin() as session:
            result = await session.execute(stmt)
            return await self._to_models(session, result.fetchall())

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            posts = await self._select(
                select(posts_table).where(posts_table.c.id == post_id)
            )
            return posts[0] if posts else None

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find several posts by ID, in the order given."""
        if not post_ids:
            return []

        posts = await self._select(
            select(posts_table).where(posts_table.c.id.in_(post_ids))
        )
        by_id = {post.id: post for post in posts}
        return [by_id[p] for p in post_ids if p in by_id]

    async def find_all(self) -> List[Post]:
        """Find all posts, newest first."""
        with logfire.span("post_repository.find_all"):
            posts = await self._select(
                select(posts_table).order_by(desc(posts_table.c.created_at))
            )
            logfire.info("Found posts", count=len(posts))
            return posts

    async def find_by_author(self, author_id: UserId) -> List[Post]:
        """Find posts by a specific author."""
        return await self._select(
            select(posts_table)
            .where(posts_table.c.author_id == author_id)
            .order_by(desc(posts_table.c.created_at))
        )

    async def find_by_title(
        self, pattern: str, author_id: Optional[UserId] = None
    ) -> List[Post]:
        """Find posts whose title contains the pattern, ignoring case.

        LIKE wildcards in the pattern are escaped so they match literally.
        """
        with logfire.span(
            "post_repository.find_by_title",
            pattern=pattern,
            author_id=str(author_id) if author_id else None,
        ):
            stmt = select(posts_table).where(
                posts_table.c.title.icontains(pattern, autoescape=True)
            )

            # Filter by author
            if author_id is not None:
                stmt = stmt.where(posts_table.c.author_id == author_id)

            return await self._select(stmt.order_by(desc(posts_table.c.created_at)))

    async def find_favorited_by(self, user_id: UserId) -> List[Post]:
        """Find posts a user has favorited."""
        stmt = (
            select(posts_table)
            .join(post_favorites_table, posts_table.c.id == post_favorites_table.c.post_id)
            .where(post_favorites_table.c.user_id == user_id)
            .order_by(desc(posts_table.c.created_at))
        )
        return await self._select(stmt)

    async def save(self, post: Post) -> Post:
        """Insert a post and its favorite users."""
        with logfire.span(
            "post_repository.save",
            post_id=str(post.id),
            title=post.title,
            itinerary_id=str(post.itinerary_id),
        ):
            async with self.session_factory.begin() as session:
                await session.execute(insert(posts_table).values(**post_to_dict(post)))
                if post.favorite_users:
                    await session.execute(
                        insert(post_favorites_table),
                        [
                            {"post_id": post.id, "user_id": user_id}
                            for user_id in post.favorite_users
                        ],
                    )
            logfire.info("Post saved successfully", post_id=str(post.id))
            return post

    async def update(
        self, post_id: PostId, changes: Mapping[str, Any]
    ) -> Optional[Post]:
        """Write the given columns and return the stored post."""
        values = post_values({k: v for k, v in changes.items() if k in _UPDATABLE})
        if not values:
            return await self.find_by_id(post_id)

        with logfire.span(
            "post_repository.update", post_id=str(post_id), fields=sorted(values)
        ):
            async with self.session_factory.begin() as session:
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post_id)
                    .values(**values)
                    .returning(posts_table)
                )
                result = await session.execute(stmt)
                row = result.fetchone()
                if row is None:
                    logfire.warn("Post not found", post_id=str(post_id))
                    return None
                return (await self._to_models(session, [row]))[0]

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (favorites and votes cascade)."""
        async with self.session_factory.begin() as session:
            stmt = delete(posts_table).where(posts_table.c.id == post_id)
            result = await session.execute(stmt)
            return result.rowcount > 0  # type: ignore[attr-defined]

    async def add_favorite_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Insert a favorite row in one statement, skipping duplicates."""
        async with self.session_factory.begin() as session:
            source = select(posts_table.c.id, literal(user_id, PG_UUID)).where(
                posts_table.c.id == post_id
            )
            stmt = (
                insert(post_favorites_table)
                .from_select(["post_id", "user_id"], source)
                .on_conflict_do_nothing(index_elements=["post_id", "user_id"])
            )
            result = await session.execute(stmt)
            return result.rowcount > 0  # type: ignore[attr-defined]

    async def remove_favorite_user(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a favorite row if present."""
        async with self.session_factory.begin() as session:
            stmt = delete(post_favorites_table).where(
                post_favorites_table.c.post_id == post_id,
                post_favorites_table.c.user_id == user_id,
            )
            result = await session.execute(stmt)
            return result.rowcount > 0  # type: ignore[attr-defined]
