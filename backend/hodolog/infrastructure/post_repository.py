"""Post Repository — SQLAlchemy implementation of the PostRepository protocol.

Invariants:
    - Every write (save, save_all, delete_by_id, delete_all) commits before returning
    - find_by_id returns None for a missing id, never raises (out-of-range ids included)
    - find_all orders by id ascending; find_newest_first by id descending
    - delete_by_id on a missing id is a no-op
    - find_newest_first returns [] for an offset past any possible row count

Design Decisions:
    - Session injected, not created: one AsyncSession per request from get_db
    - save refreshes the row so the database-assigned id is loaded
"""

import logging
from typing import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hodolog.core.domain_types import POST_ID_MAX, PostId, is_storable_post_id
from hodolog.models.post import Post

logger = logging.getLogger(__name__)


class SqlAlchemyPostRepository:
    """Post persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def new(self, title: str, content: str) -> Post:
        return Post(title=title, content=content)

    async def save(self, post: Post) -> Post:
        self.db.add(post)
        await self.db.commit()
        await self.db.refresh(post)
        return post

    async def save_all(self, posts: Sequence[Post]) -> list[Post]:
        """Insert in list order so ids follow the caller's ordering."""
        for post in posts:
            self.db.add(post)
            await self.db.flush()
        await self.db.commit()
        return list(posts)

    async def find_by_id(self, post_id: PostId) -> Post | None:
        if not is_storable_post_id(post_id):
            return None
        return await self.db.get(Post, post_id)

    async def find_all(self) -> list[Post]:
        result = await self.db.execute(select(Post).order_by(Post.id.asc()))
        return list(result.scalars().all())

    async def find_newest_first(self, offset: int, limit: int) -> list[Post]:
        if offset > POST_ID_MAX:
            return []
        result = await self.db.execute(
            select(Post)
            .order_by(Post.id.desc())
            .offset(offset)
            .limit(limit),
        )
        return list(result.scalars().all())

    async def delete_by_id(self, post_id: PostId) -> None:
        post = await self.find_by_id(post_id)
        if post is None:
            return
        await self.db.delete(post)
        await self.db.commit()

    async def delete_all(self) -> None:
        result = await self.db.execute(delete(Post))
        await self.db.commit()
        self.db.expunge_all()
        logger.info(f"Deleted all posts ({result.rowcount} rows)")

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(Post))
        return result.scalar_one()
