"""Post Service — business operations over the PostRepository protocol.

Invariants:
    - The only layer that raises PostNotFound (get, edit, delete on a missing id)
    - Every read returns PostResponse projections, never ORM rows
    - get_list_by_page: zero-based page, PAGE_SIZE rows, newest first
    - get_list_by_search: one-based PostSearch page, caller-chosen size, newest first
    - edit merges only the supplied fields (core/post_editing.py)

Design Decisions:
    - Repository injected: the same service runs over SQLAlchemy or an in-memory fake
    - write returns the new id so HTTP callers can build a Location/body without a re-read
"""

import logging

from hodolog.core.domain_types import PostId
from hodolog.core.errors import PostNotFound
from hodolog.core.paging import PAGE_SIZE, fixed_page_offset
from hodolog.core.post_editing import apply_post_edit
from hodolog.core.repository_protocols import PostLike, PostRepository
from hodolog.schemas.post import PostCreate, PostEdit, PostResponse, PostSearch

logger = logging.getLogger(__name__)


class PostService:
    """Create, read, page, edit and delete blog posts."""

    def __init__(self, repository: PostRepository):
        self.repository = repository

    async def write(self, post_create: PostCreate) -> PostId:
        """Persist a new post and return its id."""
        post = await self.repository.save(
            self.repository.new(post_create.title, post_create.content),
        )
        logger.info(f"Created post {post.id}", extra={"post_id": post.id})
        return PostId(post.id)

    async def get(self, post_id: PostId) -> PostResponse:
        post = await self._get_or_raise(post_id)
        return PostResponse.from_post(post)

    async def get_list(self) -> list[PostResponse]:
        """All posts in creation order."""
        posts = await self.repository.find_all()
        return [PostResponse.from_post(p) for p in posts]

    async def get_list_by_page(self, page: int) -> list[PostResponse]:
        """Zero-based page of PAGE_SIZE posts, newest first. Past the end -> []."""
        posts = await self.repository.find_newest_first(
            fixed_page_offset(page), PAGE_SIZE,
        )
        return [PostResponse.from_post(p) for p in posts]

    async def get_list_by_search(self, search: PostSearch) -> list[PostResponse]:
        """One-based page of search.size posts, newest first."""
        posts = await self.repository.find_newest_first(
            search.offset, search.limit,
        )
        logger.debug(
            f"Listed {len(posts)} posts",
            extra={"page": search.page, "size": search.size},
        )
        return [PostResponse.from_post(p) for p in posts]

    async def edit(self, post_id: PostId, post_edit: PostEdit) -> None:
        """Overwrite only the fields present in post_edit."""
        post = await self._get_or_raise(post_id)
        written = apply_post_edit(post, post_edit.changes())
        if not written:
            return
        await self.repository.save(post)
        logger.info(
            f"Edited post {post_id}: {', '.join(written)}",
            extra={"post_id": post_id},
        )

    async def delete(self, post_id: PostId) -> None:
        await self._get_or_raise(post_id)
        await self.repository.delete_by_id(post_id)
        logger.info(f"Deleted post {post_id}", extra={"post_id": post_id})

    async def _get_or_raise(self, post_id: PostId) -> PostLike:
        post = await self.repository.find_by_id(post_id)
        if post is None:
            logger.warning(
                f"Post {post_id} not found", extra={"post_id": post_id},
            )
            raise PostNotFound(post_id)
        return post
