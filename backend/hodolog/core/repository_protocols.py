"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Post persistence accessed only through PostRepository
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, the in-memory test fake needs no base class
    - Async in Protocol: implementations do IO; the pure paging and edit helpers
      stay sync and the service orchestrates the awaits around them
    - delete_by_id tolerates a missing id; not-found is signalled by PostService only
    - new() builds an unsaved post of the implementation's own type (id None)
"""

from typing import Protocol, Sequence

from hodolog.core.domain_types import PostId


class PostLike(Protocol):
    """Structural contract for Post objects handed around by the service.

    Keeps core helpers decoupled from the ORM model while still typed.
    """
    id: int | None
    title: str
    content: str


class PostRepository(Protocol):
    """Contract for post persistence — implemented by shell."""
    def new(self, title: str, content: str) -> PostLike: ...
    async def save(self, post: PostLike) -> PostLike: ...
    async def save_all(self, posts: Sequence[PostLike]) -> list[PostLike]: ...
    async def find_by_id(self, post_id: PostId) -> PostLike | None: ...
    async def find_all(self) -> list[PostLike]: ...
    async def find_newest_first(
        self, offset: int, limit: int,
    ) -> list[PostLike]: ...
    async def delete_by_id(self, post_id: PostId) -> None: ...
    async def delete_all(self) -> None: ...
    async def count(self) -> int: ...
