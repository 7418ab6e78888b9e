"""Post Schemas — immutable Pydantic models for post requests and responses.

Invariants:
    - All models are frozen (no mutation after construction)
    - PostCreate requires both fields; any string is accepted
    - PostEdit fields are optional; None means "leave unchanged"
    - PostSearch.page is one-based; offset/limit are derived, size capped at MAX_PAGE_SIZE
    - PostResponse exposes only id, title, content
"""

from pydantic import BaseModel, ConfigDict

from hodolog.core.paging import search_page_limit, search_page_offset
from hodolog.core.repository_protocols import PostLike


class PostCreate(BaseModel):
    """Post creation request."""
    model_config = ConfigDict(frozen=True)

    title: str
    content: str


class PostEdit(BaseModel):
    """Partial edit — only supplied fields overwrite the stored post."""
    model_config = ConfigDict(frozen=True)

    title: str | None = None
    content: str | None = None

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)


class PostSearch(BaseModel):
    """One-based page request for newest-first listing."""
    model_config = ConfigDict(frozen=True)

    page: int = 1
    size: int = 10

    @property
    def offset(self) -> int:
        return search_page_offset(self.page, self.size)

    @property
    def limit(self) -> int:
        return search_page_limit(self.size)


class PostResponse(BaseModel):
    """Post response — public projection of a stored post."""
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    content: str

    @classmethod
    def from_post(cls, post: PostLike) -> "PostResponse":
        return cls(id=post.id, title=post.title, content=post.content)


class PostCreated(BaseModel):
    """Body returned after a successful create."""
    model_config = ConfigDict(frozen=True)

    id: int
