"""Post Routes — HTTP surface for PostService.

Invariants:
    - Routes hold no business logic; every handler is one PostService call
    - PostNotFound propagates to the global HodologError handler (404 envelope)
    - Listing uses one-based PostSearch paging (page, size query params)
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from hodolog.core.domain_types import PostId
from hodolog.core.paging import MAX_PAGE_SIZE
from hodolog.infrastructure.database import get_db
from hodolog.infrastructure.post_repository import SqlAlchemyPostRepository
from hodolog.schemas.post import (
    PostCreate, PostCreated, PostEdit, PostResponse, PostSearch,
)
from hodolog.services.post_service import PostService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/posts", tags=["posts"])


def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(SqlAlchemyPostRepository(db))


@router.post(
    "", response_model=PostCreated,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    body: PostCreate, service: PostService = Depends(get_post_service),
):
    """Create a post."""
    post_id = await service.write(body)
    return PostCreated(id=post_id)


@router.get("", response_model=list[PostResponse])
async def list_posts(
    page: int = Query(1, ge=1),
    size: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    service: PostService = Depends(get_post_service),
):
    """List posts newest first."""
    return await service.get_list_by_search(PostSearch(page=page, size=size))


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: int, service: PostService = Depends(get_post_service),
):
    return await service.get(PostId(post_id))


@router.patch("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def edit_post(
    post_id: int,
    body: PostEdit,
    service: PostService = Depends(get_post_service),
):
    """Partially update a post; omitted fields are left unchanged."""
    await service.edit(PostId(post_id), body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int, service: PostService = Depends(get_post_service),
):
    await service.delete(PostId(post_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
