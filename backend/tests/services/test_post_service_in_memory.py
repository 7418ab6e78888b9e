"""Post Service over the in-memory repository — the Protocol is the only seam.

Tests cover:
    - The service works against any PostRepository implementation
    - edit with no supplied fields does not write back
    - delete asks the repository only after the existence check
    - write builds posts through the repository, so the fake never sees ORM rows
"""

import pytest

from hodolog.core.errors import PostNotFound
from hodolog.schemas.post import PostCreate, PostEdit, PostSearch
from hodolog.services.post_service import PostService
from tests.services.fake_post_repository import InMemoryPostRepository, StoredPost


@pytest.fixture
def repository():
    return InMemoryPostRepository()


@pytest.fixture
def service(repository):
    return PostService(repository)


async def test_write_assigns_increasing_ids(service):
    first = await service.write(PostCreate(title="a", content="1"))
    second = await service.write(PostCreate(title="b", content="2"))
    assert second > first


async def test_list_by_page_newest_first(service):
    for i in range(12):
        await service.write(PostCreate(title=f"post - {i}", content=""))

    page = await service.get_list_by_page(2)

    assert [p.title for p in page] == ["post - 1", "post - 0"]


async def test_negative_page_reads_as_first_page(service):
    for i in range(6):
        await service.write(PostCreate(title=f"post - {i}", content=""))

    assert await service.get_list_by_page(-3) == await service.get_list_by_page(0)


async def test_search_page_size_respected(service):
    for i in range(8):
        await service.write(PostCreate(title=f"post - {i}", content=""))

    page = await service.get_list_by_search(PostSearch(page=2, size=3))

    assert [p.title for p in page] == ["post - 4", "post - 3", "post - 2"]


async def test_empty_edit_is_noop(service, repository):
    post_id = await service.write(PostCreate(title="t", content="c"))
    saves_before = repository.saves

    await service.edit(post_id, PostEdit())

    assert repository.saves == saves_before
    result = await service.get(post_id)
    assert (result.title, result.content) == ("t", "c")


async def test_explicit_null_leaves_field_unchanged(service):
    post_id = await service.write(PostCreate(title="t", content="c"))

    await service.edit(post_id, PostEdit(title=None, content="new"))

    result = await service.get(post_id)
    assert (result.title, result.content) == ("t", "new")


async def test_delete_then_get_raises(service, repository):
    keep = await service.write(PostCreate(title="keep", content=""))
    drop = await service.write(PostCreate(title="drop", content=""))

    await service.delete(drop)

    assert await repository.count() == 1
    assert (await service.get(keep)).title == "keep"
    with pytest.raises(PostNotFound):
        await service.get(drop)


async def test_delete_twice_raises_second_time(service):
    post_id = await service.write(PostCreate(title="t", content="c"))
    await service.delete(post_id)

    with pytest.raises(PostNotFound):
        await service.delete(post_id)


async def test_write_uses_repository_post_type(service, repository):
    post_id = await service.write(PostCreate(title="t", content="c"))

    stored = await repository.find_by_id(post_id)
    assert type(stored) is StoredPost
    assert (stored.id, stored.title, stored.content) == (post_id, "t", "c")
