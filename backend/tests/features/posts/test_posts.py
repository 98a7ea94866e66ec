"""
Test cases for deleteAllPosts.
"""

from unittest.mock import AsyncMock

import pytest

from garden_league.core.exceptions import StoreError
from garden_league.features.posts.repository import DocumentPostRepository
from garden_league.features.posts.service import PostService

URL = "/api/v1/deleteAllPosts"


@pytest.fixture
def service(store):
    return PostService(DocumentPostRepository(store))


async def test_deletes_every_post(service, store):
    store.set_document("posts/p1", {"author": "a"})
    store.set_document("posts/p2", {"author": "b"})
    store.set_document("leagues/L", {"name": "Sprouts"})

    result = await service.delete_all_posts("user-1")

    assert result.success is True
    assert result.deleted_count == 2
    assert result.message == "Deleted 2 posts successfully"
    assert await store.list_documents("posts") == []
    assert (await store.get_document("leagues/L")).exists


async def test_posts_of_other_users_are_deleted(service, store):
    store.set_document("posts/p1", {"author": "someone-else"})

    result = await service.delete_all_posts("user-1")

    assert result.deleted_count == 1


async def test_empty_collection_commits_empty_batch(store, monkeypatch):
    batch = store.batch()
    monkeypatch.setattr(store, "batch", lambda: batch)
    service = PostService(DocumentPostRepository(store))

    result = await service.delete_all_posts("user-1")

    assert result.deleted_count == 0
    assert result.message == "Deleted 0 posts successfully"
    # Committing again fails only if the first commit happened
    with pytest.raises(StoreError):
        await batch.commit()


async def test_commit_failure_propagates(service, store, monkeypatch):
    store.set_document("posts/p1", {})
    batch = store.batch()
    monkeypatch.setattr(batch, "commit", AsyncMock(side_effect=StoreError("aborted")))
    monkeypatch.setattr(store, "batch", lambda: batch)

    with pytest.raises(StoreError):
        await service.delete_all_posts("user-1")

    assert (await store.get_document("posts/p1")).exists


def test_delete_all_posts_route(client, auth_headers, store):
    store.set_document("posts/p1", {"text": "hello"})

    response = client.post(URL, json={"data": None}, headers=auth_headers())

    assert response.status_code == 200
    assert response.json() == {
        "result": {
            "success": True,
            "message": "Deleted 1 posts successfully",
            "deletedCount": 1,
        }
    }


def test_delete_all_posts_empty(client, auth_headers):
    response = client.post(URL, json={"data": None}, headers=auth_headers())

    assert response.status_code == 200
    assert response.json()["result"]["deletedCount"] == 0
    assert response.json()["result"]["success"] is True
