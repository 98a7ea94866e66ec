"""Repository for ``posts/{postId}`` documents."""

from abc import ABC, abstractmethod

from garden_league.core.store import DocumentStore

POSTS_COLLECTION = "posts"


class PostRepositoryInterface(ABC):
    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every post atomically.

        :returns: Number of posts deleted
        """
        pass


class DocumentPostRepository(PostRepositoryInterface):
    def __init__(self, store: DocumentStore):
        self.store = store

    async def delete_all(self) -> int:
        posts = await self.store.list_documents(POSTS_COLLECTION)
        batch = self.store.batch()
        for post in posts:
            batch.delete(post.path)
        # Committed even when empty
        await batch.commit()
        return len(batch)
