"""Posts service.

``delete_all_posts`` wipes the whole posts collection for any authenticated
caller. There is no ownership check, confirmation or undo.
"""

import structlog

from garden_league.core.decorators import service_error_handler
from .repository import PostRepositoryInterface
from .schemas import DeleteAllPostsResponse

logger = structlog.get_logger(__name__)


class PostService:
    def __init__(self, repository: PostRepositoryInterface):
        self.repository = repository

    @service_error_handler("PostService")
    async def delete_all_posts(self, uid: str) -> DeleteAllPostsResponse:
        """Delete every post in one atomic batch.

        :param uid: Caller requesting the deletion (logged only)
        :raises StoreError: If the scan or the batch commit fails
        """
        logger.warning("Deleting all posts", requested_by=uid)
        deleted = await self.repository.delete_all()
        logger.info("Deleted posts", requested_by=uid, deleted_count=deleted)
        return DeleteAllPostsResponse(
            success=True,
            message=f"Deleted {deleted} posts successfully",
            deleted_count=deleted,
        )
