"""Posts feature module."""

from .repository import DocumentPostRepository, PostRepositoryInterface
from .schemas import DeleteAllPostsResponse
from .service import PostService
from .router import router as posts_router

__all__ = [
    "DocumentPostRepository",
    "PostRepositoryInterface",
    "DeleteAllPostsResponse",
    "PostService",
    "posts_router",
]
