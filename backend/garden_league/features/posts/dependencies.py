"""Dependencies for the posts feature."""

from typing import Annotated

from fastapi import Depends

from garden_league.core.dependencies import StoreDep
from .repository import DocumentPostRepository, PostRepositoryInterface
from .service import PostService


def get_post_repository(store: StoreDep) -> PostRepositoryInterface:
    return DocumentPostRepository(store)


def get_post_service(
    repository: Annotated[PostRepositoryInterface, Depends(get_post_repository)],
) -> PostService:
    return PostService(repository)


PostServiceDep = Annotated[PostService, Depends(get_post_service)]

__all__ = ["get_post_repository", "get_post_service", "PostServiceDep"]
