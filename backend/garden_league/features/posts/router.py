"""Callable route for bulk post deletion."""

from typing import Optional

from fastapi import APIRouter, Request

from garden_league.core.callable import (
    CALLABLE_ERROR_RESPONSES,
    CallableRequest,
    CallableResponse,
    callable_boundary,
)
from garden_league.core.rate_limiter import callable_limit
from garden_league.features.auth import CallerDep
from .dependencies import PostServiceDep
from .schemas import DeleteAllPostsResponse

router = APIRouter(responses=CALLABLE_ERROR_RESPONSES)


@router.post("/deleteAllPosts", response_model=CallableResponse[DeleteAllPostsResponse])
@callable_limit
@callable_boundary("Failed to delete posts")
async def delete_all_posts(
    request: Request,
    caller: CallerDep,
    service: PostServiceDep,
    body: Optional[CallableRequest] = None,
) -> CallableResponse[DeleteAllPostsResponse]:
    """Delete every post in the store (debugging tool, any authenticated caller)."""
    result = await service.delete_all_posts(caller.uid)
    return CallableResponse[DeleteAllPostsResponse](result=result)
