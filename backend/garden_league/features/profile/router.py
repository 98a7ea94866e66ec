"""Callable route for the caller's profile."""

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
from .schemas import ProfileResponse
from .service import ProfileService

router = APIRouter(responses=CALLABLE_ERROR_RESPONSES)


@router.post("/getMyProfile", response_model=CallableResponse[ProfileResponse])
@callable_limit
@callable_boundary("Failed to get profile")
async def get_my_profile(
    request: Request,
    caller: CallerDep,
    body: Optional[CallableRequest] = None,
) -> CallableResponse[ProfileResponse]:
    """Get the caller's profile (counters are always zero)."""
    result = await ProfileService().get_my_profile(caller)
    return CallableResponse[ProfileResponse](result=result)
