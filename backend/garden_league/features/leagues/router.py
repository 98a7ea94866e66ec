"""Callable route for league ranking."""

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
from .dependencies import LeagueServiceDep
from .schemas import MyLeagueResponse

router = APIRouter(responses=CALLABLE_ERROR_RESPONSES)


@router.post("/getMyLeague", response_model=CallableResponse[MyLeagueResponse])
@callable_limit
@callable_boundary("Failed to get league info")
async def get_my_league(
    request: Request,
    caller: CallerDep,
    service: LeagueServiceDep,
    body: Optional[CallableRequest] = None,
) -> CallableResponse[MyLeagueResponse]:
    """Get the caller's league, rank and valid member count.

    Members without a display name are excluded from both the rank and the
    count. A caller in no league gets ``leagueId``, ``league`` and ``rank``
    set to null and ``memberCount`` 0.
    """
    result = await service.get_my_league(caller.uid)
    return CallableResponse[MyLeagueResponse](result=result)
