"""Callable route for the caller's garden."""

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
from .schemas import GardenResponse
from .service import GardenService

router = APIRouter(responses=CALLABLE_ERROR_RESPONSES)


@router.post("/getMyGarden", response_model=CallableResponse[GardenResponse])
@callable_limit
@callable_boundary("Failed to get garden")
async def get_my_garden(
    request: Request,
    caller: CallerDep,
    body: Optional[CallableRequest] = None,
) -> CallableResponse[GardenResponse]:
    """Get the caller's garden: a fixed 3x3 grid of empty tiles."""
    result = await GardenService().get_my_garden(caller.uid)
    return CallableResponse[GardenResponse](result=result)
