"""Callable route for awarding points."""

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
from .schemas import AddPointsResponse
from .service import PointsService

router = APIRouter(responses=CALLABLE_ERROR_RESPONSES)


@router.post("/addPoints", response_model=CallableResponse[AddPointsResponse])
@callable_limit
@callable_boundary("Failed to add points")
async def add_points(
    request: Request,
    caller: CallerDep,
    body: Optional[CallableRequest] = None,
) -> CallableResponse[AddPointsResponse]:
    """Add ``data.amount`` points for the caller.

    The amount must be a positive number; the returned balance echoes it.
    """
    data = body.data if body is not None else None
    result = await PointsService().add_points(caller.uid, data)
    return CallableResponse[AddPointsResponse](result=result)
