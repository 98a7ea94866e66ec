"""Points feature module."""

from .schemas import AddPointsResponse
from .service import PointsService, parse_amount
from .router import router as points_router

__all__ = ["AddPointsResponse", "PointsService", "parse_amount", "points_router"]
