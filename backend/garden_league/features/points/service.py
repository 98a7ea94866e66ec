"""Points service.

No balance is stored yet: ``newBalance`` echoes the requested amount and the
store is never touched.
"""

import math
from typing import Any

import structlog

from garden_league.core.decorators import service_error_handler
from garden_league.core.exceptions import ValidationError
from .schemas import AddPointsResponse

logger = structlog.get_logger(__name__)


def parse_amount(data: Any) -> int | float:
    """Extract a positive, finite numeric ``amount`` from the call data.

    Booleans are rejected even though they are ints in Python. Whole floats
    are normalized to int so ``5.0`` reads back as ``5``.
    """
    amount = data.get("amount") if isinstance(data, dict) else None
    if (
        isinstance(amount, bool)
        or not isinstance(amount, (int, float))
        or not math.isfinite(amount)
        or amount <= 0
    ):
        raise ValidationError(
            "Invalid amount",
            service="PointsService",
            operation="add_points",
            field="amount",
            value=amount,
        )
    if isinstance(amount, float) and amount.is_integer():
        return int(amount)
    return amount


class PointsService:
    @service_error_handler("PointsService")
    async def add_points(self, uid: str, data: Any) -> AddPointsResponse:
        """Validate and acknowledge a point award.

        :raises ValidationError: If amount is missing, non-numeric or not positive
        """
        amount = parse_amount(data)
        logger.info("Adding points", uid=uid, amount=amount)
        return AddPointsResponse(
            success=True,
            message=f"Added {amount} points successfully",
            new_balance=amount,
        )
