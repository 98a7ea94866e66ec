"""Garden service.

Gardens are not persisted yet; every caller gets the same empty grid.
"""

import structlog

from garden_league.core.decorators import service_error_handler
from .schemas import GardenResponse, GardenTile

logger = structlog.get_logger(__name__)

GARDEN_SIZE = 3
GARDEN_POINT = 100


def empty_tiles(size: int = GARDEN_SIZE) -> dict[str, GardenTile]:
    return {f"{row},{col}": GardenTile(stage=0) for row in range(size) for col in range(size)}


class GardenService:
    @service_error_handler("GardenService")
    async def get_my_garden(self, uid: str) -> GardenResponse:
        logger.info("Getting garden", uid=uid)
        return GardenResponse(size=GARDEN_SIZE, point=GARDEN_POINT, tiles=empty_tiles())
