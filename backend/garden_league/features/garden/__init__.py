"""Garden feature module."""

from .schemas import GardenResponse, GardenTile
from .service import GardenService
from .router import router as garden_router

__all__ = ["GardenResponse", "GardenTile", "GardenService", "garden_router"]
