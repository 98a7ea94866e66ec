"""Pydantic schemas for the getMyGarden operation."""

from typing import Dict

from pydantic import BaseModel, Field


class GardenTile(BaseModel):
    stage: int = Field(0, ge=0, description="Growth stage, 0 = empty")


class GardenResponse(BaseModel):
    size: int = Field(..., description="Grid edge length")
    point: int = Field(..., description="Garden points")
    tiles: Dict[str, GardenTile] = Field(
        ..., description='Tiles keyed by "row,col"'
    )
