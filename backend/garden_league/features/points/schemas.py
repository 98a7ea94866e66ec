"""Pydantic schemas for the addPoints operation."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AddPointsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool
    message: str
    new_balance: int | float
