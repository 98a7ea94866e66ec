"""Pydantic schemas for the deleteAllPosts operation."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DeleteAllPostsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool
    message: str
    deleted_count: int = Field(..., ge=0)
