"""Pydantic schemas for the getMyProfile operation."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProfileResponse(BaseModel):
    """Caller profile echoed from the identity; counters are not tracked yet."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    uid: str
    display_name: str
    email: str
    total_points: int = 0
    edu_points: int = 0
    job_points: int = 0
    completed_lessons: int = 0
