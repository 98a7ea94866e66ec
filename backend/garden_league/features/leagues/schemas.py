"""Pydantic schemas for the getMyLeague operation."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MyLeagueResponse(BaseModel):
    """Caller's league and rank; every field null/0 when in no league."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    league_id: Optional[str] = Field(None, description="Matched league id")
    league: Optional[Dict[str, Any]] = Field(
        None, description="League document fields with corrected memberCount"
    )
    rank: Optional[int] = Field(
        None, ge=1, description="1-based rank among valid members, by points"
    )
    member_count: int = Field(0, ge=0, description="Number of valid members")
