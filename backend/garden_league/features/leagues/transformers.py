"""Transformers between ranking domain models and API schemas."""

from .models import RankResult
from .schemas import MyLeagueResponse


def rank_result_to_response(result: RankResult) -> MyLeagueResponse:
    return MyLeagueResponse(
        league_id=result.league_id,
        league=result.league,
        rank=result.rank,
        member_count=result.member_count,
    )
