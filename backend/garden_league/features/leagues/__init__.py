"""Leagues feature - caller's league membership and rank."""

from .models import MemberRecord, RankResult, rank_among_valid_members
from .repository import DocumentLeagueRepository, LeagueRepositoryInterface
from .schemas import MyLeagueResponse
from .service import LeagueService
from .router import router as leagues_router

__all__ = [
    "MemberRecord",
    "RankResult",
    "rank_among_valid_members",
    "DocumentLeagueRepository",
    "LeagueRepositoryInterface",
    "MyLeagueResponse",
    "LeagueService",
    "leagues_router",
]
