"""League service: resolves the caller's league and rank.

Algorithm:
1. Scan every league (no pagination).
2. Probe each league's members sub-collection for the caller's uid, in
   enumeration order; the first league holding the caller wins.
3. Read that league's members ordered by points and rank the caller among
   members with a non-blank display name.

Cost is one point lookup per league scanned before the match plus one ordered
scan of the matched league's members. Ties in points, and the choice between
several leagues holding the same user, follow store order and are not
deterministic across backends.
"""

import asyncio
from typing import Optional

import structlog

from garden_league.core.decorators import service_error_handler
from garden_league.core.store import DocumentSnapshot
from .models import RankResult, rank_among_valid_members
from .repository import LeagueRepositoryInterface
from .schemas import MyLeagueResponse
from .transformers import rank_result_to_response

logger = structlog.get_logger(__name__)


class LeagueService:
    """Read-only ranking over league member documents."""

    def __init__(
        self,
        repository: LeagueRepositoryInterface,
        legacy_rank_default: bool = False,
        parallel_membership_probe: bool = False,
    ):
        """Initialize league service.

        :param repository: League repository
        :param legacy_rank_default: Report rank 1 instead of None when the
            caller's own member record is invalid
        :param parallel_membership_probe: Issue all membership lookups at once;
            the winner is still chosen by enumeration order
        """
        self.repository = repository
        self.legacy_rank_default = legacy_rank_default
        self.parallel_membership_probe = parallel_membership_probe

    async def _find_member_league(self, uid: str) -> Optional[DocumentSnapshot]:
        leagues = await self.repository.list_leagues()

        if self.parallel_membership_probe:
            memberships = await asyncio.gather(
                *(self.repository.has_member(league.id, uid) for league in leagues)
            )
            return next(
                (league for league, is_member in zip(leagues, memberships) if is_member),
                None,
            )

        for league in leagues:
            if await self.repository.has_member(league.id, uid):
                return league
        return None

    async def resolve_rank(self, uid: str) -> RankResult:
        """Locate the caller's league and rank them among its valid members."""
        league = await self._find_member_league(uid)
        if league is None:
            logger.info("User not found in any league", uid=uid)
            return RankResult.unmatched()

        members = await self.repository.get_members_by_points(league.id)
        rank, valid_count = rank_among_valid_members(
            members, uid, legacy_default=self.legacy_rank_default
        )

        if not any(member.user_id == uid and member.is_valid for member in members):
            logger.warning(
                "Caller's member record is not ranked",
                uid=uid,
                league_id=league.id,
                reported_rank=rank,
            )

        logger.info(
            "User found in league",
            uid=uid,
            league_id=league.id,
            rank=rank,
            member_count=valid_count,
        )

        league_fields = league.to_dict() or {}
        league_fields["memberCount"] = valid_count
        return RankResult(
            league_id=league.id,
            league=league_fields,
            rank=rank,
            member_count=valid_count,
        )

    @service_error_handler("LeagueService")
    async def get_my_league(self, uid: str) -> MyLeagueResponse:
        """Get the caller's league info with validity-filtered rank.

        :param uid: Authenticated caller id
        :returns: League info, or the all-null variant when in no league
        :raises StoreError: If any store read fails
        """
        logger.info("Getting league info", uid=uid)
        return rank_result_to_response(await self.resolve_rank(uid))
