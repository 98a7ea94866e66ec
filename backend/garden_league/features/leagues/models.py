"""Domain models for league ranking."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from garden_league.core.store import DocumentSnapshot


@dataclass(frozen=True)
class MemberRecord:
    """A member document inside ``leagues/{leagueId}/members``."""

    user_id: str
    point: Any = None
    display_name: Any = None

    @classmethod
    def from_snapshot(cls, snapshot: DocumentSnapshot) -> "MemberRecord":
        return cls(
            user_id=snapshot.id,
            point=snapshot.get("point"),
            display_name=snapshot.get("displayName"),
        )

    @property
    def is_valid(self) -> bool:
        """Only members with a non-blank display name are ranked and counted."""
        return isinstance(self.display_name, str) and self.display_name.strip() != ""


@dataclass(frozen=True)
class RankResult:
    """Caller's league, rank and valid member count. Never persisted."""

    league_id: Optional[str]
    league: Optional[Dict[str, Any]]
    rank: Optional[int]
    member_count: int

    @classmethod
    def unmatched(cls) -> "RankResult":
        return cls(league_id=None, league=None, rank=None, member_count=0)

    @property
    def is_matched(self) -> bool:
        return self.league_id is not None


def rank_among_valid_members(
    members: Iterable[MemberRecord], user_id: str, legacy_default: bool = False
) -> Tuple[Optional[int], int]:
    """Rank ``user_id`` among the valid members of a points-descending list.

    Invalid members neither count nor take a rank. When the user's own record
    is invalid the rank stays unassigned: None, or 1 with ``legacy_default``.

    :returns: (rank, valid member count)
    """
    rank: Optional[int] = 1 if legacy_default else None
    valid_count = 0
    for member in members:
        if not member.is_valid:
            continue
        valid_count += 1
        if member.user_id == user_id:
            rank = valid_count
    return rank, valid_count
