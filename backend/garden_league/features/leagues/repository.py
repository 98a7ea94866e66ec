"""Repository for league and member documents.

Layout: ``leagues/{leagueId}`` holds league documents and
``leagues/{leagueId}/members/{userId}`` their members.
"""

from abc import ABC, abstractmethod
from typing import List

from garden_league.core.store import DocumentSnapshot, DocumentStore, join_path
from .models import MemberRecord

LEAGUES_COLLECTION = "leagues"
MEMBERS_COLLECTION = "members"


class LeagueRepositoryInterface(ABC):
    """Read-only access to leagues and their members."""

    @abstractmethod
    async def list_leagues(self) -> List[DocumentSnapshot]:
        """All league documents in store enumeration order."""
        pass

    @abstractmethod
    async def has_member(self, league_id: str, user_id: str) -> bool:
        """Whether a member document keyed by ``user_id`` exists in the league."""
        pass

    @abstractmethod
    async def get_members_by_points(self, league_id: str) -> List[MemberRecord]:
        """All members of the league ordered by ``point`` descending."""
        pass


class DocumentLeagueRepository(LeagueRepositoryInterface):
    """League repository over a ``DocumentStore``."""

    def __init__(self, store: DocumentStore):
        self.store = store

    @staticmethod
    def _members_path(league_id: str) -> str:
        return join_path(LEAGUES_COLLECTION, league_id, MEMBERS_COLLECTION)

    async def list_leagues(self) -> List[DocumentSnapshot]:
        return await self.store.list_documents(LEAGUES_COLLECTION)

    async def has_member(self, league_id: str, user_id: str) -> bool:
        snapshot = await self.store.get_document(
            join_path(LEAGUES_COLLECTION, league_id, MEMBERS_COLLECTION, user_id)
        )
        return snapshot.exists

    async def get_members_by_points(self, league_id: str) -> List[MemberRecord]:
        snapshots = await self.store.query_ordered(
            self._members_path(league_id), "point", descending=True
        )
        return [MemberRecord.from_snapshot(snapshot) for snapshot in snapshots]
