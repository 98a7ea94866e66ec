"""Dependencies for the leagues feature."""

from typing import Annotated

from fastapi import Depends

from garden_league.core.dependencies import SettingsDep, StoreDep
from .repository import DocumentLeagueRepository, LeagueRepositoryInterface
from .service import LeagueService


def get_league_repository(store: StoreDep) -> LeagueRepositoryInterface:
    """Get league repository instance.

    :param store: Document store handle
    :returns: League repository implementation
    """
    return DocumentLeagueRepository(store)


def get_league_service(
    repository: Annotated[LeagueRepositoryInterface, Depends(get_league_repository)],
    settings: SettingsDep,
) -> LeagueService:
    """Get league service instance configured from settings."""
    return LeagueService(
        repository,
        legacy_rank_default=settings.rank_legacy_default,
        parallel_membership_probe=settings.parallel_membership_probe,
    )


# Type aliases for cleaner dependency injection
LeagueServiceDep = Annotated[LeagueService, Depends(get_league_service)]

__all__ = ["get_league_repository", "get_league_service", "LeagueServiceDep"]
