"""
Test cases for LeagueService against an in-memory store.
"""

from unittest.mock import AsyncMock

import pytest

from garden_league.core.exceptions import StoreError
from garden_league.core.store import DocumentSnapshot
from garden_league.features.leagues.models import MemberRecord
from garden_league.features.leagues.repository import (
    DocumentLeagueRepository,
    LeagueRepositoryInterface,
)
from garden_league.features.leagues.service import LeagueService


@pytest.fixture
def repository(store):
    return DocumentLeagueRepository(store)


@pytest.fixture
def service(repository):
    return LeagueService(repository)


@pytest.fixture
def scenario_league(seed_league):
    seed_league(
        "L",
        [
            ("U1", {"point": 50, "displayName": "Alice"}),
            ("U2", {"point": 80, "displayName": "Bob"}),
            ("U3", {"point": 60, "displayName": ""}),
        ],
        name="Sprouts",
        memberCount=3,
    )


async def test_caller_ranked_among_valid_members(service, scenario_league):
    result = await service.get_my_league("U2")

    assert result.league_id == "L"
    assert result.rank == 1
    assert result.member_count == 2


async def test_member_count_overrides_stored_value(service, scenario_league):
    result = await service.get_my_league("U1")

    assert result.rank == 2
    assert result.league == {"name": "Sprouts", "memberCount": 2}


async def test_caller_in_no_league(service, scenario_league):
    result = await service.get_my_league("nobody")

    assert result.league_id is None
    assert result.league is None
    assert result.rank is None
    assert result.member_count == 0


async def test_no_leagues_at_all(service):
    result = await service.get_my_league("U1")

    assert result.league_id is None
    assert result.member_count == 0


async def test_invalid_caller_has_no_rank(service, scenario_league):
    result = await service.get_my_league("U3")

    assert result.league_id == "L"
    assert result.rank is None
    assert result.member_count == 2


async def test_invalid_caller_legacy_rank(repository, scenario_league):
    service = LeagueService(repository, legacy_rank_default=True)

    result = await service.get_my_league("U3")

    assert result.rank == 1
    assert result.member_count == 2


async def test_member_without_point_is_not_ranked(service, seed_league):
    # A member lacking ``point`` is dropped by the ordered query
    seed_league(
        "L",
        [
            ("U1", {"point": 10, "displayName": "Alice"}),
            ("U2", {"displayName": "Bob"}),
        ],
    )

    result = await service.get_my_league("U2")

    assert result.league_id == "L"
    assert result.rank is None
    assert result.member_count == 1


async def test_first_league_in_enumeration_order_wins(service, seed_league):
    seed_league("A", [("U1", {"point": 5, "displayName": "Alice"})], name="first")
    seed_league("B", [("U1", {"point": 500, "displayName": "Alice"})], name="second")

    result = await service.get_my_league("U1")

    assert result.league_id == "A"
    assert result.league["name"] == "first"


async def test_empty_league_document_reports_member_count(service, seed_league):
    seed_league("L", [("U1", {"point": 1, "displayName": "Alice"})])

    result = await service.get_my_league("U1")

    assert result.league == {"memberCount": 1}


async def test_repeated_calls_are_identical(service, scenario_league):
    first = await service.get_my_league("U2")
    second = await service.get_my_league("U2")

    assert first == second


def _league(league_id: str) -> DocumentSnapshot:
    return DocumentSnapshot(id=league_id, path=f"leagues/{league_id}", data={})


@pytest.fixture
def mock_repository():
    repository = AsyncMock(spec=LeagueRepositoryInterface)
    repository.list_leagues.return_value = [_league("A"), _league("B"), _league("C")]
    repository.has_member.side_effect = lambda league_id, uid: league_id in {"B", "C"}
    repository.get_members_by_points.return_value = [
        MemberRecord("U1", 10, "Alice")
    ]
    return repository


async def test_sequential_probe_stops_at_first_match(mock_repository):
    service = LeagueService(mock_repository)

    result = await service.get_my_league("U1")

    assert result.league_id == "B"
    probed = [call.args[0] for call in mock_repository.has_member.await_args_list]
    assert probed == ["A", "B"]
    mock_repository.get_members_by_points.assert_awaited_once_with("B")


async def test_parallel_probe_keeps_enumeration_order(mock_repository):
    service = LeagueService(mock_repository, parallel_membership_probe=True)

    result = await service.get_my_league("U1")

    assert result.league_id == "B"
    assert mock_repository.has_member.await_count == 3
    mock_repository.get_members_by_points.assert_awaited_once_with("B")


async def test_store_failure_propagates(mock_repository):
    mock_repository.has_member.side_effect = StoreError("deadline exceeded")
    service = LeagueService(mock_repository)

    with pytest.raises(StoreError):
        await service.get_my_league("U1")

    mock_repository.get_members_by_points.assert_not_awaited()


async def test_uid_that_is_not_a_path_segment_is_a_store_failure(
    service, scenario_league
):
    with pytest.raises(StoreError) as exc_info:
        await service.get_my_league("U1/evil")

    assert "Invalid path segment" in exc_info.value.message


async def test_membership_probe_reads_member_document(store, scenario_league):
    repository = DocumentLeagueRepository(store)

    assert await repository.has_member("L", "U1") is True
    assert await repository.has_member("L", "nobody") is False
