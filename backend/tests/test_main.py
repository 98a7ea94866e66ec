"""
Test cases for application wiring: health, unauthenticated calls and rate limits.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from garden_league.core.store import DocumentStore
from garden_league.main import create_app

OPERATIONS = [
    "getMyLeague",
    "getMyProfile",
    "getMyGarden",
    "addPoints",
    "deleteAllPosts",
]


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["store_backend"] == "memory"


def test_health_degraded(settings):
    store = MagicMock(spec=DocumentStore)
    store.health_check = AsyncMock(return_value=False)
    store.close = AsyncMock()

    with TestClient(create_app(settings=settings, store=store)) as client:
        response = client.get("/health")

    assert response.json()["status"] == "degraded"


@pytest.fixture
def untouchable_store():
    store = MagicMock(spec=DocumentStore)
    store.close = AsyncMock()
    return store


@pytest.mark.parametrize("operation", OPERATIONS)
def test_unauthenticated_call_is_rejected(settings, untouchable_store, operation):
    app = create_app(settings=settings, store=untouchable_store)

    with TestClient(app) as client:
        response = client.post(f"/api/v1/{operation}", json={"data": {"amount": 5}})

    assert response.status_code == 401
    assert response.json() == {
        "error": {"status": "UNAUTHENTICATED", "message": "Authentication required"}
    }
    untouchable_store.list_documents.assert_not_called()
    untouchable_store.get_document.assert_not_called()
    untouchable_store.query_ordered.assert_not_called()
    untouchable_store.batch.assert_not_called()


@pytest.mark.parametrize("operation", OPERATIONS)
def test_invalid_token_is_rejected(client, make_token, operation):
    token = make_token("user-1", secret="wrong-secret-0123456789abcdef0123456789ab")

    response = client.post(
        f"/api/v1/{operation}",
        json={"data": None},
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 401
    assert response.json()["error"] == {
        "status": "UNAUTHENTICATED",
        "message": "Invalid authentication token",
    }


def test_rate_limit_comes_from_app_settings(settings, store, auth_headers):
    limited = settings.model_copy(
        update={"rate_limit_enabled": True, "callable_rate_limit": "1/minute"}
    )
    app = create_app(settings=limited, store=store)

    with TestClient(app) as client:
        responses = [
            client.post(
                "/api/v1/getMyGarden", json={"data": None}, headers=auth_headers()
            )
            for _ in range(3)
        ]

    assert [response.status_code for response in responses] == [200, 429, 429]
    assert responses[-1].json()["error"]["status"] == "RESOURCE_EXHAUSTED"


def test_rate_limit_disabled_by_settings(settings, store, auth_headers):
    relaxed = settings.model_copy(update={"callable_rate_limit": "1/minute"})
    app = create_app(settings=relaxed, store=store)

    with TestClient(app) as client:
        statuses = [
            client.post(
                "/api/v1/getMyGarden", json={"data": None}, headers=auth_headers()
            ).status_code
            for _ in range(3)
        ]

    assert statuses == [200, 200, 200]


def test_injected_empty_store_is_used(settings, store, auth_headers):
    app = create_app(settings=settings, store=store)
    store.set_document("leagues/L", {"name": "Sprouts"})
    store.set_document("leagues/L/members/U1", {"point": 3, "displayName": "Alice"})

    assert app.state.store is store
    with TestClient(app) as client:
        response = client.post(
            "/api/v1/getMyLeague", json={"data": None}, headers=auth_headers("U1")
        )

    assert response.json()["result"]["leagueId"] == "L"
    assert response.json()["result"]["rank"] == 1


def test_call_id_is_echoed(client, auth_headers):
    headers = {**auth_headers(), "X-Call-Id": "call-123"}

    response = client.post("/api/v1/getMyGarden", json={"data": None}, headers=headers)

    assert response.headers["X-Call-Id"] == "call-123"


def test_call_id_is_generated(client, auth_headers):
    response = client.post(
        "/api/v1/getMyGarden", json={"data": None}, headers=auth_headers()
    )

    assert len(response.headers["X-Call-Id"]) == 32
