"""Shared fixtures: an app wired to an in-memory store and locally minted tokens."""

from typing import Any, Dict, Iterable, Optional

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from garden_league.core.config import Settings
from garden_league.core.store import InMemoryDocumentStore
from garden_league.main import create_app

TEST_JWT_SECRET = "test-secret-0123456789abcdef0123456789abcdef"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_secret_key=TEST_JWT_SECRET,
        store_backend="memory",
        rate_limit_enabled=False,
    )


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_token():
    """Mint an HS256 token the test app accepts."""

    def _make(
        uid: str = "user-1",
        name: Optional[str] = None,
        email: Optional[str] = None,
        secret: str = TEST_JWT_SECRET,
        **extra: Any,
    ) -> str:
        claims: Dict[str, Any] = {"sub": uid, **extra}
        if name is not None:
            claims["name"] = name
        if email is not None:
            claims["email"] = email
        return jwt.encode(claims, secret, algorithm="HS256")

    return _make


@pytest.fixture
def auth_headers(make_token):
    def _headers(uid: str = "user-1", **claims: Any) -> Dict[str, str]:
        return {"Authorization": f"Bearer {make_token(uid, **claims)}"}

    return _headers


@pytest.fixture
def seed_league(store):
    """Add a league with ``(user_id, fields)`` members to the store."""

    def _seed(
        league_id: str,
        members: Iterable[tuple[str, Dict[str, Any]]],
        **league_fields: Any,
    ) -> None:
        store.set_document(f"leagues/{league_id}", league_fields)
        for user_id, fields in members:
            store.set_document(f"leagues/{league_id}/members/{user_id}", fields)

    return _seed
