"""
Test cases for the service error handler decorator.
"""

import pytest

from garden_league.core.decorators import service_error_handler
from garden_league.core.exceptions import ServiceException, StoreError, ValidationError


class DummyService:
    @service_error_handler("DummyService")
    async def echo(self, uid: str) -> str:
        return uid

    @service_error_handler("DummyService")
    async def bad_value(self, uid: str) -> None:
        raise ValueError("amount must be positive")

    @service_error_handler("DummyService")
    async def store_down(self, uid: str) -> None:
        raise StoreError("unavailable", path="leagues")

    @service_error_handler("DummyService")
    async def unexpected(self, uid: str) -> None:
        raise KeyError("point")


@pytest.fixture
def service():
    return DummyService()


async def test_returns_result(service):
    assert await service.echo("u1") == "u1"


async def test_value_error_becomes_validation_error(service):
    with pytest.raises(ValidationError) as exc_info:
        await service.bad_value("u1")

    error = exc_info.value
    assert error.message == "amount must be positive"
    assert error.service == "DummyService"
    assert error.operation == "bad_value"
    assert error.context["uid"] == "u1"


async def test_store_error_propagates_unchanged(service):
    with pytest.raises(StoreError) as exc_info:
        await service.store_down("u1")
    assert exc_info.value.context == {"path": "leagues"}


async def test_unexpected_error_is_wrapped(service):
    with pytest.raises(ServiceException) as exc_info:
        await service.unexpected("u1")

    error = exc_info.value
    assert type(error) is ServiceException
    assert isinstance(error.original_error, KeyError)
    assert str(error).startswith("[DummyService.unexpected]")
