"""Callable-function wire protocol.

Requests carry their input as ``{"data": ...}``; successful responses are
``{"result": ...}`` and failures ``{"error": {"status": CODE, "message": ...}}``
with an HTTP status matching the code.
"""

import functools
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Generic, ParamSpec, TypeVar

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from slowapi.errors import RateLimitExceeded

from .exceptions import AuthenticationRequiredError, ServiceException, ValidationError

logger = structlog.get_logger(__name__)

P = ParamSpec("P")
R = TypeVar("R")
T = TypeVar("T")


class FunctionsErrorCode(str, Enum):
    """Error codes understood by callable-function clients."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    RESOURCE_EXHAUSTED = "RESOURCE_EXHAUSTED"
    INTERNAL = "INTERNAL"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    FunctionsErrorCode.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    FunctionsErrorCode.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    FunctionsErrorCode.RESOURCE_EXHAUSTED: status.HTTP_429_TOO_MANY_REQUESTS,
    FunctionsErrorCode.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class CallableError(Exception):
    """Caller-facing error of a callable operation."""

    def __init__(self, code: FunctionsErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def to_response(self) -> JSONResponse:
        return JSONResponse(
            status_code=self.code.http_status,
            content={"error": {"status": self.code.value, "message": self.message}},
        )


class CallableRequest(BaseModel):
    """Request envelope; ``data`` is None for operations without input."""

    data: Any = None


class CallableResponse(BaseModel, Generic[T]):
    """Response envelope."""

    result: T


def callable_boundary(
    failure_message: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Wrap a route body in the fail-fast error boundary.

    Maps domain exceptions onto caller-facing ``CallableError``s:
    unauthenticated calls to UNAUTHENTICATED, validation failures to
    INVALID_ARGUMENT and everything else to INTERNAL, prefixed with
    ``failure_message``. The original message is passed through to the
    caller.
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return await func(*args, **kwargs)
            except CallableError:
                raise
            except AuthenticationRequiredError as e:
                raise CallableError(FunctionsErrorCode.UNAUTHENTICATED, e.message) from e
            except ValidationError as e:
                raise CallableError(FunctionsErrorCode.INVALID_ARGUMENT, e.message) from e
            except ServiceException as e:
                raise CallableError(
                    FunctionsErrorCode.INTERNAL, f"{failure_message}: {e.message}"
                ) from e
            except Exception as e:
                logger.error(
                    "Unhandled error in callable operation",
                    operation=func.__name__,
                    error_type=e.__class__.__name__,
                    error_message=str(e),
                )
                raise CallableError(
                    FunctionsErrorCode.INTERNAL, f"{failure_message}: {e}"
                ) from e

        return wrapper

    return decorator


async def callable_error_handler(request: Request, exc: CallableError) -> JSONResponse:
    """FastAPI exception handler rendering the error envelope."""
    return exc.to_response()


async def authentication_error_handler(
    request: Request, exc: AuthenticationRequiredError
) -> JSONResponse:
    """Render identity failures raised by dependencies, before any route body runs."""
    logger.info(
        "Rejected unauthenticated call", path=request.url.path, reason=exc.message
    )
    return CallableError(FunctionsErrorCode.UNAUTHENTICATED, exc.message).to_response()


async def rate_limit_error_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Render slowapi rate limit rejections as RESOURCE_EXHAUSTED."""
    logger.warning("Rate limit exceeded", path=request.url.path, limit=str(exc.detail))
    return CallableError(
        FunctionsErrorCode.RESOURCE_EXHAUSTED, f"Rate limit exceeded: {exc.detail}"
    ).to_response()


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed envelopes are INVALID_ARGUMENT rather than FastAPI's 422."""
    return CallableError(
        FunctionsErrorCode.INVALID_ARGUMENT, "Invalid request body"
    ).to_response()


class ErrorDetail(BaseModel):
    status: FunctionsErrorCode
    message: str


class ErrorEnvelope(BaseModel):
    error: ErrorDetail


# OpenAPI documentation shared by every callable route
CALLABLE_ERROR_RESPONSES: Dict[int | str, Dict[str, Any]] = {
    code.http_status: {"model": ErrorEnvelope, "description": code.value}
    for code in FunctionsErrorCode
}
