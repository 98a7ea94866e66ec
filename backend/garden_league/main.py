"""Main FastAPI application for the Garden League API."""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from garden_league import __version__
from garden_league.core import (
    DocumentStore,
    Settings,
    bind_call_context,
    build_store,
    get_global_settings,
    setup_logging,
)
from garden_league.core.callable import (
    CallableError,
    authentication_error_handler,
    callable_error_handler,
    rate_limit_error_handler,
    request_validation_error_handler,
)
from garden_league.core.exceptions import AuthenticationRequiredError
from garden_league.core.rate_limiter import configure_limiter
from garden_league.features.auth import IdentityVerifier, build_identity_verifier
from garden_league.features.garden import garden_router
from garden_league.features.leagues import leagues_router
from garden_league.features.points import points_router
from garden_league.features.posts import posts_router
from garden_league.features.profile import profile_router

logger = structlog.get_logger(__name__)

API_PREFIX = "/api/v1"
CALL_ID_HEADER = "X-Call-Id"

# OpenAPI tags metadata
tags_metadata = [
    {
        "name": "leagues",
        "description": "Caller's league membership and validity-filtered rank.",
    },
    {
        "name": "profile",
        "description": "Caller profile echoed from the identity token.",
    },
    {
        "name": "garden",
        "description": "Caller's garden grid (placeholder).",
    },
    {
        "name": "points",
        "description": "Point awards (acknowledged, not persisted).",
    },
    {
        "name": "posts",
        "description": "Bulk post maintenance.",
    },
    {
        "name": "health",
        "description": "Health check and system status endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting up Garden League API",
        store_backend=app.state.settings.store_backend,
        auth_backend=app.state.settings.auth_backend,
    )
    yield
    logger.info("Shutting down Garden League API")
    await app.state.store.close()


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DocumentStore] = None,
    identity_verifier: Optional[IdentityVerifier] = None,
) -> FastAPI:
    """Build the application.

    The store and identity verifier are created once here and shared by every
    request through ``app.state``; pass them in to substitute fakes.
    """
    settings = settings if settings is not None else get_global_settings()
    setup_logging(settings.log_level, debug=settings.debug)

    app = FastAPI(
        title="Garden League API",
        description="""
    Authenticated callable endpoints for a gamified learning app.

    Every operation is `POST /api/v1/{operation}` with body `{"data": ...}` and
    answers `{"result": ...}` or `{"error": {"status", "message"}}`.

    ## Authentication

    Send the identity provider's token as `Authorization: Bearer <token>`.
    Calls without a valid token fail with `UNAUTHENTICATED`.
    """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.state.settings = settings
    # An empty in-memory store is falsy, hence the explicit None checks
    app.state.store = store if store is not None else build_store(settings)
    app.state.identity_verifier = (
        identity_verifier
        if identity_verifier is not None
        else build_identity_verifier(settings)
    )

    app.state.limiter = configure_limiter(settings)

    app.add_exception_handler(CallableError, callable_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(AuthenticationRequiredError, authentication_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RateLimitExceeded, rate_limit_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)  # type: ignore[arg-type]

    @app.middleware("http")
    async def call_context_middleware(request: Request, call_next):
        """Bind the operation name and a call id to every log line of a call."""
        if not request.url.path.startswith(API_PREFIX):
            return await call_next(request)
        operation = request.url.path.rsplit("/", 1)[-1]
        call_id = bind_call_context(operation, request.headers.get(CALL_ID_HEADER))
        response = await call_next(request)
        response.headers[CALL_ID_HEADER] = call_id
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(leagues_router, prefix=API_PREFIX, tags=["leagues"])
    app.include_router(profile_router, prefix=API_PREFIX, tags=["profile"])
    app.include_router(garden_router, prefix=API_PREFIX, tags=["garden"])
    app.include_router(points_router, prefix=API_PREFIX, tags=["points"])
    app.include_router(posts_router, prefix=API_PREFIX, tags=["posts"])

    @app.get("/health", tags=["health"])
    async def health_check(request: Request) -> Dict[str, Any]:
        """
        Health check endpoint.

        Reports whether the document store is reachable. Used by load
        balancers and monitoring; requires no authentication.
        """
        store_ok = await request.app.state.store.health_check()
        return {
            "status": "healthy" if store_ok else "degraded",
            "version": __version__,
            "store_backend": settings.store_backend,
            "debug": settings.debug,
        }

    return app


app = create_app()
