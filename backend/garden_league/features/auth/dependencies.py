"""Authentication dependencies for protecting callable routes."""

from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from garden_league.core.exceptions import AuthenticationRequiredError
from garden_league.core.logging import bind_caller
from .schemas import CallerIdentity
from .service import IdentityVerifier

# auto_error=False: a missing header is reported by require_caller instead
bearer_scheme = HTTPBearer(auto_error=False)


def get_identity_verifier(request: Request) -> IdentityVerifier:
    """Verifier the running application was built with."""
    return request.app.state.identity_verifier


async def get_optional_caller(
    credentials: Annotated[
        Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)
    ],
    verifier: Annotated[IdentityVerifier, Depends(get_identity_verifier)],
) -> Optional[CallerIdentity]:
    """Get the caller if a bearer token was sent."""
    if credentials is None:
        return None
    return await verifier.verify(credentials.credentials)


async def require_caller(
    caller: Annotated[Optional[CallerIdentity], Depends(get_optional_caller)],
) -> CallerIdentity:
    """Get the caller, failing the call if there is none."""
    if caller is None:
        raise AuthenticationRequiredError()
    bind_caller(caller.uid)
    return caller


CallerDep = Annotated[CallerIdentity, Depends(require_caller)]

__all__ = [
    "bearer_scheme",
    "get_identity_verifier",
    "get_optional_caller",
    "require_caller",
    "CallerDep",
]
