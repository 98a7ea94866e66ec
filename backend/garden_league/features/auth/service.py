"""Bearer token verification.

Tokens are issued by an external identity provider; this module only
verifies them and turns their claims into a ``CallerIdentity``.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import firebase_admin
import structlog
from firebase_admin import auth as firebase_auth, exceptions as firebase_exceptions
from jose import JWTError, jwt

from garden_league.core.config import Settings
from garden_league.core.exceptions import AuthenticationRequiredError
from .schemas import CallerIdentity

logger = structlog.get_logger(__name__)

INVALID_TOKEN_MESSAGE = "Invalid authentication token"


def identity_from_claims(claims: Dict[str, Any]) -> CallerIdentity:
    """Build a caller identity from decoded token claims."""
    uid = claims.get("uid") or claims.get("sub") or claims.get("user_id")
    if not uid:
        raise AuthenticationRequiredError(INVALID_TOKEN_MESSAGE)
    return CallerIdentity(
        uid=str(uid),
        display_name=claims.get("name"),
        email=claims.get("email"),
    )


class IdentityVerifier(ABC):
    """Interface for bearer token verifiers."""

    @abstractmethod
    async def verify(self, token: str) -> CallerIdentity:
        """Verify ``token`` and return the caller.

        :raises AuthenticationRequiredError: If the token cannot be verified
        """
        pass


class JWTIdentityVerifier(IdentityVerifier):
    """Verify shared-secret JWTs with python-jose."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        audience: Optional[str] = None,
        issuer: Optional[str] = None,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.audience = audience
        self.issuer = issuer

    async def verify(self, token: str) -> CallerIdentity:
        try:
            claims = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
                options={"verify_aud": self.audience is not None},
            )
        except JWTError as e:
            logger.info("Rejected bearer token", reason=str(e))
            raise AuthenticationRequiredError(INVALID_TOKEN_MESSAGE) from e
        return identity_from_claims(claims)


class FirebaseIdentityVerifier(IdentityVerifier):
    """Verify Firebase ID tokens with firebase-admin."""

    def __init__(self, project_id: Optional[str] = None):
        options = {"projectId": project_id} if project_id else None
        try:
            self._app = firebase_admin.get_app()
        except ValueError:
            self._app = firebase_admin.initialize_app(options=options)

    async def verify(self, token: str) -> CallerIdentity:
        try:
            # verify_id_token may fetch Google's public certificates
            claims = await asyncio.to_thread(firebase_auth.verify_id_token, token, self._app)
        except (ValueError, firebase_exceptions.FirebaseError) as e:
            logger.info("Rejected Firebase ID token", reason=str(e))
            raise AuthenticationRequiredError(INVALID_TOKEN_MESSAGE) from e
        return identity_from_claims(claims)


def build_identity_verifier(settings: Settings) -> IdentityVerifier:
    """Create the verifier selected by ``settings.auth_backend``."""
    if settings.auth_backend == "firebase":
        return FirebaseIdentityVerifier(project_id=settings.firestore_project)
    return JWTIdentityVerifier(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        audience=settings.jwt_audience,
        issuer=settings.jwt_issuer,
    )
