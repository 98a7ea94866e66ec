"""Caller identity feature module."""

from .schemas import CallerIdentity
from .service import (
    IdentityVerifier,
    JWTIdentityVerifier,
    FirebaseIdentityVerifier,
    build_identity_verifier,
)
from .dependencies import CallerDep, require_caller, get_optional_caller

__all__ = [
    "CallerIdentity",
    "IdentityVerifier",
    "JWTIdentityVerifier",
    "FirebaseIdentityVerifier",
    "build_identity_verifier",
    "CallerDep",
    "require_caller",
    "get_optional_caller",
]
