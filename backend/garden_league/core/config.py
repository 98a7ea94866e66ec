"""Configuration settings for the Garden League API."""

from __future__ import annotations

import os
import sys
from typing import List, Literal, Optional

from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()

# Substrings that mark a placeholder signing secret
WEAK_SECRET_MARKERS = ("dev_secret", "please_change", "changeme", "secret_key")
MIN_SECRET_LENGTH = 32


def _running_in_production() -> bool:
    return os.getenv("ENVIRONMENT", "").lower() == "production"


class Settings(BaseSettings):
    """Runtime configuration, read from the environment and ``.env``."""

    # Application
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    cors_origins: str = Field(default="http://localhost:3000,http://127.0.0.1:3000")

    # Document store
    store_backend: Literal["memory", "firestore"] = Field(
        default="memory",
        description="Document store backend: in-memory for development, firestore for deployments",
    )
    firestore_project: Optional[str] = Field(
        default=None, description="GCP project id (defaults to ambient credentials)"
    )
    firestore_database: Optional[str] = Field(
        default=None, description="Firestore database id (defaults to '(default)')"
    )
    store_seed_file: Optional[str] = Field(
        default=None,
        description="JSON file used to seed the in-memory store on startup",
    )

    # Identity
    auth_backend: Literal["jwt", "firebase"] = Field(
        default="jwt",
        description="How bearer tokens are verified: shared-secret JWT or Firebase ID tokens",
    )
    jwt_secret_key: str = Field(
        default="dev_secret_key_please_change_in_production",
        description="Shared secret for verifying HS* tokens (jwt backend only)",
    )
    jwt_algorithm: str = Field(default="HS256")
    jwt_audience: Optional[str] = Field(default=None, description="Expected 'aud' claim")
    jwt_issuer: Optional[str] = Field(default=None, description="Expected 'iss' claim")

    # Rate limiting
    rate_limit_enabled: bool = Field(default=True)
    callable_rate_limit: str = Field(
        default="60/minute", description="slowapi limit applied to every callable route"
    )

    # League ranking
    rank_legacy_default: bool = Field(
        default=False,
        description=(
            "Report rank 1 instead of null when the caller's own member record "
            "is invalid (legacy behavior)"
        ),
    )
    parallel_membership_probe: bool = Field(
        default=False,
        description="Probe league memberships concurrently instead of one by one",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
        extra="forbid",
    )

    @property
    def cors_origins_list(self) -> List[str]:
        return [
            origin.strip() for origin in self.cors_origins.split(",") if origin.strip()
        ]

    @property
    def environment(self) -> str:
        """``production`` or ``dev``; anything else counts as dev."""
        return "production" if _running_in_production() else "dev"

    @model_validator(mode="after")
    def check_identity_secret(self) -> "Settings":
        """Refuse placeholder or short JWT secrets in production.

        Only applies to the jwt backend; Firebase tokens are verified against
        Google's public keys. Outside production a warning is printed instead.
        """
        if self.auth_backend != "jwt":
            return self

        secret = self.jwt_secret_key
        problems = []
        if any(marker in secret.lower() for marker in WEAK_SECRET_MARKERS):
            problems.append("JWT secret is a placeholder value")
        if len(secret) < MIN_SECRET_LENGTH:
            problems.append(
                f"JWT secret is {len(secret)} characters, "
                f"at least {MIN_SECRET_LENGTH} required"
            )

        if problems and _running_in_production():
            raise ValueError(
                "; ".join(problems) + ". Set JWT_SECRET_KEY to a strong secret."
            )
        for problem in problems:
            print(f"WARNING: {problem}", file=sys.stderr)
        return self

    @model_validator(mode="after")
    def check_seed_file(self) -> "Settings":
        if self.store_seed_file and self.store_backend != "memory":
            raise ValueError("STORE_SEED_FILE is only supported with STORE_BACKEND=memory")
        return self


def get_settings() -> Settings:
    return Settings()


# Created on first use so tests can build their own Settings first
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the process-wide settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
