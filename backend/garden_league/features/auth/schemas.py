"""Pydantic schemas for caller identity."""

from pydantic import BaseModel, Field


class CallerIdentity(BaseModel):
    """Authenticated caller, as supplied by the identity provider."""

    uid: str = Field(..., min_length=1, description="Unique user id")
    display_name: str | None = Field(None, description="Display name claim")
    email: str | None = Field(None, description="Email claim")
