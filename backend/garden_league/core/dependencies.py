"""Core dependencies for FastAPI application."""

from typing import Annotated

from fastapi import Depends, Request

from .config import Settings
from .store import DocumentStore


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


def get_store(request: Request) -> DocumentStore:
    """Document store handle shared by all requests of this application."""
    return request.app.state.store


# Type aliases for cleaner dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
StoreDep = Annotated[DocumentStore, Depends(get_store)]

__all__ = ["get_app_settings", "get_store", "SettingsDep", "StoreDep"]
