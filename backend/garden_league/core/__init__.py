"""Core infrastructure module.

This module exports core utilities used across features.
Never imports from features - only from external libraries.
"""

from .config import Settings, get_settings, get_global_settings
from .exceptions import (
    ServiceException,
    StoreError,
    InvalidPathError,
    ValidationError,
    AuthenticationRequiredError,
)
from .logging import setup_logging, bind_call_context, bind_caller
from .store import DocumentStore, DocumentSnapshot, InMemoryDocumentStore, build_store

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "get_global_settings",
    # Exceptions
    "ServiceException",
    "StoreError",
    "InvalidPathError",
    "ValidationError",
    "AuthenticationRequiredError",
    # Logging
    "setup_logging",
    "bind_call_context",
    "bind_caller",
    # Store
    "DocumentStore",
    "DocumentSnapshot",
    "InMemoryDocumentStore",
    "build_store",
]
