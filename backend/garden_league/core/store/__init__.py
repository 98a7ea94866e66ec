"""Hierarchical document store backends."""

from .base import (
    DocumentSnapshot,
    DocumentStore,
    WriteBatch,
    is_document_path,
    join_path,
    parent_collection,
)
from .memory import InMemoryDocumentStore

__all__ = [
    "DocumentSnapshot",
    "DocumentStore",
    "WriteBatch",
    "InMemoryDocumentStore",
    "is_document_path",
    "join_path",
    "parent_collection",
    "build_store",
]


def build_store(settings) -> DocumentStore:
    """Create the store backend selected by ``settings.store_backend``."""
    if settings.store_backend == "firestore":
        # Imported lazily so the memory backend works without Google credentials
        from .firestore import FirestoreDocumentStore

        return FirestoreDocumentStore(
            project=settings.firestore_project,
            database=settings.firestore_database,
        )
    if settings.store_seed_file:
        return InMemoryDocumentStore.from_json_file(settings.store_seed_file)
    return InMemoryDocumentStore()
