"""In-memory document store for tests and local development.

Simplifications:
    - No persistence (data lost on restart)
    - Single process (no distribution)
    - Collections enumerate in insertion order
"""

import json
import numbers
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import structlog

from garden_league.core.exceptions import StoreError
from .base import (
    DocumentSnapshot,
    DocumentStore,
    WriteBatch,
    is_document_path,
    parent_collection,
    split_path,
)

logger = structlog.get_logger(__name__)

# Key under which a seed document lists its sub-collections
SUBCOLLECTIONS_KEY = "__collections__"


def _order_key(value: Any) -> Tuple[int, Any]:
    """Sort key following Firestore's cross-type ordering."""
    if value is None:
        return (0, 0)
    if isinstance(value, bool):
        return (1, value)
    if isinstance(value, numbers.Number):
        return (2, value)
    if isinstance(value, str):
        return (3, value)
    return (4, str(value))


class InMemoryWriteBatch(WriteBatch):
    def __init__(self, store: "InMemoryDocumentStore"):
        self._store = store
        self._deletes: List[str] = []
        self._committed = False

    def delete(self, path: str) -> None:
        if not is_document_path(path):
            raise ValueError(f"Not a document path: {path!r}")
        self._deletes.append(path)

    async def commit(self) -> None:
        if self._committed:
            raise StoreError("Batch already committed", operation="commit")
        self._committed = True
        for path in self._deletes:
            self._store._documents.pop(path, None)

    def __len__(self) -> int:
        return len(self._deletes)


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed hierarchical document store."""

    def __init__(self, seed: Optional[Dict[str, Any]] = None):
        self._documents: Dict[str, Dict[str, Any]] = {}
        if seed:
            self.load(seed)

    @classmethod
    def from_json_file(cls, path: str) -> "InMemoryDocumentStore":
        """Build a store seeded from a JSON tree (see ``load``)."""
        with Path(path).open(encoding="utf-8") as fh:
            seed = json.load(fh)
        store = cls(seed)
        logger.info("In-memory store seeded", seed_file=path, documents=len(store))
        return store

    def load(self, tree: Dict[str, Any], prefix: str = "") -> None:
        """Load a nested seed tree.

        The tree maps collection ids to ``{document_id: fields}``; a
        document's ``__collections__`` entry holds its sub-collections in the
        same shape.
        """
        for collection_id, documents in tree.items():
            collection_path = f"{prefix}/{collection_id}" if prefix else collection_id
            for document_id, fields in documents.items():
                fields = dict(fields)
                children = fields.pop(SUBCOLLECTIONS_KEY, None)
                document_path = f"{collection_path}/{document_id}"
                self.set_document(document_path, fields)
                if children:
                    self.load(children, prefix=document_path)

    def set_document(self, path: str, data: Dict[str, Any]) -> None:
        """Create or overwrite a document."""
        if not is_document_path(path):
            raise ValueError(f"Not a document path: {path!r}")
        self._documents["/".join(split_path(path))] = dict(data)

    def clear(self) -> None:
        """Clear all data. Useful for tests."""
        self._documents.clear()

    def __len__(self) -> int:
        return len(self._documents)

    def _snapshot(self, path: str) -> DocumentSnapshot:
        data = self._documents.get(path)
        return DocumentSnapshot(
            id=path.rsplit("/", 1)[-1],
            path=path,
            data=dict(data) if data is not None else None,
        )

    async def get_document(self, path: str) -> DocumentSnapshot:
        if not is_document_path(path):
            raise ValueError(f"Not a document path: {path!r}")
        return self._snapshot("/".join(split_path(path)))

    async def list_documents(self, collection_path: str) -> List[DocumentSnapshot]:
        collection_path = "/".join(split_path(collection_path))
        return [
            self._snapshot(path)
            for path in self._documents
            if parent_collection(path) == collection_path
        ]

    async def query_ordered(
        self, collection_path: str, field: str, descending: bool = True
    ) -> List[DocumentSnapshot]:
        snapshots = [
            snapshot
            for snapshot in await self.list_documents(collection_path)
            if field in snapshot.data
        ]
        # sorted() is stable: equal values keep insertion order
        return sorted(
            snapshots,
            key=lambda snapshot: _order_key(snapshot.data[field]),
            reverse=descending,
        )

    def batch(self) -> InMemoryWriteBatch:
        return InMemoryWriteBatch(self)
