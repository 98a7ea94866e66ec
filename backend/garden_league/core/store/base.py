"""Document store abstraction.

The store is hierarchical: collections hold documents, documents may own
sub-collections. Paths alternate collection and document ids, so
``leagues`` is a collection path and ``leagues/L1/members/u1`` a document
path.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from garden_league.core.exceptions import InvalidPathError


def join_path(*segments: str) -> str:
    """Join path segments with ``/``, rejecting empty segments."""
    for segment in segments:
        if not segment or "/" in segment:
            raise InvalidPathError(
                f"Invalid path segment: {segment!r}", operation="join_path"
            )
    return "/".join(segments)


def split_path(path: str) -> List[str]:
    segments = path.strip("/").split("/")
    if any(not segment for segment in segments):
        raise InvalidPathError(f"Invalid path: {path!r}", path=path)
    return segments


def is_document_path(path: str) -> bool:
    return len(split_path(path)) % 2 == 0


def parent_collection(document_path: str) -> str:
    """Return the collection path a document lives in."""
    segments = split_path(document_path)
    if len(segments) % 2:
        raise ValueError(f"Not a document path: {document_path!r}")
    return "/".join(segments[:-1])


@dataclass(frozen=True)
class DocumentSnapshot:
    """Point-in-time copy of a single document."""

    id: str
    path: str
    data: Optional[Dict[str, Any]] = None

    @property
    def exists(self) -> bool:
        return self.data is not None

    def to_dict(self) -> Optional[Dict[str, Any]]:
        """Return a shallow copy of the document fields, or None if missing."""
        return dict(self.data) if self.data is not None else None

    def get(self, field: str, default: Any = None) -> Any:
        if self.data is None:
            return default
        return self.data.get(field, default)


class WriteBatch(ABC):
    """Group of writes committed atomically (all or nothing)."""

    @abstractmethod
    def delete(self, path: str) -> None:
        """Queue deletion of the document at ``path``."""
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Apply every queued write atomically."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        """Number of queued writes."""
        pass


class DocumentStore(ABC):
    """Interface for document store backends.

    Implementations raise ``StoreError`` for any failure of the underlying
    store. Enumeration order of ``list_documents`` is backend-defined.
    """

    @abstractmethod
    async def get_document(self, path: str) -> DocumentSnapshot:
        """Point lookup; returns a snapshot whose ``exists`` may be False."""
        pass

    @abstractmethod
    async def list_documents(self, collection_path: str) -> List[DocumentSnapshot]:
        """Full scan of a collection."""
        pass

    @abstractmethod
    async def query_ordered(
        self, collection_path: str, field: str, descending: bool = True
    ) -> List[DocumentSnapshot]:
        """Documents of a collection ordered by ``field``.

        Documents lacking ``field`` are not returned. Order among equal values
        is unspecified.
        """
        pass

    @abstractmethod
    def batch(self) -> WriteBatch:
        """Start a new atomic write batch."""
        pass

    async def health_check(self) -> bool:
        """Return True if the store is reachable."""
        return True

    async def close(self) -> None:
        """Release backend resources."""
        return None
