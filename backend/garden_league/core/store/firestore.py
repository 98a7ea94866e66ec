"""Google Cloud Firestore backend for the document store.

Firestore enumerates collections by document id and silently excludes
documents without the ordering field from ``order_by`` queries, which is the
contract ``DocumentStore.query_ordered`` describes.

Limits:
    - A single write batch holds at most 500 writes; larger commits fail and
      surface as ``StoreError``.
"""

import base64
import inspect
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional

import structlog
from google.api_core import exceptions as gcp_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import firestore
from google.cloud.firestore_v1.base_document import BaseDocumentReference

from garden_league.core.exceptions import StoreError
from .base import DocumentSnapshot, DocumentStore, WriteBatch

logger = structlog.get_logger(__name__)


@contextmanager
def _translate_errors(operation: str, path: str) -> Iterator[None]:
    """Re-raise Google client failures as StoreError."""
    try:
        yield
    except (gcp_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError) as e:
        raise StoreError(
            message=str(e),
            service="Firestore",
            operation=operation,
            path=path,
            original_error=e,
        ) from e


def _to_plain(value: Any) -> Any:
    """Replace Firestore-native field values with JSON-compatible ones.

    References become their path, geo points a latitude/longitude mapping
    and bytes base64 text. Timestamps are datetimes already.
    """
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    if isinstance(value, BaseDocumentReference):
        return value.path
    if isinstance(value, firestore.GeoPoint):
        return {"latitude": value.latitude, "longitude": value.longitude}
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    return value


def _to_snapshot(snapshot: firestore.DocumentSnapshot) -> DocumentSnapshot:
    return DocumentSnapshot(
        id=snapshot.id,
        path=snapshot.reference.path,
        data=_to_plain(snapshot.to_dict()) if snapshot.exists else None,
    )


class FirestoreWriteBatch(WriteBatch):
    def __init__(self, client: firestore.AsyncClient):
        self._client = client
        self._batch = client.batch()
        self._count = 0

    def delete(self, path: str) -> None:
        self._batch.delete(self._client.document(path))
        self._count += 1

    async def commit(self) -> None:
        with _translate_errors("commit", f"<batch of {self._count}>"):
            await self._batch.commit()

    def __len__(self) -> int:
        return self._count


class FirestoreDocumentStore(DocumentStore):
    """Document store backed by a Firestore ``AsyncClient``.

    The client is created lazily so that building the application does not
    require credentials until the first request touches the store.
    """

    def __init__(
        self,
        project: Optional[str] = None,
        database: Optional[str] = None,
        client: Optional[firestore.AsyncClient] = None,
    ):
        self._project = project
        self._database = database
        self._client = client

    @property
    def client(self) -> firestore.AsyncClient:
        if self._client is None:
            with _translate_errors("connect", "/"):
                self._client = firestore.AsyncClient(
                    project=self._project, database=self._database
                )
            logger.info(
                "Firestore client created",
                project=self._client.project,
                database=self._database or "(default)",
            )
        return self._client

    async def get_document(self, path: str) -> DocumentSnapshot:
        with _translate_errors("get_document", path):
            snapshot = await self.client.document(path).get()
        return _to_snapshot(snapshot)

    async def list_documents(self, collection_path: str) -> List[DocumentSnapshot]:
        with _translate_errors("list_documents", collection_path):
            return [
                _to_snapshot(snapshot)
                async for snapshot in self.client.collection(collection_path).stream()
            ]

    async def query_ordered(
        self, collection_path: str, field: str, descending: bool = True
    ) -> List[DocumentSnapshot]:
        direction = (
            firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
        )
        query = self.client.collection(collection_path).order_by(
            field, direction=direction
        )
        with _translate_errors("query_ordered", collection_path):
            return [_to_snapshot(snapshot) async for snapshot in query.stream()]

    def batch(self) -> FirestoreWriteBatch:
        return FirestoreWriteBatch(self.client)

    async def health_check(self) -> bool:
        try:
            async for _ in self.client.collections():
                break
            return True
        except (
            StoreError,
            gcp_exceptions.GoogleAPIError,
            auth_exceptions.GoogleAuthError,
        ) as e:
            logger.warning("Firestore health check failed", error=str(e))
            return False

    async def close(self) -> None:
        """Close the client transport; a later call creates a new client."""
        client, self._client = self._client, None
        if client is None:
            return
        # Depending on the transport, close() may return an awaitable
        result = client.close()
        if inspect.isawaitable(result):
            await result
