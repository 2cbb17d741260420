"""Thin Firestore REST API client (no firebase-admin).

Uses google-auth for service account tokens and Firestore REST v1.
All HTTP calls use httpx.AsyncClient so they do not block the event loop.
The surface mirrors the Firebase Admin client for the operations we use:
documents and nested collections, single-filter queries, batch reads and
atomic batched writes with preconditions and server timestamps.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator, Iterable
from typing import Any
from urllib.parse import quote

import httpx

from coffeetasks.infrastructure.firebase._rest_encoding import (
    _encode_value,
    decode_fields,
    encode_document,
)

FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
IDENTITY_TOOLKIT_SCOPE = "https://www.googleapis.com/auth/identitytoolkit"
_BASE = "https://firestore.googleapis.com/v1"

# Firestore rejects commits with more writes than this.
MAX_BATCH_WRITES = 500
_LIST_PAGE_SIZE = 300


class _ServerTimestamp:
    """Sentinel: replaced by the commit time on the server."""

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()


def _get_credentials(key_dict: dict, scopes: list[str] | None = None):
    """Return google.oauth2.service_account.Credentials for Firestore (and Auth)."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=scopes or [FIRESTORE_SCOPE]
    )


def _get_access_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


class DocumentExistsError(Exception):
    """Raised on 409: document ID already exists (create or exists=false precondition)."""


class DocumentNotFoundError(Exception):
    """Raised when an update targets a document that does not exist."""


async def _request_async(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    body: dict | None = None,
    access_token: str | None = None,
) -> Any:
    """Perform async HTTP request to Firestore REST API. 404 returns None."""
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    if method == "GET":
        resp = await client.get(url, headers=headers)
    elif method == "POST":
        resp = await client.post(url, headers=headers, json=body)
    else:
        raise ValueError(f"Unsupported method: {method!r}")
    if resp.status_code == 404:
        return None
    if resp.status_code == 409:
        raise DocumentExistsError("Document already exists")
    if resp.status_code not in (200, 204):
        resp.raise_for_status()
    raw = resp.content
    return json.loads(raw.decode()) if raw else {}


def _split_transforms(data: dict[str, Any]) -> tuple[dict[str, Any], list[dict]]:
    """Separate SERVER_TIMESTAMP sentinels (top-level only) into field transforms."""
    fields: dict[str, Any] = {}
    transforms: list[dict] = []
    for key, value in data.items():
        if value is SERVER_TIMESTAMP:
            transforms.append({"fieldPath": key, "setToServerValue": "REQUEST_TIME"})
        else:
            fields[key] = value
    return fields, transforms


def _build_write(
    name: str,
    data: dict[str, Any],
    *,
    mask: Iterable[str] | None = None,
    exists: bool | None = None,
) -> dict:
    """Build one Write for :commit (update + optional mask/precondition/transforms)."""
    fields, transforms = _split_transforms(data)
    write: dict[str, Any] = {"update": {"name": name, **encode_document(fields)}}
    if mask is not None:
        write["updateMask"] = {"fieldPaths": list(mask)}
    if exists is not None:
        write["currentDocument"] = {"exists": exists}
    if transforms:
        write["updateTransforms"] = transforms
    return write


class DocumentSnapshot:
    """Snapshot of a document (id + data)."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    def to_dict(self) -> dict:
        return self._data


def _snapshot_from_document(doc: dict) -> DocumentSnapshot:
    name = doc.get("name", "")
    doc_id = name.split("/")[-1] if name else ""
    return DocumentSnapshot(doc_id, decode_fields(doc.get("fields")))


class DocumentReference:
    """Reference to a single document; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path

    @property
    def id(self) -> str:
        return self._path.split("/")[-1]

    @property
    def path(self) -> str:
        """Full resource name (projects/.../documents/...)."""
        return self._path

    def collection(self, collection_id: str) -> "CollectionReference":
        """Nested collection under this document."""
        return CollectionReference(self._client, f"{self._path}/{collection_id}")

    async def _commit_one(self, write: dict) -> None:
        await self._client.commit_writes([write])

    async def set(self, data: dict[str, Any], merge: bool = False) -> None:
        """Create or overwrite the document.

        With merge=True only the given top-level fields are written and the
        rest of an existing document is kept.
        """
        mask = list(data.keys()) if merge else None
        if mask is not None:
            mask = [k for k in mask if data[k] is not SERVER_TIMESTAMP]
        await self._commit_one(_build_write(self._path, data, mask=mask))

    async def update(self, data: dict[str, Any]) -> None:
        """Write the given top-level fields; fail if the document does not exist."""
        mask = [k for k, v in data.items() if v is not SERVER_TIMESTAMP]
        try:
            await self._commit_one(
                _build_write(self._path, data, mask=mask, exists=True)
            )
        except DocumentNotFoundError:
            raise DocumentNotFoundError(self._path) from None

    async def get(self) -> DocumentSnapshot | None:
        """Fetch the document; returns None if not found."""
        url = f"{_BASE}/{self._path}"
        out = await _request_async(
            self._client._http, url, access_token=await self._client.get_token()
        )
        if not out:
            return None
        return DocumentSnapshot(self.id, decode_fields(out.get("fields")))


_OP_MAP: dict[str, str] = {
    "==": "EQUAL",
    "!=": "NOT_EQUAL",
    "<": "LESS_THAN",
    "<=": "LESS_THAN_OR_EQUAL",
    ">": "GREATER_THAN",
    ">=": "GREATER_THAN_OR_EQUAL",
    "in": "IN",
    "not-in": "NOT_IN",
    "array_contains": "ARRAY_CONTAINS",
    "array-contains": "ARRAY_CONTAINS",
}


class _Query:
    """Single-filter query on a collection; runs via runQuery on the server."""

    def __init__(
        self,
        client: "FirestoreRESTClient",
        parent: str,
        collection_id: str,
        *,
        where_field: str | None = None,
        where_op: str = "EQUAL",
        where_value: Any = None,
    ):
        self._client = client
        self._parent = parent
        self._collection_id = collection_id
        self._where_field = where_field
        self._where_op = _OP_MAP.get(where_op, where_op)
        self._where_value = where_value

    def _structured_query(self) -> dict[str, Any]:
        structured: dict[str, Any] = {
            "from": [{"collectionId": self._collection_id}],
        }
        if self._where_field is not None:
            structured["where"] = {
                "fieldFilter": {
                    "field": {"fieldPath": self._where_field},
                    "op": self._where_op,
                    "value": _encode_value(self._where_value),
                }
            }
        return structured

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Execute the query and yield document snapshots."""
        url = f"{_BASE}/{self._parent}:runQuery"
        body = {"structuredQuery": self._structured_query()}
        resp = await _request_async(
            self._client._http,
            url,
            method="POST",
            body=body,
            access_token=await self._client.get_token(),
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        for item in items:
            if "document" not in item:
                continue
            yield _snapshot_from_document(item["document"])


class CollectionReference:
    """Reference to a collection (top-level or nested); matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path.rstrip("/")

    @property
    def id(self) -> str:
        return self._path.split("/")[-1]

    def document(self, document_id: str) -> DocumentReference:
        if not document_id or "/" in document_id:
            raise ValueError(f"Invalid document id: {document_id!r}")
        return DocumentReference(self._client, f"{self._path}/{document_id}")

    async def create(self, document_id: str, data: dict[str, Any]) -> None:
        """Create a document with the given ID (fail with DocumentExistsError if it exists)."""
        self.document(document_id)  # rejects empty ids and ids containing '/'
        url = f"{_BASE}/{self._path}?documentId={quote(document_id, safe='')}"
        await _request_async(
            self._client._http,
            url,
            method="POST",
            body=encode_document(data),
            access_token=await self._client.get_token(),
        )

    def where(self, field: str, op: str, value: Any) -> _Query:
        """Start a single-filter query; run it with .stream()."""
        parent = self._path.rsplit("/", 1)[0]
        return _Query(
            self._client,
            parent,
            self.id,
            where_field=field,
            where_op=op,
            where_value=value,
        )

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """List all documents in the collection (shallow), following page tokens."""
        page_token: str | None = None
        while True:
            url = f"{_BASE}/{self._path}?pageSize={_LIST_PAGE_SIZE}"
            if page_token:
                url += f"&pageToken={quote(page_token, safe='')}"
            out = await _request_async(
                self._client._http, url, access_token=await self._client.get_token()
            )
            if not out:
                return
            for doc in out.get("documents", []):
                yield _snapshot_from_document(doc)
            page_token = out.get("nextPageToken")
            if not page_token:
                return


class WriteBatch:
    """Atomic batch of writes committed with a single :commit call (all or nothing)."""

    def __init__(self, client: "FirestoreRESTClient") -> None:
        self._client = client
        self._writes: list[dict] = []

    def _add(self, write: dict) -> None:
        if len(self._writes) >= MAX_BATCH_WRITES:
            raise ValueError(f"A batch holds at most {MAX_BATCH_WRITES} writes")
        self._writes.append(write)

    def create(self, ref: DocumentReference, data: dict[str, Any]) -> "WriteBatch":
        """Create the document; the whole commit fails if it already exists."""
        self._add(_build_write(ref.path, data, exists=False))
        return self

    async def commit(self) -> None:
        """Apply all writes atomically. Empty batches are a no-op."""
        if not self._writes:
            return
        await self._client.commit_writes(self._writes)
        self._writes = []


class FirestoreRESTClient:
    """Lightweight Firestore client using REST API (no firebase-admin).

    Constructed explicitly (see client.create_firestore_client) and passed to
    repositories; nothing in the process holds it globally.
    """

    def __init__(
        self,
        project_id: str,
        credentials,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._project_id = project_id
        self._credentials = credentials
        self._prefix = f"projects/{project_id}/databases/(default)/documents"
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=30.0)
        self._owns_http = http_client is None

    @property
    def project_id(self) -> str:
        return self._project_id

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def get_token(self) -> str:
        """Return a valid access token; refreshes in thread pool to avoid blocking."""
        return await asyncio.to_thread(_get_access_token, self._credentials)

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, f"{self._prefix}/{collection_id}")

    def batch(self) -> WriteBatch:
        return WriteBatch(self)

    async def commit_writes(self, writes: list[dict]) -> None:
        """POST :commit. 409 -> DocumentExistsError, 404 -> DocumentNotFoundError."""
        url = f"{_BASE}/{self._prefix}:commit"
        out = await _request_async(
            self._http,
            url,
            method="POST",
            body={"writes": writes},
            access_token=await self.get_token(),
        )
        if out is None:
            raise DocumentNotFoundError("Commit targeted a missing document")

    async def get_all(
        self, refs: Iterable[DocumentReference]
    ) -> list[DocumentSnapshot]:
        """Fetch many documents in one call (:batchGet). Missing documents are omitted."""
        names = [ref.path for ref in refs]
        if not names:
            return []
        url = f"{_BASE}/{self._prefix}:batchGet"
        resp = await _request_async(
            self._http,
            url,
            method="POST",
            body={"documents": names},
            access_token=await self.get_token(),
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        return [
            _snapshot_from_document(item["found"]) for item in items if "found" in item
        ]
