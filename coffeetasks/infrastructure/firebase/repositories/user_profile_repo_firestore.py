"""Firestore-backed user profile repository (implements IUserProfileRepository)."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

from coffeetasks.infrastructure.firebase._rest_client import FirestoreRESTClient
from coffeetasks.infrastructure.firebase.collections import (
    COLLECTION_USERS,
    LEGACY_COLLECTION_USERS,
)


class FirestoreUserProfileRepository:
    """Profiles keyed by Firebase Auth uid in users/{uid}."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_USERS)

    async def get_raw(self, uid: str) -> dict[str, Any] | None:
        doc = await self._coll.document(uid).get()
        if not doc:
            return None
        return doc.to_dict()

    async def exists(self, uid: str) -> bool:
        return await self._coll.document(uid).get() is not None

    async def create(self, uid: str, data: dict[str, Any]) -> None:
        """Create only; DocumentExistsError if a profile is already there."""
        await self._coll.create(uid, data)

    async def stream_legacy(self) -> AsyncIterator[tuple[str, dict[str, Any]]]:
        async for snapshot in self._client.collection(LEGACY_COLLECTION_USERS).stream():
            yield snapshot.id, snapshot.to_dict()
