"""Firestore-backed coffeeshop repository (implements ICoffeeshopRepository)."""

from __future__ import annotations

from typing import Any

from coffeetasks.application.dtos.coffeeshop import CoffeeshopResult, GeoPoint
from coffeetasks.infrastructure.firebase._rest_client import FirestoreRESTClient
from coffeetasks.infrastructure.firebase.collections import COLLECTION_COFFEESHOPS
from coffeetasks.shared.utils.datetime import utc_now
from coffeetasks.shared.utils.generators import generate_cuid


def _to_result(doc_id: str, data: dict[str, Any]) -> CoffeeshopResult:
    loc = data.get("location")
    location = None
    if isinstance(loc, dict) and "latitude" in loc and "longitude" in loc:
        location = GeoPoint(float(loc["latitude"]), float(loc["longitude"]))
    return CoffeeshopResult(id=doc_id, name=str(data.get("name", "")), location=location)


class FirestoreCoffeeshopRepository:
    """Coffeeshops are top-level documents; tasks and results nest under them."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_COFFEESHOPS)

    async def list_ids(self) -> list[str]:
        """Return every coffeeshop id (paginated listing)."""
        return [snapshot.id async for snapshot in self._coll.stream()]

    async def list_all(self) -> list[CoffeeshopResult]:
        return [
            _to_result(snapshot.id, snapshot.to_dict())
            async for snapshot in self._coll.stream()
        ]

    async def get_by_id(self, coffeeshop_id: str) -> CoffeeshopResult | None:
        if not coffeeshop_id or "/" in coffeeshop_id:
            return None
        doc = await self._coll.document(coffeeshop_id).get()
        if not doc:
            return None
        return _to_result(doc.id, doc.to_dict())

    async def create(self, name: str, location: GeoPoint | None) -> CoffeeshopResult:
        doc_id = generate_cuid()
        await self._coll.create(doc_id, {
            "name": name,
            "location": location.to_dict() if location else None,
            "created_at": utc_now(),
        })
        return CoffeeshopResult(id=doc_id, name=name, location=location)
