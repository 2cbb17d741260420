"""Firestore-backed task result repository (implements ITaskResultRepository)."""

from __future__ import annotations

from typing import Any

from coffeetasks.application.dtos.task import TaskResultRecord
from coffeetasks.domain.entities.task import TaskResultSnapshot
from coffeetasks.domain.enums import TaskResultStatus, TaskType
from coffeetasks.domain.exceptions import ResourceNotFoundException
from coffeetasks.infrastructure.firebase._rest_client import (
    SERVER_TIMESTAMP,
    CollectionReference,
    DocumentNotFoundError,
    FirestoreRESTClient,
)
from coffeetasks.infrastructure.firebase.collections import (
    COLLECTION_COFFEESHOPS,
    SUBCOLLECTION_TASK_RESULTS,
)
from coffeetasks.shared.utils.datetime import from_timestamp_ms_utc


def _status(raw: Any) -> TaskResultStatus:
    try:
        return TaskResultStatus(raw)
    except ValueError:
        return TaskResultStatus.NOT_DONE


def _finish_time(raw: Any):
    # The SPA writes epoch milliseconds; the API writes timestamps.
    if isinstance(raw, int) and not isinstance(raw, bool):
        return from_timestamp_ms_utc(raw)
    return raw


def _to_record(doc_id: str, d: dict[str, Any]) -> TaskResultRecord:
    return TaskResultRecord(
        id=doc_id,
        task_id=d.get("task_id"),
        title=str(d.get("title") or ""),
        type=TaskType.PHOTO if d.get("type") == TaskType.PHOTO.value else TaskType.CHECKBOX,
        status=_status(d.get("status")),
        date=str(d.get("date") or ""),
        expected_finish_time=d.get("expected_finish_time"),
        user_id=d.get("user_id"),
        photo_url=d.get("photo_url"),
        review_comment=d.get("review_comment"),
        actual_finish_time=_finish_time(d.get("actual_finish_time")),
        created_at=d.get("created_at"),
    )


class FirestoreTaskResultRepository:
    """Task results live in coffeeshops/{id}/task_results/{task_id}_{date}."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    def _results(self, coffeeshop_id: str) -> CollectionReference:
        return (
            self._client.collection(COLLECTION_COFFEESHOPS)
            .document(coffeeshop_id)
            .collection(SUBCOLLECTION_TASK_RESULTS)
        )

    async def existing_ids(self, coffeeshop_id: str, result_ids: list[str]) -> set[str]:
        """One :batchGet for all candidate ids."""
        coll = self._results(coffeeshop_id)
        found = await self._client.get_all(coll.document(rid) for rid in result_ids)
        return {snapshot.id for snapshot in found}

    async def create_many(
        self, coffeeshop_id: str, snapshots: list[TaskResultSnapshot]
    ) -> None:
        """Atomic commit; each write requires the document to be absent.

        Raises:
            DocumentExistsError: A result was created concurrently (nothing written).
        """
        coll = self._results(coffeeshop_id)
        batch = self._client.batch()
        for snap in snapshots:
            batch.create(
                coll.document(snap.id),
                {**snap.to_document(), "created_at": SERVER_TIMESTAMP},
            )
        await batch.commit()

    async def list_by_date(self, coffeeshop_id: str, date: str) -> list[TaskResultRecord]:
        q = self._results(coffeeshop_id).where("date", "==", date)
        records = [_to_record(s.id, s.to_dict()) async for s in q.stream()]
        return sorted(records, key=lambda r: (r.expected_finish_time or "", r.title))

    async def get(self, coffeeshop_id: str, result_id: str) -> TaskResultRecord | None:
        doc = await self._results(coffeeshop_id).document(result_id).get()
        if not doc:
            return None
        return _to_record(doc.id, doc.to_dict())

    async def update_fields(
        self, coffeeshop_id: str, result_id: str, fields: dict[str, Any]
    ) -> None:
        try:
            await self._results(coffeeshop_id).document(result_id).update(fields)
        except DocumentNotFoundError:
            raise ResourceNotFoundException("task_result", result_id) from None
