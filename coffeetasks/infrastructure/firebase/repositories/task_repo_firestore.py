"""Firestore-backed task definition repository (implements ITaskDefinitionRepository)."""

from __future__ import annotations

from coffeetasks.domain.entities.task import TaskDefinition
from coffeetasks.infrastructure.firebase._rest_client import (
    CollectionReference,
    FirestoreRESTClient,
)
from coffeetasks.infrastructure.firebase.collections import (
    COLLECTION_COFFEESHOPS,
    SUBCOLLECTION_TASKS,
)
from coffeetasks.shared.utils.datetime import utc_now


class FirestoreTaskDefinitionRepository:
    """Task definitions live in coffeeshops/{id}/tasks."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    def _tasks(self, coffeeshop_id: str) -> CollectionReference:
        return (
            self._client.collection(COLLECTION_COFFEESHOPS)
            .document(coffeeshop_id)
            .collection(SUBCOLLECTION_TASKS)
        )

    async def list_active(self, coffeeshop_id: str) -> list[TaskDefinition]:
        """Server-side filter on active == true; fields are defaulted in from_document."""
        q = self._tasks(coffeeshop_id).where("active", "==", True)
        return [
            TaskDefinition.from_document(snapshot.id, snapshot.to_dict())
            async for snapshot in q.stream()
        ]

    async def list_all(self, coffeeshop_id: str) -> list[TaskDefinition]:
        return [
            TaskDefinition.from_document(snapshot.id, snapshot.to_dict())
            async for snapshot in self._tasks(coffeeshop_id).stream()
        ]

    async def get(self, coffeeshop_id: str, task_id: str) -> TaskDefinition | None:
        doc = await self._tasks(coffeeshop_id).document(task_id).get()
        if not doc:
            return None
        return TaskDefinition.from_document(doc.id, doc.to_dict())

    async def save(self, coffeeshop_id: str, task: TaskDefinition) -> None:
        """Merge-write so fields the API does not own (e.g. created_by) survive."""
        await self._tasks(coffeeshop_id).document(task.id).set(
            {**task.to_document(), "updated_at": utc_now()}, merge=True
        )
