"""Task definition service: admin CRUD for a coffeeshop's recurring and one-time tasks."""

from __future__ import annotations

import dataclasses
import re
from typing import TYPE_CHECKING

from coffeetasks.application.dtos.task import TaskDefinitionInput
from coffeetasks.domain.entities.task import TaskDefinition
from coffeetasks.domain.enums import RepeatType, TaskType
from coffeetasks.domain.exceptions import ResourceNotFoundException, ValidationException
from coffeetasks.shared.utils.datetime import parse_ymd
from coffeetasks.shared.utils.generators import generate_cuid

if TYPE_CHECKING:
    from coffeetasks.application.interfaces.repositories import ITaskDefinitionRepository

_FINISH_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def _validated(task: TaskDefinition) -> TaskDefinition:
    """Check a definition is schedulable. Raises ValidationException."""
    if not task.title.strip():
        raise ValidationException("Title is required", field="title")
    if task.repeat_type == RepeatType.WEEKLY and not task.days:
        raise ValidationException(
            "Weekly tasks need at least one day (1=Monday..7=Sunday)", field="days"
        )
    if task.repeat_type == RepeatType.ONE_TIME:
        if not task.scheduled_date:
            raise ValidationException(
                "One-time tasks need scheduled_date (YYYY-MM-DD)", field="scheduled_date"
            )
        try:
            parse_ymd(task.scheduled_date)
        except ValueError:
            raise ValidationException(
                "scheduled_date must be YYYY-MM-DD", field="scheduled_date"
            ) from None
    if task.expected_finish_time is not None and not _FINISH_TIME_RE.match(
        task.expected_finish_time
    ):
        raise ValidationException(
            "expected_finish_time must be HH:MM", field="expected_finish_time"
        )
    return task


def _apply(task: TaskDefinition, data: TaskDefinitionInput) -> TaskDefinition:
    """Return task with every non-None input field applied."""
    changes: dict = {}
    if data.title is not None:
        changes["title"] = data.title.strip()
    if data.type is not None:
        if data.type not in TaskType.values():
            raise ValidationException(
                f"type must be one of {', '.join(TaskType.values())}", field="type"
            )
        changes["type"] = TaskType(data.type)
    if data.repeat_type is not None:
        if data.repeat_type not in RepeatType.values():
            raise ValidationException(
                f"repeat_type must be one of {', '.join(RepeatType.values())}",
                field="repeat_type",
            )
        changes["repeat_type"] = RepeatType(data.repeat_type)
    if data.days is not None:
        if any(d < 1 or d > 7 for d in data.days):
            raise ValidationException("days must be in 1..7", field="days")
        changes["days"] = frozenset(data.days)
    if data.scheduled_date is not None:
        changes["scheduled_date"] = data.scheduled_date
    if data.expected_finish_time is not None:
        changes["expected_finish_time"] = data.expected_finish_time
    if data.active is not None:
        changes["active"] = data.active
    return dataclasses.replace(task, **changes)


class TaskDefinitionService:
    """Create, list, update and deactivate task definitions of one coffeeshop."""

    def __init__(self, task_repo: "ITaskDefinitionRepository") -> None:
        self._task_repo = task_repo

    async def create_task(
        self, coffeeshop_id: str, data: TaskDefinitionInput
    ) -> TaskDefinition:
        task = _validated(_apply(TaskDefinition(id=generate_cuid()), data))
        await self._task_repo.save(coffeeshop_id, task)
        return task

    async def list_tasks(self, coffeeshop_id: str) -> list[TaskDefinition]:
        return await self._task_repo.list_all(coffeeshop_id)

    async def update_task(
        self, coffeeshop_id: str, task_id: str, data: TaskDefinitionInput
    ) -> TaskDefinition:
        """Partial update. Raises ResourceNotFoundException, ValidationException."""
        current = await self._task_repo.get(coffeeshop_id, task_id)
        if current is None:
            raise ResourceNotFoundException("task", task_id)
        task = _validated(_apply(current, data))
        await self._task_repo.save(coffeeshop_id, task)
        return task

    async def deactivate_task(self, coffeeshop_id: str, task_id: str) -> TaskDefinition:
        """Soft delete: the fan-out only reads active tasks; past results stay.

        Skips validation so malformed legacy definitions can still be switched off.
        """
        current = await self._task_repo.get(coffeeshop_id, task_id)
        if current is None:
            raise ResourceNotFoundException("task", task_id)
        task = dataclasses.replace(current, active=False)
        await self._task_repo.save(coffeeshop_id, task)
        return task
