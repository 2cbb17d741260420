"""DTOs for task definition and task result use cases."""

from dataclasses import dataclass
from datetime import datetime

from coffeetasks.domain.enums import TaskResultStatus, TaskType


@dataclass(frozen=True)
class TaskDefinitionInput:
    """Fields an administrator may set on a task definition (None = unchanged on update)."""

    title: str | None = None
    type: str | None = None
    repeat_type: str | None = None
    days: list[int] | None = None
    scheduled_date: str | None = None
    expected_finish_time: str | None = None
    active: bool | None = None


@dataclass(frozen=True)
class TaskResultRecord:
    """Task result read-model (one per task per day)."""

    id: str
    task_id: str | None
    title: str
    type: TaskType
    status: TaskResultStatus
    date: str
    expected_finish_time: str | None = None
    user_id: str | None = None
    photo_url: str | None = None
    review_comment: str | None = None
    actual_finish_time: datetime | None = None
    created_at: datetime | None = None
