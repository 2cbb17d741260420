"""Task definition and task result domain entities.

A TaskDefinition is the typed, defaulted view of a task document. All
defaulting of loosely-typed stored fields happens once in from_document;
recurrence logic downstream never re-derives defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from coffeetasks.domain.enums import RepeatType, TaskResultStatus, TaskType
from coffeetasks.shared.utils.datetime import format_ymd, iso_weekday

RESULT_ID_SEPARATOR = "_"


def result_id_for(task_id: str, day: date) -> str:
    """Deterministic task result id: one result per task per calendar day."""
    return f"{task_id}{RESULT_ID_SEPARATOR}{format_ymd(day)}"


def _coerce_days(raw: Any) -> frozenset[int]:
    """Keep ISO weekday ints 1..7; anything else (incl. bools) is dropped."""
    if not isinstance(raw, (list, tuple)):
        return frozenset()
    return frozenset(
        d for d in raw if isinstance(d, int) and not isinstance(d, bool) and 1 <= d <= 7
    )


def _coerce_repeat_type(raw: Any) -> RepeatType:
    if raw == RepeatType.ONE_TIME.value:
        return RepeatType.ONE_TIME
    return RepeatType.WEEKLY


def _coerce_task_type(raw: Any) -> TaskType:
    if raw == TaskType.PHOTO.value:
        return TaskType.PHOTO
    return TaskType.CHECKBOX


@dataclass(frozen=True)
class TaskDefinition:
    """Recurring (weekly) or one-time unit of work owned by a coffeeshop.

    Mutated by administrators only; the daily fan-out reads it.
    """

    id: str
    title: str = ""
    type: TaskType = TaskType.CHECKBOX
    active: bool = True
    repeat_type: RepeatType = RepeatType.WEEKLY
    days: frozenset[int] = field(default_factory=frozenset)
    scheduled_date: str | None = None
    expected_finish_time: str | None = None

    @classmethod
    def from_document(cls, doc_id: str, data: dict[str, Any]) -> "TaskDefinition":
        """Build from a stored task document, defaulting malformed fields.

        Never raises for bad field values: a malformed definition must not
        abort processing of its siblings.
        """
        title = data.get("title")
        scheduled = data.get("scheduled_date")
        finish = data.get("expected_finish_time")
        return cls(
            id=doc_id,
            title="" if title is None else str(title),
            type=_coerce_task_type(data.get("type")),
            active=data.get("active") is True,
            repeat_type=_coerce_repeat_type(data.get("repeat_type")),
            days=_coerce_days(data.get("days")),
            scheduled_date=None if scheduled is None else str(scheduled),
            expected_finish_time=None if finish is None else str(finish),
        )

    def is_due_on(self, day: date) -> bool:
        """Return True if this task should get a result on `day`.

        Weekly: ISO weekday of `day` is in `days` (empty set is never due).
        One-time: `scheduled_date` equals `day` as YYYY-MM-DD, exactly.
        """
        if self.repeat_type == RepeatType.ONE_TIME:
            return self.scheduled_date == format_ymd(day)
        return iso_weekday(day) in self.days

    def to_document(self) -> dict[str, Any]:
        """Serialize for storage (days as a sorted list)."""
        return {
            "title": self.title,
            "type": self.type.value,
            "active": self.active,
            "repeat_type": self.repeat_type.value,
            "days": sorted(self.days),
            "scheduled_date": self.scheduled_date,
            "expected_finish_time": self.expected_finish_time,
        }


@dataclass(frozen=True)
class TaskResultSnapshot:
    """Static snapshot written when a task result is first materialized.

    Status starts at Not_Done; created_at is assigned by the store.
    """

    id: str
    task_id: str
    title: str
    type: TaskType
    date: str
    expected_finish_time: str | None
    status: TaskResultStatus = TaskResultStatus.NOT_DONE

    @classmethod
    def for_day(cls, task: TaskDefinition, day: date) -> "TaskResultSnapshot":
        return cls(
            id=result_id_for(task.id, day),
            task_id=task.id,
            title=task.title,
            type=task.type,
            date=format_ymd(day),
            expected_finish_time=task.expected_finish_time,
        )

    def to_document(self) -> dict[str, Any]:
        return {
            "task_id": self.task_id,
            "title": self.title,
            "type": self.type.value,
            "status": self.status.value,
            "date": self.date,
            "expected_finish_time": self.expected_finish_time,
        }
