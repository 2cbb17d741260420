"""Unit tests for TaskDefinition defaulting, due-date rules and result ids."""

from datetime import date

from coffeetasks.domain.entities.task import (
    TaskDefinition,
    TaskResultSnapshot,
    result_id_for,
)
from coffeetasks.domain.enums import RepeatType, TaskResultStatus, TaskType

WEDNESDAY = date(2024, 6, 5)
SUNDAY = date(2024, 6, 9)
MONDAY = date(2024, 6, 10)


def test_from_document_applies_defaults() -> None:
    """Missing repeat_type is weekly, missing days is empty, missing type is checkbox."""
    task = TaskDefinition.from_document("t1", {"title": "Clean machine", "active": True})
    assert task.repeat_type == RepeatType.WEEKLY
    assert task.days == frozenset()
    assert task.type == TaskType.CHECKBOX
    assert task.active is True


def test_from_document_unknown_repeat_type_is_weekly() -> None:
    """An unrecognised repeat_type is treated as weekly, never as 'every day'."""
    task = TaskDefinition.from_document(
        "t1", {"title": "x", "active": True, "repeat_type": "daily", "days": [3]}
    )
    assert task.repeat_type == RepeatType.WEEKLY
    assert task.is_due_on(WEDNESDAY)
    assert not task.is_due_on(MONDAY)


def test_from_document_active_must_be_true_boolean() -> None:
    """Only active == True is active; truthy strings are not."""
    assert not TaskDefinition.from_document("t", {"active": "yes"}).active
    assert not TaskDefinition.from_document("t", {}).active


def test_from_document_drops_malformed_days() -> None:
    """Days outside 1..7, strings and booleans are ignored."""
    task = TaskDefinition.from_document(
        "t", {"active": True, "days": [0, 1, "3", 8, True, 7]}
    )
    assert task.days == frozenset({1, 7})


def test_weekly_with_empty_days_is_never_due() -> None:
    task = TaskDefinition(id="t", title="x", days=frozenset())
    assert not task.is_due_on(WEDNESDAY)
    assert not task.is_due_on(SUNDAY)


def test_weekly_sunday_is_day_seven() -> None:
    """Sunday maps to 7 (ISO), not 0."""
    assert TaskDefinition(id="t", days=frozenset({7})).is_due_on(SUNDAY)
    assert not TaskDefinition(id="t", days=frozenset({0})).is_due_on(SUNDAY)


def test_one_time_due_only_on_scheduled_date() -> None:
    task = TaskDefinition(
        id="t2", repeat_type=RepeatType.ONE_TIME, scheduled_date="2024-06-10"
    )
    assert task.is_due_on(MONDAY)
    assert not task.is_due_on(WEDNESDAY)


def test_one_time_compares_exact_zero_padded_string() -> None:
    """A non-padded scheduled_date never matches."""
    task = TaskDefinition(
        id="t2", repeat_type=RepeatType.ONE_TIME, scheduled_date="2024-6-10"
    )
    assert not task.is_due_on(MONDAY)


def test_one_time_without_date_is_never_due() -> None:
    task = TaskDefinition(id="t2", repeat_type=RepeatType.ONE_TIME)
    assert not task.is_due_on(MONDAY)


def test_result_id_is_task_id_and_day() -> None:
    assert result_id_for("t1", WEDNESDAY) == "t1_2024-06-05"


def test_snapshot_copies_static_fields_with_not_done_status() -> None:
    task = TaskDefinition(
        id="t1",
        title="Clean machine",
        type=TaskType.PHOTO,
        days=frozenset({3}),
        expected_finish_time="09:00",
    )
    snap = TaskResultSnapshot.for_day(task, WEDNESDAY)
    assert snap.id == "t1_2024-06-05"
    assert snap.to_document() == {
        "task_id": "t1",
        "title": "Clean machine",
        "type": "photo",
        "status": TaskResultStatus.NOT_DONE.value,
        "date": "2024-06-05",
        "expected_finish_time": "09:00",
    }
