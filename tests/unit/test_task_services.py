"""Unit tests for TaskDefinitionService and TaskResultService."""

import pytest

from coffeetasks.application.dtos.task import TaskDefinitionInput
from coffeetasks.application.services import TaskDefinitionService, TaskResultService
from coffeetasks.domain.enums import RepeatType, TaskResultStatus
from coffeetasks.domain.exceptions import (
    InvalidStatusTransitionException,
    ResourceNotFoundException,
    ValidationException,
)
from tests.fakes import SHOP_ID, InMemoryTaskDefinitionRepository, InMemoryTaskResultRepository


@pytest.mark.asyncio
async def test_create_weekly_task() -> None:
    repo = InMemoryTaskDefinitionRepository()
    task = await TaskDefinitionService(repo).create_task(
        SHOP_ID, TaskDefinitionInput(title=" Clean machine ", days=[5, 1, 3])
    )
    assert task.title == "Clean machine"
    assert task.repeat_type == RepeatType.WEEKLY
    assert repo.docs[SHOP_ID][task.id]["days"] == [1, 3, 5]
    assert repo.docs[SHOP_ID][task.id]["active"] is True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "data,field",
    [
        (TaskDefinitionInput(title="x", days=[]), "days"),
        (TaskDefinitionInput(title="x", days=[8]), "days"),
        (TaskDefinitionInput(title="", days=[1]), "title"),
        (TaskDefinitionInput(title="x", repeat_type="one_time"), "scheduled_date"),
        (
            TaskDefinitionInput(title="x", repeat_type="one_time", scheduled_date="2024-6-1"),
            "scheduled_date",
        ),
        (TaskDefinitionInput(title="x", days=[1], expected_finish_time="25:00"), "expected_finish_time"),
        (TaskDefinitionInput(title="x", days=[1], type="video"), "type"),
    ],
)
async def test_create_rejects_unschedulable_definitions(
    data: TaskDefinitionInput, field: str
) -> None:
    repo = InMemoryTaskDefinitionRepository()
    with pytest.raises(ValidationException) as exc_info:
        await TaskDefinitionService(repo).create_task(SHOP_ID, data)
    assert exc_info.value.details["field"] == field
    assert repo.docs == {}


@pytest.mark.asyncio
async def test_update_is_partial() -> None:
    repo = InMemoryTaskDefinitionRepository()
    repo.seed(SHOP_ID, "t1", {"title": "Clean", "active": True, "days": [1]})
    task = await TaskDefinitionService(repo).update_task(
        SHOP_ID, "t1", TaskDefinitionInput(expected_finish_time="10:30")
    )
    assert task.title == "Clean"
    assert task.days == frozenset({1})
    assert task.expected_finish_time == "10:30"


@pytest.mark.asyncio
async def test_update_unknown_task_raises_not_found() -> None:
    with pytest.raises(ResourceNotFoundException):
        await TaskDefinitionService(InMemoryTaskDefinitionRepository()).update_task(
            SHOP_ID, "nope", TaskDefinitionInput(title="x")
        )


@pytest.mark.asyncio
async def test_deactivate_works_on_malformed_definition() -> None:
    """A legacy definition with no days can still be switched off."""
    repo = InMemoryTaskDefinitionRepository()
    repo.seed(SHOP_ID, "t1", {"title": "", "active": True, "repeat_type": "weekly"})
    task = await TaskDefinitionService(repo).deactivate_task(SHOP_ID, "t1")
    assert task.active is False
    assert repo.docs[SHOP_ID]["t1"]["active"] is False


def _results(status: str = "Not_Done", type_: str = "checkbox") -> InMemoryTaskResultRepository:
    repo = InMemoryTaskResultRepository()
    repo.seed(
        SHOP_ID,
        "t1_2024-06-05",
        {
            "task_id": "t1",
            "title": "Clean",
            "type": type_,
            "status": status,
            "date": "2024-06-05",
            "expected_finish_time": "09:00",
        },
    )
    return repo


@pytest.mark.asyncio
async def test_submit_moves_to_in_review() -> None:
    repo = _results()
    record = await TaskResultService(repo).submit(SHOP_ID, "t1_2024-06-05", "staff-uid")
    assert record.status == TaskResultStatus.IN_REVIEW
    assert record.user_id == "staff-uid"
    assert record.actual_finish_time is not None


@pytest.mark.asyncio
async def test_submit_photo_task_requires_photo_url() -> None:
    repo = _results(type_="photo")
    svc = TaskResultService(repo)
    with pytest.raises(ValidationException):
        await svc.submit(SHOP_ID, "t1_2024-06-05", "staff-uid")
    record = await svc.submit(SHOP_ID, "t1_2024-06-05", "staff-uid", "https://img/1.jpg")
    assert record.photo_url == "https://img/1.jpg"


@pytest.mark.asyncio
async def test_rejected_result_can_be_resubmitted() -> None:
    repo = _results(status="Rejected")
    record = await TaskResultService(repo).submit(SHOP_ID, "t1_2024-06-05", "staff-uid")
    assert record.status == TaskResultStatus.IN_REVIEW


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["In_Review", "Approved"])
async def test_submit_rejects_invalid_transition(status: str) -> None:
    repo = _results(status=status)
    with pytest.raises(InvalidStatusTransitionException):
        await TaskResultService(repo).submit(SHOP_ID, "t1_2024-06-05", "staff-uid")


@pytest.mark.asyncio
async def test_review_approves_in_review_result() -> None:
    repo = _results(status="In_Review")
    record = await TaskResultService(repo).review(
        SHOP_ID, "t1_2024-06-05", "Approved", "Looks clean"
    )
    assert record.status == TaskResultStatus.APPROVED
    assert record.review_comment == "Looks clean"


@pytest.mark.asyncio
async def test_review_requires_in_review_and_valid_outcome() -> None:
    svc = TaskResultService(_results(status="Not_Done"))
    with pytest.raises(InvalidStatusTransitionException):
        await svc.review(SHOP_ID, "t1_2024-06-05", "Approved")
    with pytest.raises(ValidationException):
        await svc.review(SHOP_ID, "t1_2024-06-05", "In_Review")


@pytest.mark.asyncio
async def test_list_for_day_validates_date() -> None:
    svc = TaskResultService(_results())
    assert [r.id for r in await svc.list_for_day(SHOP_ID, "2024-06-05")] == ["t1_2024-06-05"]
    with pytest.raises(ValidationException):
        await svc.list_for_day(SHOP_ID, "June 5")
