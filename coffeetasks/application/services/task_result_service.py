"""Task result service: the staff submit / admin review workflow on materialized results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from coffeetasks.application.dtos.task import TaskResultRecord
from coffeetasks.domain.enums import TaskResultStatus, TaskType
from coffeetasks.domain.exceptions import (
    InvalidStatusTransitionException,
    ResourceNotFoundException,
    ValidationException,
)
from coffeetasks.shared.utils.datetime import parse_ymd, utc_now

if TYPE_CHECKING:
    from coffeetasks.application.interfaces.repositories import ITaskResultRepository

# Allowed status moves. Not_Done is only ever written by the fan-out.
SUBMITTABLE = frozenset({TaskResultStatus.NOT_DONE, TaskResultStatus.REJECTED})
REVIEW_OUTCOMES = frozenset({TaskResultStatus.APPROVED, TaskResultStatus.REJECTED})


class TaskResultService:
    def __init__(self, result_repo: "ITaskResultRepository") -> None:
        self._result_repo = result_repo

    async def list_for_day(self, coffeeshop_id: str, date: str) -> list[TaskResultRecord]:
        try:
            parse_ymd(date)
        except ValueError:
            raise ValidationException("date must be YYYY-MM-DD", field="date") from None
        return await self._result_repo.list_by_date(coffeeshop_id, date)

    async def _get(self, coffeeshop_id: str, result_id: str) -> TaskResultRecord:
        record = await self._result_repo.get(coffeeshop_id, result_id)
        if record is None:
            raise ResourceNotFoundException("task_result", result_id)
        return record

    async def submit(
        self,
        coffeeshop_id: str,
        result_id: str,
        user_id: str,
        photo_url: str | None = None,
    ) -> TaskResultRecord:
        """Staff marks a result as done; it goes to review.

        Raises:
            ResourceNotFoundException: Unknown result.
            InvalidStatusTransitionException: Already in review or approved.
            ValidationException: Photo task without photo_url.
        """
        record = await self._get(coffeeshop_id, result_id)
        if record.status not in SUBMITTABLE:
            raise InvalidStatusTransitionException(
                result_id, record.status.value, TaskResultStatus.IN_REVIEW.value
            )
        if record.type == TaskType.PHOTO and not photo_url:
            raise ValidationException("Photo tasks need photo_url", field="photo_url")
        fields: dict[str, Any] = {
            "status": TaskResultStatus.IN_REVIEW.value,
            "user_id": user_id,
            "photo_url": photo_url,
            "actual_finish_time": utc_now(),
        }
        await self._result_repo.update_fields(coffeeshop_id, result_id, fields)
        return await self._get(coffeeshop_id, result_id)

    async def review(
        self,
        coffeeshop_id: str,
        result_id: str,
        outcome: str,
        review_comment: str | None = None,
    ) -> TaskResultRecord:
        """Admin approves or rejects a result that is in review."""
        try:
            new_status = TaskResultStatus(outcome)
        except ValueError:
            new_status = None
        if new_status not in REVIEW_OUTCOMES:
            raise ValidationException(
                "outcome must be Approved or Rejected", field="outcome"
            )
        record = await self._get(coffeeshop_id, result_id)
        if record.status != TaskResultStatus.IN_REVIEW:
            raise InvalidStatusTransitionException(
                result_id, record.status.value, new_status.value
            )
        await self._result_repo.update_fields(
            coffeeshop_id,
            result_id,
            {"status": new_status.value, "review_comment": review_comment},
        )
        return await self._get(coffeeshop_id, result_id)
