"""Task result API: staff submit, admins review, both list a day's results."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from coffeetasks.api.v1.dependencies import (
    get_admin_coffeeshop_id,
    get_caller_coffeeshop_id,
    get_task_result_service,
    require_member,
)
from coffeetasks.application.dtos.task import TaskResultRecord
from coffeetasks.application.dtos.user import UserProfileResult
from coffeetasks.application.services import TaskResultService
from coffeetasks.core.limiter import limit_writes
from coffeetasks.schemas.task import (
    TaskResultResponse,
    TaskResultReviewRequest,
    TaskResultSubmitRequest,
)

router = APIRouter()

ResultSvc = Annotated[TaskResultService, Depends(get_task_result_service)]


def _to_response(record: TaskResultRecord) -> TaskResultResponse:
    return TaskResultResponse(
        id=record.id,
        task_id=record.task_id,
        title=record.title,
        type=record.type,
        status=record.status,
        date=record.date,
        expected_finish_time=record.expected_finish_time,
        user_id=record.user_id,
        photo_url=record.photo_url,
        review_comment=record.review_comment,
        actual_finish_time=record.actual_finish_time,
        created_at=record.created_at,
    )


@router.get("", response_model=list[TaskResultResponse])
async def list_task_results(
    coffeeshop_id: Annotated[str, Depends(get_caller_coffeeshop_id)],
    svc: ResultSvc,
    date: str = Query(..., description="Calendar day, YYYY-MM-DD"),
) -> list[TaskResultResponse]:
    """Results of one day for the caller's coffeeshop, ordered by expected finish time."""
    return [_to_response(r) for r in await svc.list_for_day(coffeeshop_id, date)]


@router.post("/{result_id}/submit", response_model=TaskResultResponse)
@limit_writes
async def submit_task_result(
    request: Request,
    result_id: str,
    coffeeshop_id: Annotated[str, Depends(get_caller_coffeeshop_id)],
    profile: Annotated[UserProfileResult, Depends(require_member)],
    body: TaskResultSubmitRequest,
    svc: ResultSvc,
) -> TaskResultResponse:
    """Mark a result done; it moves to In_Review. Photo tasks need photo_url."""
    record = await svc.submit(coffeeshop_id, result_id, profile.id, body.photo_url)
    return _to_response(record)


@router.post("/{result_id}/review", response_model=TaskResultResponse)
@limit_writes
async def review_task_result(
    request: Request,
    result_id: str,
    coffeeshop_id: Annotated[str, Depends(get_admin_coffeeshop_id)],
    body: TaskResultReviewRequest,
    svc: ResultSvc,
) -> TaskResultResponse:
    """Approve or reject a result that is In_Review."""
    record = await svc.review(
        coffeeshop_id, result_id, body.outcome.value, body.review_comment
    )
    return _to_response(record)
