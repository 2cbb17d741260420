"""Task definition API: an admin manages their coffeeshop's tasks."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from coffeetasks.api.v1.dependencies import get_admin_coffeeshop_id, get_task_service
from coffeetasks.application.dtos.task import TaskDefinitionInput
from coffeetasks.application.services import TaskDefinitionService
from coffeetasks.core.limiter import limit_writes
from coffeetasks.domain.entities.task import TaskDefinition
from coffeetasks.schemas.task import TaskCreateRequest, TaskResponse, TaskUpdateRequest

router = APIRouter()

CoffeeshopId = Annotated[str, Depends(get_admin_coffeeshop_id)]
TaskSvc = Annotated[TaskDefinitionService, Depends(get_task_service)]


def _to_response(task: TaskDefinition) -> TaskResponse:
    return TaskResponse(
        id=task.id,
        title=task.title,
        type=task.type,
        active=task.active,
        repeat_type=task.repeat_type,
        days=sorted(task.days),
        scheduled_date=task.scheduled_date,
        expected_finish_time=task.expected_finish_time,
    )


def _to_input(body: TaskCreateRequest | TaskUpdateRequest) -> TaskDefinitionInput:
    data = body.model_dump(exclude_unset=isinstance(body, TaskUpdateRequest), mode="json")
    return TaskDefinitionInput(**data)


@router.post("", response_model=TaskResponse, status_code=201)
@limit_writes
async def create_task(
    request: Request,
    coffeeshop_id: CoffeeshopId,
    body: TaskCreateRequest,
    svc: TaskSvc,
) -> TaskResponse:
    """Create a weekly or one-time task definition."""
    return _to_response(await svc.create_task(coffeeshop_id, _to_input(body)))


@router.get("", response_model=list[TaskResponse])
async def list_tasks(coffeeshop_id: CoffeeshopId, svc: TaskSvc) -> list[TaskResponse]:
    """All definitions of the caller's coffeeshop, inactive included."""
    return [_to_response(t) for t in await svc.list_tasks(coffeeshop_id)]


@router.patch("/{task_id}", response_model=TaskResponse)
@limit_writes
async def update_task(
    request: Request,
    task_id: str,
    coffeeshop_id: CoffeeshopId,
    body: TaskUpdateRequest,
    svc: TaskSvc,
) -> TaskResponse:
    """Partial update; results already materialized keep their snapshot."""
    return _to_response(await svc.update_task(coffeeshop_id, task_id, _to_input(body)))


@router.delete("/{task_id}", response_model=TaskResponse)
@limit_writes
async def deactivate_task(
    request: Request,
    task_id: str,
    coffeeshop_id: CoffeeshopId,
    svc: TaskSvc,
) -> TaskResponse:
    """Deactivate (soft delete): the fan-out stops materializing it."""
    return _to_response(await svc.deactivate_task(coffeeshop_id, task_id))
