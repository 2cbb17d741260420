"""Task definition and task result API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from coffeetasks.domain.enums import RepeatType, TaskResultStatus, TaskType

_HHMM = r"^([01]\d|2[0-3]):[0-5]\d$"
_YMD = r"^\d{4}-\d{2}-\d{2}$"


class TaskCreateRequest(BaseModel):
    """Request body for creating a task definition.

    Weekly tasks need at least one day (1=Monday..7=Sunday); one-time tasks
    need scheduled_date.
    """

    title: str = Field(..., min_length=1, max_length=255)
    type: TaskType = TaskType.CHECKBOX
    repeat_type: RepeatType = RepeatType.WEEKLY
    days: list[int] = Field(default_factory=list)
    scheduled_date: str | None = Field(default=None, pattern=_YMD)
    expected_finish_time: str | None = Field(default=None, pattern=_HHMM)
    active: bool = True


class TaskUpdateRequest(BaseModel):
    """Partial update; omitted fields are unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    type: TaskType | None = None
    repeat_type: RepeatType | None = None
    days: list[int] | None = None
    scheduled_date: str | None = Field(default=None, pattern=_YMD)
    expected_finish_time: str | None = Field(default=None, pattern=_HHMM)
    active: bool | None = None


class TaskResponse(BaseModel):
    id: str
    title: str
    type: TaskType
    active: bool
    repeat_type: RepeatType
    days: list[int]
    scheduled_date: str | None = None
    expected_finish_time: str | None = None


class TaskResultSubmitRequest(BaseModel):
    photo_url: str | None = Field(default=None, max_length=2048)


class TaskResultReviewRequest(BaseModel):
    outcome: TaskResultStatus
    review_comment: str | None = Field(default=None, max_length=2000)


class TaskResultResponse(BaseModel):
    id: str
    task_id: str | None = None
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
