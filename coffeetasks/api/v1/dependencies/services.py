"""Service and use case dependencies (composition root)."""

from __future__ import annotations

import secrets
from typing import Annotated

from fastapi import Depends, HTTPException, Request

from coffeetasks.api.v1.dependencies.auth import get_authorization_service
from coffeetasks.api.v1.dependencies.store import (
    get_auth_client,
    get_coffeeshop_repo,
    get_task_repo,
    get_task_result_repo,
    get_user_profile_repo,
)
from coffeetasks.application.interfaces.repositories import (
    IAuthProvider,
    ICoffeeshopRepository,
    ITaskDefinitionRepository,
    ITaskResultRepository,
    IUserProfileRepository,
)
from coffeetasks.application.services import (
    AccountService,
    AuthorizationService,
    CoffeeshopService,
    TaskDefinitionService,
    TaskResultService,
)
from coffeetasks.application.use_cases.fanout import RunDailyFanoutUseCase
from coffeetasks.core.config import get_settings
from coffeetasks.domain.exceptions import AuthenticationException


def get_account_service(
    user_repo: Annotated[IUserProfileRepository, Depends(get_user_profile_repo)],
    coffeeshop_repo: Annotated[ICoffeeshopRepository, Depends(get_coffeeshop_repo)],
    auth_provider: Annotated[IAuthProvider, Depends(get_auth_client)],
    authorization: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> AccountService:
    return AccountService(user_repo, coffeeshop_repo, auth_provider, authorization)


def get_coffeeshop_service(
    coffeeshop_repo: Annotated[ICoffeeshopRepository, Depends(get_coffeeshop_repo)],
) -> CoffeeshopService:
    return CoffeeshopService(coffeeshop_repo)


def get_task_service(
    task_repo: Annotated[ITaskDefinitionRepository, Depends(get_task_repo)],
) -> TaskDefinitionService:
    return TaskDefinitionService(task_repo)


def get_task_result_service(
    result_repo: Annotated[ITaskResultRepository, Depends(get_task_result_repo)],
) -> TaskResultService:
    return TaskResultService(result_repo)


def get_fanout_use_case(
    coffeeshop_repo: Annotated[ICoffeeshopRepository, Depends(get_coffeeshop_repo)],
    task_repo: Annotated[ITaskDefinitionRepository, Depends(get_task_repo)],
    result_repo: Annotated[ITaskResultRepository, Depends(get_task_result_repo)],
) -> RunDailyFanoutUseCase:
    """Fan-out use case evaluated in the configured zone."""
    return RunDailyFanoutUseCase(
        coffeeshop_repo, task_repo, result_repo, get_settings().fanout_timezone
    )


def verify_scheduler_secret(request: Request) -> None:
    """Scheduler must send X-Scheduler-Secret equal to FANOUT_TRIGGER_SECRET.

    Raises:
        HTTPException 503: Secret not configured (trigger disabled).
        AuthenticationException: Header missing or wrong.
    """
    settings = get_settings()
    expected = (
        settings.fanout_trigger_secret.get_secret_value()
        if settings.fanout_trigger_secret
        else ""
    )
    if not expected:
        raise HTTPException(
            status_code=503,
            detail="Fan-out trigger is not configured (FANOUT_TRIGGER_SECRET is not set).",
        )
    header_secret = request.headers.get("X-Scheduler-Secret")
    if not header_secret or not secrets.compare_digest(header_secret, expected):
        raise AuthenticationException("Invalid scheduler secret")
