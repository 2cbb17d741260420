"""Account API: superadmin creates a login and its profile in one call."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from coffeetasks.api.v1.dependencies import get_account_service, require_superadmin
from coffeetasks.application.dtos.user import AccountCreate, UserProfileResult
from coffeetasks.application.services import AccountService
from coffeetasks.core.limiter import limit_create_account
from coffeetasks.schemas.account import AccountCreateRequest, AccountCreateResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=AccountCreateResponse, status_code=201)
@limit_create_account
async def create_account(
    request: Request,
    caller: Annotated[UserProfileResult, Depends(require_superadmin)],
    body: AccountCreateRequest,
    account_svc: Annotated[AccountService, Depends(get_account_service)],
) -> AccountCreateResponse:
    """Create a login (email/password) and its profile.

    Caller must be authenticated and have stored role superadmin; that is
    checked before the body is validated, so an unauthorized caller never
    learns anything about the payload. Returns 409 when the email exists.
    """
    result = await account_svc.create_account(
        caller.id,
        AccountCreate(
            email=str(body.email),
            password=body.password,
            name=body.name,
            role=body.role.value,
            coffeeshop_id=body.coffeeshop_id,
        ),
    )
    return AccountCreateResponse(uid=result.uid)
