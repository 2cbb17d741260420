"""Caller identity and role dependencies.

Authentication (Bearer Firebase ID token) and authorization (role read from
the caller's stored profile) run as dependencies so they are resolved before
the request body is validated.
"""

from __future__ import annotations

from typing import Annotated, Any, Callable, Coroutine

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from coffeetasks.api.v1.dependencies.store import get_user_profile_repo
from coffeetasks.application.dtos.user import UserProfileResult
from coffeetasks.application.interfaces.repositories import IUserProfileRepository
from coffeetasks.application.services import AuthorizationService, ProfileService
from coffeetasks.domain.enums import Role
from coffeetasks.domain.exceptions import (
    AuthenticationException,
    StoreNotConfiguredException,
)
from coffeetasks.infrastructure.security import FirebaseTokenVerifier

security = HTTPBearer(auto_error=False)


def get_token_verifier(request: Request) -> FirebaseTokenVerifier:
    verifier = getattr(request.app.state, "token_verifier", None)
    if verifier is None:
        raise StoreNotConfiguredException("Firebase Auth is not configured")
    return verifier


async def get_caller_uid(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> str:
    """Verify the Bearer ID token and return the caller's uid.

    Raises:
        AuthenticationException: Missing, malformed, expired or foreign token.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationException()
    verifier = get_token_verifier(request)
    try:
        return await verifier.verify(credentials.credentials)
    except ValueError as e:
        raise AuthenticationException(str(e)) from e


def get_profile_service(
    user_repo: Annotated[IUserProfileRepository, Depends(get_user_profile_repo)],
) -> ProfileService:
    return ProfileService(user_repo)


def get_authorization_service(
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
) -> AuthorizationService:
    return AuthorizationService(profile_service)


async def get_current_profile(
    uid: Annotated[str, Depends(get_caller_uid)],
    authz: Annotated[AuthorizationService, Depends(get_authorization_service)],
) -> UserProfileResult:
    """Stored profile of the caller (any role)."""
    return await authz.get_caller(uid)


def require_role(
    *roles: Role,
) -> Callable[..., Coroutine[Any, Any, UserProfileResult]]:
    """Dependency factory: caller's stored role must be one of `roles`.

    Usage: Depends(require_role(Role.SUPERADMIN))
    """

    async def _check(
        uid: Annotated[str, Depends(get_caller_uid)],
        authz: Annotated[AuthorizationService, Depends(get_authorization_service)],
    ) -> UserProfileResult:
        return await authz.require_role(uid, *roles)

    return _check


require_superadmin = require_role(Role.SUPERADMIN)
require_admin = require_role(Role.ADMIN)
require_member = require_role(Role.ADMIN, Role.STAFF)


def get_caller_coffeeshop_id(
    profile: Annotated[UserProfileResult, Depends(require_member)],
) -> str:
    """Coffeeshop the caller (admin or staff) belongs to."""
    return AuthorizationService.require_coffeeshop(profile)


def get_admin_coffeeshop_id(
    profile: Annotated[UserProfileResult, Depends(require_admin)],
) -> str:
    """Coffeeshop the caller administers."""
    return AuthorizationService.require_coffeeshop(profile)
