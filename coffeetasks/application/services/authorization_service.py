"""Authorization service: role checks against the caller's stored profile."""

from __future__ import annotations

from typing import TYPE_CHECKING

from coffeetasks.application.dtos.user import UserProfileResult
from coffeetasks.domain.enums import Role
from coffeetasks.domain.exceptions import AuthenticationException, AuthorizationException

if TYPE_CHECKING:
    from coffeetasks.application.services.profile_service import ProfileService


class AuthorizationService:
    """Reads the caller's stored role and compares it to the required one."""

    def __init__(self, profile_service: "ProfileService") -> None:
        self._profile_service = profile_service

    async def get_caller(self, uid: str | None) -> UserProfileResult:
        """Return the caller's profile.

        Raises:
            AuthenticationException: No uid (unauthenticated caller).
            AuthorizationException: Authenticated but no stored profile.
        """
        if not uid:
            raise AuthenticationException()
        profile = await self._profile_service.load_profile(uid)
        if profile is None:
            raise AuthorizationException(message="No profile for this account")
        return profile

    async def require_role(
        self, uid: str | None, *roles: Role, action: str | None = None
    ) -> UserProfileResult:
        """Return the caller's profile if their role is one of `roles`.

        Raises:
            AuthenticationException: Unauthenticated caller.
            AuthorizationException: Role not allowed (degraded profiles have the lowest role).
        """
        profile = await self.get_caller(uid)
        if profile.role not in roles:
            raise AuthorizationException(
                required_role="|".join(r.value for r in roles), action=action
            )
        return profile

    @staticmethod
    def require_coffeeshop(profile: UserProfileResult) -> str:
        """Return the caller's coffeeshop id; callers without one cannot act on shop data."""
        if not profile.coffeeshop_id:
            raise AuthorizationException(message="Account is not attached to a coffeeshop")
        return profile.coffeeshop_id
