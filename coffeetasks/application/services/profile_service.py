"""Profile service: load the caller's profile and decide their landing route."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from coffeetasks.application.dtos.coffeeshop import GeoPoint
from coffeetasks.application.dtos.user import UserProfileResult
from coffeetasks.domain.enums import Role

if TYPE_CHECKING:
    from coffeetasks.application.interfaces.repositories import IUserProfileRepository

logger = logging.getLogger(__name__)

HOME_BY_ROLE: dict[Role, str] = {
    Role.SUPERADMIN: "/super",
    Role.ADMIN: "/admin",
}
LOGIN_PATH = "/login"


def home_path_for(role: Role | None) -> str:
    """Landing route for a role; staff and unknown callers go to /login."""
    if role is None:
        return LOGIN_PATH
    return HOME_BY_ROLE.get(role, LOGIN_PATH)


def parse_role(raw: Any) -> Role | None:
    """Stored role, case-insensitive; None when missing or unrecognised."""
    if raw is None:
        return None
    try:
        return Role(str(raw).strip().lower())
    except ValueError:
        return None


def _parse_location(raw: Any) -> GeoPoint | None:
    if not isinstance(raw, dict):
        return None
    try:
        return GeoPoint(float(raw["latitude"]), float(raw["longitude"]))
    except (KeyError, TypeError, ValueError):
        return None


def profile_from_document(uid: str, data: dict[str, Any]) -> UserProfileResult:
    """Build a profile from a stored document; unknown role becomes the lowest role (degraded)."""
    role = parse_role(data.get("role"))
    coffeeshop_id = data.get("coffeeshop_id")
    return UserProfileResult(
        id=uid,
        name=str(data.get("name") or ""),
        role=role or Role.lowest(),
        login=str(data.get("login") or ""),
        coffeeshop_id=None if coffeeshop_id is None else str(coffeeshop_id),
        coffeeshop_location=_parse_location(data.get("coffeeshop_location")),
        degraded=role is None,
    )


class ProfileService:
    """Reads profiles from the canonical users collection only."""

    def __init__(self, user_repo: "IUserProfileRepository") -> None:
        self._user_repo = user_repo

    async def load_profile(self, uid: str) -> UserProfileResult | None:
        """Return the profile for uid, or None if no profile is stored.

        A transient read failure does not propagate: the caller gets a
        degraded profile with the lowest-privilege role so the client stays
        usable.
        """
        try:
            data = await self._user_repo.get_raw(uid)
        except Exception:
            logger.warning("Profile read failed for %s; using lowest role", uid, exc_info=True)
            return UserProfileResult(id=uid, name="", role=Role.lowest(), degraded=True)
        if data is None:
            return None
        return profile_from_document(uid, data)
